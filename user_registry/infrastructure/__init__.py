"""Infrastructure layer: concrete repository implementations."""

from .user_repository import InMemoryUserRepository, user_repository_factory

__all__ = ["InMemoryUserRepository", "user_repository_factory"]
