"""Domain model."""

from .user import (
    DuplicateUserError,
    User,
    UserAlreadyExistsError,
    UserData,
    UserNotFoundError,
    UserRegistryError,
    UserRepository,
)

__all__ = [
    "DuplicateUserError",
    "User",
    "UserAlreadyExistsError",
    "UserData",
    "UserNotFoundError",
    "UserRegistryError",
    "UserRepository",
]
