"""Application layer: use cases."""

from .base import ApplicationService
from .register_user_service import RegisterUserService

__all__ = ["ApplicationService", "RegisterUserService"]
