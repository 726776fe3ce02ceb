"""Public interface of the user domain."""

from .entities import User
from .exceptions import (
    DuplicateUserError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRegistryError,
)
from .repository import UserRepository
from .value_objects import UserData

__all__ = [
    "DuplicateUserError",
    "User",
    "UserAlreadyExistsError",
    "UserData",
    "UserNotFoundError",
    "UserRegistryError",
    "UserRepository",
]
