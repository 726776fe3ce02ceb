"""User repository interface - domain layer contract.

Concrete stores live in the infrastructure layer. Application services
depend on this contract only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import User


class UserRepository(ABC):
    """Storage contract for users, keyed by email."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Store a new user.

        Args:
            user: user to store. No stored user may share its email.

        Raises:
            DuplicateUserError: a user with the same email is already stored.
        """

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return a copy of the user stored under ``email``, or ``None``."""

    @abstractmethod
    def get_all(self) -> List[User]:
        """Return copies of every stored user in insertion order."""
