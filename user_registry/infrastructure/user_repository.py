"""In-memory user repository - infrastructure layer.

Implements the domain UserRepository contract without any durable storage.
"""

import logging
from typing import List, Optional

from user_registry.domain.user.entities import User
from user_registry.domain.user.exceptions import DuplicateUserError
from user_registry.domain.user.repository import UserRepository


logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Process-local user store backed by a list.

    Users are kept in insertion order. Lookups are linear scans.
    """

    def __init__(self) -> None:
        self._users: List[User] = []

    def save(self, user: User) -> None:
        if self._find(user.email) is not None:
            logger.error("Refusing to store duplicate user %s", user.email)
            raise DuplicateUserError(user.email)
        self._users.append(user.copy())
        logger.debug("Stored user %s (%d total)", user.email, len(self._users))

    def find_by_email(self, email: str) -> Optional[User]:
        user = self._find(email)
        logger.debug("Lookup for %s: %s", email, "hit" if user is not None else "miss")
        if user is None:
            return None
        return user.copy()

    def get_all(self) -> List[User]:
        return [user.copy() for user in self._users]

    def _find(self, email: str) -> Optional[User]:
        for user in self._users:
            if user.email == email:
                return user
        return None


def user_repository_factory() -> UserRepository:
    """Create the repository used by the application."""
    return InMemoryUserRepository()
