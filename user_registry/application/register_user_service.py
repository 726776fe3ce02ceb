"""User registration use case."""

from __future__ import annotations

import logging

from user_registry.domain.user import (
    User,
    UserAlreadyExistsError,
    UserData,
    UserRepository,
)

from .base import ApplicationService


logger = logging.getLogger(__name__)


class RegisterUserService(ApplicationService[UserData, bool]):
    """Register a new user unless the email is already taken.

    The existence check and the save are two separate repository calls, so
    the service must not be shared between threads.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def execute(self, data: UserData) -> bool:
        """Register ``data`` as a new user.

        Returns:
            bool: ``True`` once the user has been stored.

        Raises:
            UserAlreadyExistsError: a user with the same email already exists.
        """
        if self.repository.find_by_email(data.email) is not None:
            logger.warning("Registration rejected, %s already exists", data.email)
            raise UserAlreadyExistsError(data.email)

        self.repository.save(User(email=data.email, username=data.username))
        logger.info("Registered user %s", data.email)
        return True
