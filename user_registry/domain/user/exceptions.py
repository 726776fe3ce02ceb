"""Exceptions raised by the user domain."""


class UserRegistryError(Exception):
    """Base class for user registry errors."""

    def __init__(self, message: str, email: str):
        super().__init__(message)
        self.email = email


class DuplicateUserError(UserRegistryError):
    """A repository was asked to store a second user with the same email.

    Callers must check for an existing user before saving; reaching this
    error means that check was skipped.
    """

    def __init__(self, email: str):
        super().__init__("User already exists", email)


class UserAlreadyExistsError(UserRegistryError):
    """Registration was rejected because the email is already taken."""

    def __init__(self, email: str):
        super().__init__("User already exists", email)


class UserNotFoundError(UserRegistryError):
    """No user is stored under the requested email."""

    def __init__(self, email: str):
        super().__init__("User not found", email)
