"""Entities of the user domain."""

from dataclasses import dataclass, replace


@dataclass
class User:
    """An account identity, keyed by email.

    Neither field is validated. Repositories hand out copies, never the
    stored instance.
    """

    email: str
    username: str

    def copy(self) -> "User":
        """Return an independent user equal to this one."""
        return replace(self)

    def __str__(self) -> str:
        return f"email: {self.email}, username: {self.username}"
