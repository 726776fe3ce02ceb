"""Value objects used by the user domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserData:
    """Input of the user registration use case."""

    email: str
    username: str
