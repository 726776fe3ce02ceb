import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_registry.domain.user import User  # noqa: E402
from user_registry.infrastructure import InMemoryUserRepository  # noqa: E402
from user_registry.core.logging_config import ROOT_LOGGER_NAME  # noqa: E402


SEEDED = [
    ("test1@mail.com", "test1"),
    ("test2@mail.com", "test2"),
    ("test3@mail.com", "test3"),
]


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def seeded_repository(repository: InMemoryUserRepository) -> InMemoryUserRepository:
    for email, username in SEEDED:
        repository.save(User(email=email, username=username))
    return repository


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attached so later tests never log to a closed stream."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if getattr(handler, "_is_user_registry_cli_handler", False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
