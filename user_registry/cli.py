"""Command-line entry point: seeds an in-memory store and registers one user."""

import logging
from typing import Iterable

import typer
from rich.console import Console
from rich.markup import escape

from user_registry.application import RegisterUserService
from user_registry.core.config import RegistryConfig
from user_registry.core.logging_config import configure_logging
from user_registry.domain.user import (
    User,
    UserData,
    UserNotFoundError,
    UserRegistryError,
    UserRepository,
)
from user_registry.infrastructure import user_repository_factory


logger = logging.getLogger(__name__)

console = Console()
app = typer.Typer(
    name="user-registry",
    help="Register users into an in-memory repository",
    add_completion=False,
)

SEED_USERS = (
    ("test1@mail.com", "test1"),
    ("test2@mail.com", "test2"),
    ("test3@mail.com", "test3"),
)
NEW_USER = UserData(email="test4@mail.com", username="test4")


def _print_users(users: Iterable[User]) -> None:
    for user in users:
        console.print(str(user), markup=False, highlight=False, emoji=False, soft_wrap=True)


def seed(repository: UserRepository) -> None:
    """Store the demo users directly, bypassing the registration service."""
    for email, username in SEED_USERS:
        repository.save(User(email=email, username=username))


def run_demo() -> UserRepository:
    """Seed a fresh repository, then register one more user through the service."""
    repository = user_repository_factory()
    seed(repository)

    lookup_email = SEED_USERS[0][0]
    found = repository.find_by_email(lookup_email)
    if found is None:
        raise UserNotFoundError(lookup_email)
    _print_users([found])
    _print_users(repository.get_all())

    console.print("After", markup=False, highlight=False, emoji=False, soft_wrap=True)
    RegisterUserService(repository).execute(NEW_USER)
    _print_users(repository.get_all())
    return repository


@app.command(help="Run the registration walkthrough against an in-memory store")
def main() -> None:
    cfg = RegistryConfig.from_env()
    warns, errs = cfg.validate()
    if errs:
        console.print("[red]ERROR[/] " + escape(" | ".join(errs)), emoji=False, soft_wrap=True)
        raise typer.Exit(code=1)

    configure_logging(cfg.log_level_value)
    for message in warns:
        logger.warning(message)

    try:
        run_demo()
    except UserRegistryError as exc:
        console.print(
            f"[red]Error[/]: {escape(str(exc))} ({escape(exc.email)})",
            emoji=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
