"""JudgeHub CLI application using Typer.

This module provides command-line utilities for the JudgeHub account store:
creating the schema, registering accounts and inspecting submission stats.
"""

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from judgehub.application.queries import UserSolutionStatsQuery
from judgehub.domain.shared import DomainException
from judgehub.domain.submission import SolutionStats
from judgehub.infrastructure.persistence.sqlalchemy import (
    SubmissionRepositorySQLAlchemy,
)
from judgehub.infrastructure.persistence.sqlalchemy.database import (
    create_tables,
    dispose_engine,
    session_scope,
)
from judgehub_config import get_settings
from judgehub_identity import (
    CredentialService,
    IdentityService,
    PasswordHashingService,
    RegisterUserCommand,
    SetLanguageCommand,
    User,
    UserNotFoundError,
)
from judgehub_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

T = TypeVar("T")

app = typer.Typer(
    name="judgehub",
    help="JudgeHub - online judge account management CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="User account management",
    no_args_is_help=True,
)
app.add_typer(users_app)


def configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, at the level from
    settings for judgehub modules and WARNING for noisy libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    for noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def _credential_service() -> CredentialService:
    settings = get_settings()
    expire_seconds = settings.password_reset_token_expire_seconds
    return CredentialService(
        PasswordHashingService(rounds=settings.password_hash_rounds),
        password_reset_token_expire_seconds=expire_seconds,
    )


def _run(work: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Run ``work`` in a committed session, turning domain errors into exit 1."""

    async def _main() -> T:
        try:
            async with session_scope() as session:
                return await work(session)
        finally:
            await dispose_engine()

    try:
        return asyncio.run(_main())
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e


def _print_stats(user: User, stats: SolutionStats) -> None:
    table = Table(title=f"{user.nickname} ({user.username})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Accepted", str(stats.ac_count))
    table.add_row("Wrong answer", str(stats.wa_count))
    table.add_row("Compile error", str(stats.ce_count))
    table.add_row("Time limit", str(stats.tle_count))
    table.add_row("All submissions", str(stats.all_count))
    console.print(table)

    solved = ", ".join(str(p) for p in stats.solved_problem) or "-"
    unsolved = ", ".join(str(p) for p in stats.unsolved_problem) or "-"
    console.print(f"[green]Solved:[/green] {solved}")
    console.print(f"[yellow]Unsolved:[/yellow] {unsolved}")


@app.callback()
def main() -> None:
    configure_logging()


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables. Existing data is never touched."""

    async def _main() -> None:
        try:
            await create_tables()
        finally:
            await dispose_engine()

    asyncio.run(_main())
    console.print("[green]Database schema is up to date.[/green]")


@users_app.command("register")
def register_user(
    username: str = typer.Argument(..., help="Login name"),
    nickname: str = typer.Option(..., "--nickname", "-n", help="Display name"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
    email: Optional[str] = typer.Option(None, "--email", "-e"),
) -> None:
    """Register a new account."""

    async def work(session: AsyncSession) -> User:
        command = RegisterUserCommand(
            UserRepositorySQLAlchemy(session),
            _credential_service(),
        )
        return await command.execute(username, nickname, password, email=email)

    user = _run(work)
    console.print(f"[green]Registered[/green] {user.username} (id: {user.id})")


@users_app.command("stats")
def show_stats(
    handle: str = typer.Argument(..., help="User id, email or username"),
) -> None:
    """Show verdict counts and solved problems for a user."""

    async def work(session: AsyncSession) -> tuple[User, SolutionStats]:
        identities = IdentityService(
            UserRepositorySQLAlchemy(session),
            _credential_service(),
        )
        user = await identities.find_by_login_handle(handle)
        if user is None:
            raise UserNotFoundError(handle)
        query = UserSolutionStatsQuery(SubmissionRepositorySQLAlchemy(session))
        return user, await query.execute(user.id)

    user, stats = _run(work)
    _print_stats(user, stats)


@users_app.command("set-language")
def set_language(
    user_id: int = typer.Argument(..., help="User id"),
    language: int = typer.Argument(..., help="Language code"),
) -> None:
    """Store the preferred submission language of a user."""

    async def work(session: AsyncSession) -> None:
        await SetLanguageCommand(UserRepositorySQLAlchemy(session)).execute(
            user_id,
            language,
        )

    _run(work)
    console.print(f"[green]Language set to {language} for user {user_id}.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
