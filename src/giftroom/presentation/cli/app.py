"""GiftRoom CLI application using Typer.

This module provides command-line utilities for the GiftRoom backend:
schema management, room inspection and participant removal.
"""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from giftroom.application.commands import DeleteUserCommand, DeleteUserRequest
from giftroom.application.queries import GetRoomByUserCodeQuery
from giftroom.domain.room import Room
from giftroom.domain.shared import ValidationResult
from giftroom.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_database_url,
    drop_tables,
)
from giftroom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from giftroom.presentation.api.dependencies import get_engine, get_session_maker
from giftroom_config.logging_setup import configure_logging
from giftroom_config.settings import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="giftroom",
    help="GiftRoom - gift-exchange rooms CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
room_app = typer.Typer(
    name="room",
    help="Room inspection and editing",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(room_app)


def _confirm_destructive(force: bool) -> None:
    console.print(
        f"Database: [bold]{display_database_url(get_settings().database_url)}[/bold]\n"
    )
    if force:
        return
    console.print("[yellow]WARNING: This will DELETE ALL DATA in the database![/yellow]")
    if not typer.confirm("Continue?"):
        console.print("Aborted.")
        raise typer.Exit(code=1)


async def _run(coro):
    try:
        return await coro
    finally:
        await get_engine().dispose()


def print_room(room: Room) -> None:
    """Render the participants of a room as a table."""
    table = Table(title=f"Room {room.id}: {room.name}")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Phone")
    table.add_column("Email")
    for user in room.users:
        table.add_row(
            str(user.id),
            user.full_name,
            "admin" if user.is_admin else "participant",
            user.phone,
            user.email or "",
        )
    console.print(table)


def print_failure(failure: ValidationResult) -> None:
    console.print(f"[red]{failure.kind.value}[/red]")
    for error in failure.errors:
        field = error.field or "-"
        console.print(f"  [cyan]{field}[/cyan]: {error.message}")


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables."""
    configure_logging()
    asyncio.run(_run(create_tables(get_engine())))
    console.print("[green]Database initialized.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all database tables."""
    configure_logging()
    _confirm_destructive(force)
    asyncio.run(_run(drop_tables(get_engine())))
    console.print("[green]Database tables dropped.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all database tables."""
    configure_logging()
    _confirm_destructive(force)

    async def _reset() -> None:
        engine = get_engine()
        await drop_tables(engine)
        await create_tables(engine)

    asyncio.run(_run(_reset()))
    console.print("[green]Database recreated.[/green]")


@room_app.command("show")
def room_show(
    user_code: str = typer.Argument(..., help="Any participant's code"),
) -> None:
    """Show the room a user code belongs to."""
    configure_logging()

    async def _show() -> Optional[ValidationResult]:
        async with get_session_maker()() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            result = await GetRoomByUserCodeQuery.from_factory(factory).execute(
                user_code
            )
        if result.is_failure:
            return result.error
        print_room(result.value)
        return None

    failure = asyncio.run(_run(_show()))
    if failure is not None:
        print_failure(failure)
        raise typer.Exit(code=1)


@room_app.command("remove-user")
def room_remove_user(
    user_code: str = typer.Argument(..., help="The room admin's code"),
    user_id: int = typer.Argument(..., help="ID of the participant to remove"),
) -> None:
    """Remove a participant from the admin's room."""
    configure_logging()

    async def _remove() -> Optional[ValidationResult]:
        async with get_session_maker()() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            result = await DeleteUserCommand.from_factory(factory).execute(
                DeleteUserRequest(user_code=user_code, user_id=user_id)
            )
            if result.is_failure:
                await session.rollback()
                return result.error
            await session.commit()

        console.print(f"[green]Removed user {user_id}.[/green]")
        if result.value is not None:
            print_room(result.value)
        return None

    failure = asyncio.run(_run(_remove()))
    if failure is not None:
        print_failure(failure)
        raise typer.Exit(code=1)


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "giftroom.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("seed-demo")
def seed_demo() -> None:
    """Create a demo room with an admin and a few participants."""
    from giftroom_demo.seed import main as seed_main

    seed_main()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
