"""Snipbox CLI application using Typer.

Runs the web server and manages the database schema.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.table import Table

from snipbox.infrastructure.persistence.sqlalchemy import SessionStoreSQLAlchemy
from snipbox.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    reset_tables,
    table_names,
)
from snipbox.presentation.api.context import AppContext
from snipbox_config.settings import get_settings

app = typer.Typer(
    name="snipbox",
    help="Snipbox - share short-lived text snippets",
    no_args_is_help=True,
)
console = Console()

T = TypeVar("T")


db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the web application with uvicorn."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]{settings.app_name}[/bold green] on "
        f"[cyan]http://{bind_host}:{bind_port}[/cyan] "
        f"[dim]({settings.database_type})[/dim]"
    )
    uvicorn.run(
        "snipbox.presentation.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


async def _with_context(action: Callable[[AppContext], Awaitable[T]]) -> T:
    context = AppContext.from_settings(get_settings())
    try:
        return await action(context)
    finally:
        await context.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing data is left alone."""
    asyncio.run(_with_context(lambda ctx: create_tables(ctx.engine)))
    _print_tables("Tables ready")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop every snipbox table."""
    if not yes:
        typer.confirm("This deletes all users, snippets and sessions. Continue?", abort=True)
    asyncio.run(_with_context(lambda ctx: drop_tables(ctx.engine)))
    console.print("[yellow]All tables dropped[/yellow]")


@db_app.command("reset")
def db_reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop and recreate every snipbox table."""
    if not yes:
        typer.confirm("This deletes all users, snippets and sessions. Continue?", abort=True)
    asyncio.run(_with_context(lambda ctx: reset_tables(ctx.engine)))
    _print_tables("Tables recreated")


@db_app.command("purge-sessions")
def db_purge_sessions() -> None:
    """Delete sessions whose lifetime has ended."""

    async def _purge(context: AppContext) -> int:
        store = SessionStoreSQLAlchemy(
            context.session_maker,
            clock=context.clock,
            timeout=context.db_timeout,
        )
        return await store.delete_expired()

    removed = asyncio.run(_with_context(_purge))
    console.print(f"Removed [bold]{removed}[/bold] expired session(s)")


def _print_tables(title: str) -> None:
    table = Table(title=title)
    table.add_column("Table", style="cyan")
    for name in table_names():
        table.add_row(name)
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
