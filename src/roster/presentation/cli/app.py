"""Roster CLI application using Typer.

Database schema management, default data seeding and the API server.
"""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from roster.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_engine,
    build_session_maker,
    create_tables,
    drop_tables,
)
from roster.presentation.cli.seed import ADMIN_EMAIL, ADMIN_PASSWORD, seed_defaults
from roster_auth import PasswordHashingService
from roster_config.settings import get_settings

app = typer.Typer(
    name="roster",
    help="Roster - user and role administration CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def _create_schema(database_url: str) -> None:
    engine = build_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _reset_schema(database_url: str) -> None:
    engine = build_engine(database_url)
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    """Create all missing tables (idempotent)."""
    _configure_logging(verbose)
    settings = get_settings()
    asyncio.run(_create_schema(settings.database_url))
    console.print("[bold green]Database schema is up to date[/bold green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", help="Skip confirmation"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Drop and recreate all tables. Every row is lost."""
    _configure_logging(verbose)
    if not force:
        typer.confirm("This deletes all data. Continue?", abort=True)

    settings = get_settings()
    asyncio.run(_reset_schema(settings.database_url))
    console.print("[bold yellow]Database schema recreated[/bold yellow]")


async def _seed(database_url: str, admin_email: str, admin_password: str):
    settings = get_settings()
    engine = build_engine(database_url)
    try:
        await create_tables(engine)
        session_maker = build_session_maker(engine)
        return await seed_defaults(
            lambda: SQLAlchemyUnitOfWork(session_maker),
            PasswordHashingService(
                rounds=settings.bcrypt_rounds,
                min_length=settings.password_min_length,
            ),
            admin_email=admin_email,
            admin_password=admin_password,
        )
    finally:
        await engine.dispose()


@app.command("seed")
def seed(
    admin_email: str = typer.Option(ADMIN_EMAIL, help="Administrator email"),
    admin_password: str = typer.Option(
        ADMIN_PASSWORD,
        help="Administrator password",
        hide_input=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Create the default roles and the administrator account."""
    _configure_logging(verbose)
    settings = get_settings()
    report = asyncio.run(_seed(settings.database_url, admin_email, admin_password))

    table = Table(title="Seed result")
    table.add_column("Role")
    table.add_column("Status")
    for name in report.created_roles:
        table.add_row(name, "[green]created[/green]")
    for name in report.existing_roles:
        table.add_row(name, "[dim]exists[/dim]")
    console.print(table)

    if report.admin_created:
        console.print(f"Administrator [cyan]{admin_email}[/cyan] created")
    else:
        console.print(f"[dim]Administrator {admin_email} already exists[/dim]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "roster.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
