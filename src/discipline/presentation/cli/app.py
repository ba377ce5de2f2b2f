"""Discipline CLI application using Typer.

This module provides command-line utilities for the Discipline backend:
secret generation for deployment configuration, schema management and
running the HTTP API.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from discipline.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
    drop_tables,
)
from discipline_config.settings import get_settings

app = typer.Typer(
    name="discipline",
    help="Discipline - habit tracker backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Discipline configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Discipline Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def _database_display(database_url: str) -> str:
    # Hide credentials in postgres URLs
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _run_schema_action(create: bool) -> None:
    settings = get_settings()
    settings.ensure_sqlite_directory()

    engine = create_engine(settings.database_url)
    try:
        if create:
            await create_tables(engine)
        else:
            await drop_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create all database tables (idempotent)."""
    database_url = get_settings().database_url
    console.print(f"Database: [bold]{_database_display(database_url)}[/bold]")

    asyncio.run(_run_schema_action(create=True))
    console.print("[green]Database initialized successfully![/green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all database tables (DELETES ALL DATA)."""
    database_url = get_settings().database_url
    console.print(f"Database: [bold]{_database_display(database_url)}[/bold]")

    if not yes:
        console.print("[red]WARNING: This will DELETE ALL DATA in the database![/red]")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_run_schema_action(create=False))
    console.print("[green]Database tables dropped successfully![/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address [default: API_HOST]"),
    port: Optional[int] = typer.Option(None, help="Bind port [default: API_PORT]"),
) -> None:
    """Run the HTTP API under uvicorn.

    With API_DEBUG set the server reloads on code changes.
    """
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"Serving Discipline API on [bold]http://{host}:{port}[/bold]")
    uvicorn.run(
        "discipline.presentation.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=settings.api_debug,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
