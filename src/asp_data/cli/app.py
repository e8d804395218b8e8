"""ASP Data CLI application using Typer.

This module provides command-line utilities for maintaining the identity
store configured through settings (``DATABASE_PROVIDER`` and
``DATABASE_CONNECTION_STRING``).
"""

import asyncio

import typer
from rich.console import Console

from asp_config.settings import get_settings
from asp_data.exceptions import ConfigurationError
from asp_data.logging_config import configure_logging
from asp_data.options import DbContextOptions
from asp_data.schema import check_connection, create_tables, drop_tables, reset_tables

app = typer.Typer(
    name="asp-data",
    help="ASP Data - application database context CLI",
    no_args_is_help=True,
)
console = Console()


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _load_options() -> DbContextOptions:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        return DbContextOptions.from_settings(settings)
    except ConfigurationError as e:
        console.print(f"[red]Invalid database configuration:[/red] {e}")
        raise typer.Exit(code=2) from e


@db_app.command("init")
def init_db() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    options = _load_options()
    created = asyncio.run(create_tables(options))
    if created:
        console.print(f"[green]Created tables on[/green] {options.display_url}")
    else:
        console.print(f"[dim]Schema already up to date on {options.display_url}[/dim]")


@db_app.command("drop")
def drop_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all tables (USE WITH CAUTION!)."""
    options = _load_options()
    if not force:
        typer.confirm(
            f"Drop all tables on {options.display_url}?",
            abort=True,
        )
    asyncio.run(drop_tables(options))
    console.print(f"[yellow]Dropped all tables on[/yellow] {options.display_url}")


@db_app.command("reset")
def reset_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop and recreate all tables. All data is lost."""
    options = _load_options()
    if not force:
        typer.confirm(
            f"Reset the database on {options.display_url}? All data is lost",
            abort=True,
        )
    asyncio.run(reset_tables(options))
    console.print(f"[green]Database reset on[/green] {options.display_url}")


@db_app.command("check")
def check_db() -> None:
    """Check that the configured database accepts connections."""
    options = _load_options()
    if asyncio.run(check_connection(options)):
        console.print(f"[green]✓ Connected to[/green] {options.display_url}")
        return
    console.print(f"[red]✗ Cannot connect to[/red] {options.display_url}")
    raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
