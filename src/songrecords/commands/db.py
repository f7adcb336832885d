"""Database commands for songrecords.

Provides CLI commands for database initialization, status checking,
and reset operations.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from songrecords.config import SongRecordsConfig, get_config_path
from songrecords.db.client import DatabaseClient
from songrecords.logging_config import setup_logging

console = Console()
app = typer.Typer(help="Database operations")


def get_db_client(config: SongRecordsConfig) -> DatabaseClient:
    """Get a database client from config.

    Args:
        config: songrecords configuration

    Returns:
        DatabaseClient instance
    """
    return DatabaseClient(config.db_path)


@app.command("init")
def init_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Force re-initialization (destructive)",
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Initialize the local database.

    Creates the database file and the songs table. Use --force to reset
    an existing database.
    """
    try:
        config = SongRecordsConfig.load(config_path)
    except FileNotFoundError:
        # Create default config if it doesn't exist
        config = SongRecordsConfig()
        config.save(config_path)
        console.print(f"[yellow]Created default config at {config_path or get_config_path()}[/yellow]")

    setup_logging(config.log_dir, config.log_level)
    db_path = config.db_path

    if db_path.exists() and not force:
        console.print(f"[yellow]Database already exists at {db_path}[/yellow]")
        console.print("Use --force to re-initialize (this will delete all data)")
        raise typer.Exit(1)

    with get_db_client(config) as client:
        if force and db_path.exists():
            console.print(f"[red]Resetting database at {db_path}...[/red]")
            client.reset_database()
            console.print("[green]Database reset and re-initialized successfully![/green]")
        else:
            console.print(f"Creating database at {db_path}...")
            client.initialize_schema()
            console.print("[green]Database initialized successfully![/green]")

    # Show status after init
    show_status(config_path)


@app.command("status")
def show_status(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show database status and statistics.

    Displays the database file path and size, the number of songs,
    the integrity check result and how many (name, album) pairs are
    stored more than once.
    """
    try:
        config = SongRecordsConfig.load(config_path)
    except FileNotFoundError:
        console.print("[red]Config file not found. Run 'songrecords db init' first.[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_dir, config.log_level)
    db_path = config.db_path
    exists = db_path.exists()

    info_table = Table(title="Database Information")
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="green")

    info_table.add_row("Database Path", str(db_path))
    info_table.add_row("Exists", "Yes" if exists else "No")

    if exists:
        size = db_path.stat().st_size
        info_table.add_row("File Size", f"{size:,} bytes ({size / 1024 / 1024:.2f} MB)")

    console.print(info_table)

    if not exists:
        console.print("\n[yellow]Database does not exist. Run 'songrecords db init' to create it.[/yellow]")
        return

    try:
        with get_db_client(config) as client:
            stats = client.get_stats()
    except Exception as e:
        console.print(f"\n[red]Error reading database: {e}[/red]")
        raise typer.Exit(1)

    stats_table = Table(title="Database Statistics")
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="green")

    stats_table.add_row("Songs", f"{stats.total_songs:,}")
    stats_table.add_row("Integrity Check", "[green]OK[/green]" if stats.integrity_ok else "[red]FAILED[/red]")
    stats_table.add_row(
        "Duplicate Keys",
        f"[red]{stats.duplicate_groups}[/red]" if stats.duplicate_groups else "[green]0[/green]",
    )

    console.print()
    console.print(stats_table)


@app.command("reset")
def reset_db(
    confirm: bool = typer.Option(
        False,
        "--confirm",
        help="Confirm destructive reset (required)",
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Reset the database (DESTRUCTIVE).

    Drops the songs table and creates it again empty.
    This operation cannot be undone.
    """
    if not confirm:
        console.print(Panel.fit(
            "[red]WARNING: This will DELETE ALL DATA in the database![/red]\n\n"
            "Run with --confirm to proceed.",
            title="Database Reset",
            border_style="red",
        ))
        raise typer.Exit(1)

    try:
        config = SongRecordsConfig.load(config_path)
    except FileNotFoundError:
        console.print("[red]Config file not found.[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_dir, config.log_level)
    db_path = config.db_path

    if not db_path.exists():
        console.print("[yellow]Database does not exist. Creating new database...[/yellow]")
        init_db(force=False, config_path=config_path)
        return

    console.print(Panel.fit(
        f"[red]Resetting database at {db_path}...[/red]",
        title="Database Reset",
        border_style="red",
    ))

    with get_db_client(config) as client:
        client.reset_database()

    console.print("[green]Database reset successfully![/green]")


@app.command("path")
def show_path(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show the database file path."""
    try:
        config = SongRecordsConfig.load(config_path)
    except FileNotFoundError:
        # Use default path
        config = SongRecordsConfig()

    console.print(str(config.db_path), soft_wrap=True)
