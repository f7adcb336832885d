"""Main entry point for the songrecords CLI.

Provides a Typer-based CLI for managing the song catalog database.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from songrecords import __version__
from songrecords.commands import db as db_commands
from songrecords.commands import songs as songs_commands

console = Console()

# Create the main Typer app
app = typer.Typer(
    name="songrecords",
    help="Song catalog without duplicate rows",
    rich_markup_mode="rich",
)

# Add subcommand groups
app.add_typer(db_commands.app, name="db", help="Database operations")
app.add_typer(songs_commands.app, name="songs", help="Song operations")


def version_callback(value: bool) -> None:
    """Callback for --version flag."""
    if value:
        console.print(f"songrecords version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """songrecords: a song catalog that avoids duplicate rows.

    ## Commands

    * [bold cyan]db[/bold cyan] - Database operations (init, status, reset, path)
    * [bold cyan]songs[/bold cyan] - Song operations (add, create, show, find, list, update, duplicates)

    ## Getting Started

    1. Initialize the database:
       [dim]$ songrecords db init[/dim]

    2. Add a song (only stored once):
       [dim]$ songrecords songs add "Hello" "25"[/dim]
    """
    pass


@app.command()
def config(
    action: str = typer.Argument(
        ...,
        help="Action to perform (show, set, path)",
    ),
    key: str = typer.Argument(
        None,
        help="Configuration key (for set action)",
    ),
    value: str = typer.Argument(
        None,
        help="Configuration value (for set action)",
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Manage configuration.

    Show, set, or display the path to the configuration file.

    Examples:
        songrecords config show          # Show all configuration
        songrecords config set log_level DEBUG
        songrecords config path          # Show config file path
    """
    from songrecords.config import ensure_config_exists, get_config_path

    if action == "show":
        try:
            cfg = ensure_config_exists(config_path)
        except Exception as e:
            console.print(f"[red]Error loading config: {e}[/red]")
            raise typer.Exit(1)

        table = Panel.fit(
            f"[cyan]Database Path:[/cyan] {cfg.db_path}\n"
            f"[cyan]Log Directory:[/cyan] {cfg.log_dir}\n"
            f"[cyan]Log Level:[/cyan] {cfg.log_level}",
            title="Configuration",
            border_style="green",
        )
        console.print(table)

    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage: songrecords config set <key> <value>[/red]")
            raise typer.Exit(1)

        try:
            cfg = ensure_config_exists(config_path)
            cfg.set(key, value)
            cfg.save(config_path)
            console.print(f"[green]Set {key} = {value}[/green]")
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    elif action == "path":
        console.print(str(config_path or get_config_path()), soft_wrap=True)

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("Valid actions: show, set, path")
        raise typer.Exit(1)


# Entry point for the CLI
def cli_entry() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli_entry()
