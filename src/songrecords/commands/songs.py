"""Song commands for songrecords.

Provides CLI commands for adding, creating, finding, listing and
updating songs, and for reporting duplicate (name, album) rows.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from songrecords.config import SongRecordsConfig
from songrecords.db.client import DatabaseClient
from songrecords.db.models import Song
from songrecords.db.store import SongStore
from songrecords.logging_config import setup_logging

console = Console()
app = typer.Typer(help="Song operations")


def load_client(config_path: Optional[Path]) -> DatabaseClient:
    """Load config, set up logging and return a client for an existing database.

    Args:
        config_path: Path to config file, or None for the default location

    Returns:
        DatabaseClient instance

    Raises:
        typer.Exit: If the config file or database does not exist
    """
    try:
        config = SongRecordsConfig.load(config_path)
    except FileNotFoundError:
        console.print("[red]Config file not found. Run 'songrecords db init' first.[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_dir, config.log_level)

    if not config.db_path.exists():
        console.print(f"[red]Database not found at {config.db_path}[/red]")
        console.print("Run 'songrecords db init' to create the database.")
        raise typer.Exit(1)

    return DatabaseClient(config.db_path)


def print_song(song: Song, title: str = "Song") -> None:
    """Print a single song as a table."""
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Album", style="yellow")
    table.add_row(str(song.id), song.name, song.album)
    console.print(table)


@app.command("add")
def add_song(
    name: str = typer.Argument(..., help="Song name"),
    album: str = typer.Argument(..., help="Album name"),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Add a song unless the same name and album is already stored.

    Returns the stored song when one exists, otherwise creates it.
    """
    with load_client(config_path) as client:
        store = SongStore(client)
        song = store.find_or_create_by(name, album)

    print_song(song)


@app.command("create")
def create_song(
    name: str = typer.Argument(..., help="Song name"),
    album: str = typer.Argument(..., help="Album name"),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Insert a song row without checking for an existing one.

    Running this twice with the same name and album stores two rows.
    Use 'songrecords songs add' to avoid that.
    """
    with load_client(config_path) as client:
        store = SongStore(client)
        song = store.create(name, album)
        duplicates = [
            group for group in store.find_duplicates()
            if (group.name, group.album) == song.natural_key
        ]

    print_song(song, title="Created Song")

    if duplicates:
        console.print(
            f"[yellow]Warning: {duplicates[0].count} rows now exist for "
            f"{name!r} ({album!r}): ids {', '.join(str(i) for i in duplicates[0].ids)}[/yellow]"
        )


@app.command("show")
def show_song(
    song_id: int = typer.Argument(..., help="Song id"),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show a song by id."""
    with load_client(config_path) as client:
        song = SongStore(client).find_by_id(song_id)

    if song is None:
        console.print(f"[red]Song not found: {song_id}[/red]")
        raise typer.Exit(1)

    print_song(song)


@app.command("find")
def find_song(
    name: str = typer.Argument(..., help="Song name"),
    album: Optional[str] = typer.Option(
        None,
        "--album",
        "-a",
        help="Album name (match name and album together)",
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Find a song by name, or by name and album."""
    with load_client(config_path) as client:
        store = SongStore(client)
        if album is not None:
            song = store.find_by_natural_key(name, album)
        else:
            song = store.find_by_name(name)

    if song is None:
        label = f"{name!r} ({album!r})" if album is not None else repr(name)
        console.print(f"[red]Song not found: {label}[/red]")
        raise typer.Exit(1)

    print_song(song)


@app.command("list")
def list_songs(
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        min=1,
        help="Maximum number of songs to show",
    ),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """List stored songs ordered by id."""
    with load_client(config_path) as client:
        songs = SongStore(client).all()

    if not songs:
        console.print("[yellow]No songs found.[/yellow]")
        return

    shown = songs[:limit] if limit is not None else songs

    table = Table(title=f"Songs ({len(songs)} total)")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Album", style="yellow")

    for song in shown:
        table.add_row(str(song.id), song.name, song.album)

    console.print(table)

    if len(shown) < len(songs):
        console.print(f"[dim]Showing {len(shown)} of {len(songs)} songs[/dim]")


@app.command("update")
def update_song(
    song_id: int = typer.Argument(..., help="Song id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New song name"),
    album: Optional[str] = typer.Option(None, "--album", "-a", help="New album name"),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Change the name and/or album of a stored song."""
    if name is None and album is None:
        console.print("[red]Nothing to update. Pass --name and/or --album.[/red]")
        raise typer.Exit(1)

    with load_client(config_path) as client:
        store = SongStore(client)
        song = store.find_by_id(song_id)

        if song is None:
            console.print(f"[red]Song not found: {song_id}[/red]")
            raise typer.Exit(1)

        if name is not None:
            song.name = name
        if album is not None:
            song.album = album
        store.save(song)

    print_song(song, title="Updated Song")


@app.command("duplicates")
def show_duplicates(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show (name, album) pairs stored in more than one row."""
    with load_client(config_path) as client:
        groups = SongStore(client).find_duplicates()

    if not groups:
        console.print("[green]No duplicate songs.[/green]")
        return

    table = Table(title="Duplicate Songs")
    table.add_column("Name", style="cyan")
    table.add_column("Album", style="yellow")
    table.add_column("Rows", style="red")
    table.add_column("IDs", style="dim")

    for group in groups:
        table.add_row(group.name, group.album, str(group.count), ", ".join(str(i) for i in group.ids))

    console.print(table)
