"""Data models for songrecords database entities.

Provides dataclasses for the Song record and database statistics,
with conversion from database rows.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Song:
    """A song mapped to one row of the songs table.

    Attributes:
        name: Song name (part of the natural key)
        album: Album name (part of the natural key)
        id: Surrogate key assigned by the database on insert; None until saved
    """

    name: str
    album: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: tuple) -> "Song":
        """Create a Song from a database row tuple.

        Args:
            row: Database row tuple in (id, name, album) order

        Returns:
            Song instance
        """
        return cls(
            id=row[0],
            name=row[1],
            album=row[2],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Song to dictionary.

        Returns:
            Dictionary representation of the song
        """
        return {
            "id": self.id,
            "name": self.name,
            "album": self.album,
        }

    @property
    def is_persisted(self) -> bool:
        """Check if the song has been written to the database.

        Returns:
            True if the song has an id
        """
        return self.id is not None

    @property
    def natural_key(self) -> tuple[str, str]:
        """The (name, album) pair that identifies a song."""
        return (self.name, self.album)


@dataclass
class DuplicateGroup:
    """A natural key stored in more than one row.

    Attributes:
        name: Song name
        album: Album name
        count: Number of rows with this (name, album)
        ids: Ids of the duplicate rows, ascending
    """

    name: str
    album: str
    count: int
    ids: list[int] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: tuple) -> "DuplicateGroup":
        """Create a DuplicateGroup from a DUPLICATES_QUERY row."""
        ids = sorted(int(value) for value in str(row[3]).split(",")) if row[3] else []
        return cls(name=row[0], album=row[1], count=row[2], ids=ids)


@dataclass
class DatabaseStats:
    """Statistics about the database state.

    Attributes:
        table_counts: Dictionary of table names to row counts
        integrity_ok: Whether integrity check passed
        duplicate_groups: Number of natural keys stored more than once
    """

    table_counts: dict[str, int] = field(default_factory=dict)
    integrity_ok: bool = True
    duplicate_groups: int = 0

    @property
    def total_songs(self) -> int:
        """Get total number of songs.

        Returns:
            Number of songs in the database
        """
        return self.table_counts.get("songs", 0)
