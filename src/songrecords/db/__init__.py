"""Database layer for songrecords.

Provides the SQLite database client, the Song record store, models,
and schema definitions.
"""

from songrecords.db.client import DatabaseClient
from songrecords.db.models import DatabaseStats, DuplicateGroup, Song
from songrecords.db.store import InvalidStateError, SongStore

__all__ = [
    "DatabaseClient",
    "DatabaseStats",
    "DuplicateGroup",
    "InvalidStateError",
    "Song",
    "SongStore",
]
