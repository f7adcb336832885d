"""Song record store.

Maps Song objects onto the songs table. Callers persist songs through
save(), and use find_or_create_by() to avoid inserting a second row for
a (name, album) pair that is already stored.

find_or_create_by() is a lookup followed by an insert with nothing
holding the two together, so it only prevents duplicates with a single
writer.
"""

import logging
from typing import Optional

from songrecords.db.client import DatabaseClient
from songrecords.db.models import DuplicateGroup, Song
from songrecords.db.schema import (
    DUPLICATES_QUERY,
    INSERT_SONG,
    SELECT_ALL_SONGS,
    SELECT_SONG_BY_ID,
    SELECT_SONG_BY_NAME,
    SELECT_SONG_BY_NATURAL_KEY,
    UPDATE_SONG,
)

logger = logging.getLogger(__name__)


class InvalidStateError(Exception):
    """Operation not valid for the current state of a record."""

    def __init__(self, message: str, song: Optional[Song] = None):
        super().__init__(message)
        self.song = song


class SongStore:
    """Data access for Song records.

    Attributes:
        client: Database client holding the shared connection
    """

    def __init__(self, client: DatabaseClient):
        """Initialize the store.

        Args:
            client: Database client whose connection the store uses
        """
        self.client = client

    def create(self, name: str, album: str) -> Song:
        """Insert a new song row.

        No duplicate check is made; use find_or_create_by() for that.

        Args:
            name: Song name
            album: Album name

        Returns:
            The new Song with its id populated
        """
        song = Song(name=name, album=album)
        self._insert(song)
        return song

    def find_by_id(self, song_id: int) -> Optional[Song]:
        """Get a song by id.

        Args:
            song_id: The song id

        Returns:
            Song or None if not found
        """
        cursor = self.client.connection.cursor()
        cursor.execute(SELECT_SONG_BY_ID, (song_id,))
        row = cursor.fetchone()

        if row:
            return Song.from_row(tuple(row))
        logger.debug(f"No song with id {song_id}")
        return None

    def find_by_name(self, name: str) -> Optional[Song]:
        """Get the first song with the given name.

        Args:
            name: Song name

        Returns:
            Song or None if not found
        """
        cursor = self.client.connection.cursor()
        cursor.execute(SELECT_SONG_BY_NAME, (name,))
        row = cursor.fetchone()

        if row:
            return Song.from_row(tuple(row))
        return None

    def find_by_natural_key(self, name: str, album: str) -> Optional[Song]:
        """Get a song by (name, album).

        When duplicates are already stored, whichever row SQLite returns
        first is used.

        Args:
            name: Song name
            album: Album name

        Returns:
            Song or None if not found
        """
        cursor = self.client.connection.cursor()
        cursor.execute(SELECT_SONG_BY_NATURAL_KEY, (name, album))
        row = cursor.fetchone()

        if row:
            return Song.from_row(tuple(row))
        return None

    def update(self, song: Song) -> Song:
        """Overwrite the stored name and album for a saved song.

        Args:
            song: Song with an id

        Returns:
            The same song

        Raises:
            InvalidStateError: If the song has never been saved
        """
        if song.id is None:
            raise InvalidStateError(
                f"Cannot update unsaved song {song.name!r} ({song.album!r})",
                song=song,
            )

        with self.client.transaction() as conn:
            cursor = conn.cursor()
            cursor.execute(UPDATE_SONG, (song.name, song.album, song.id))
            updated = cursor.rowcount

        if updated:
            logger.info(f"Updated song {song.id}: {song.name} - {song.album}")
        else:
            logger.warning(f"Update matched no row for song id {song.id}")
        return song

    def save(self, song: Song) -> Song:
        """Insert an unsaved song or update a saved one.

        Args:
            song: Song to persist; its id is set in place on insert

        Returns:
            The same song
        """
        if song.id is None:
            return self._insert(song)
        return self.update(song)

    def find_or_create_by(self, name: str, album: str) -> Song:
        """Return the stored song for (name, album), creating it if missing.

        An existing row is returned as stored and is not updated.

        Args:
            name: Song name
            album: Album name

        Returns:
            Existing or newly created Song
        """
        existing = self.find_by_natural_key(name, album)
        if existing is not None:
            logger.debug(f"Found existing song {existing.id} for {name!r} ({album!r})")
            return existing

        logger.debug(f"No song for {name!r} ({album!r}), creating")
        return self.create(name, album)

    def all(self) -> list[Song]:
        """List all songs ordered by id.

        Returns:
            List of songs
        """
        cursor = self.client.connection.cursor()
        cursor.execute(SELECT_ALL_SONGS)

        results = []
        for row in cursor.fetchall():
            results.append(Song.from_row(tuple(row)))
        return results

    def find_duplicates(self) -> list[DuplicateGroup]:
        """List natural keys stored in more than one row.

        Returns:
            Duplicate groups ordered by name and album
        """
        cursor = self.client.connection.cursor()
        cursor.execute(DUPLICATES_QUERY)
        return [DuplicateGroup.from_row(tuple(row)) for row in cursor.fetchall()]

    def _insert(self, song: Song) -> Song:
        with self.client.transaction() as conn:
            cursor = conn.cursor()
            cursor.execute(INSERT_SONG, (song.name, song.album))
            song.id = cursor.lastrowid

        logger.info(f"Created song {song.id}: {song.name} - {song.album}")
        return song
