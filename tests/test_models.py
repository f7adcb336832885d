"""Tests for songrecords database models."""

import pytest

from songrecords.db.models import DatabaseStats, DuplicateGroup, Song


class TestSong:
    """Tests for Song model."""

    @pytest.fixture
    def sample_song_row(self):
        """Return a sample database row tuple for a song."""
        return (
            1,  # id
            "Hello",  # name
            "25",  # album
        )

    def test_new_song_has_no_id(self):
        """Test that a song built in memory is not persisted."""
        song = Song(name="Hello", album="25")

        assert song.id is None
        assert song.is_persisted is False

    def test_from_row(self, sample_song_row):
        """Test creating Song from database row."""
        song = Song.from_row(sample_song_row)

        assert song.id == 1
        assert song.name == "Hello"
        assert song.album == "25"
        assert song.is_persisted is True

    def test_to_dict(self):
        """Test converting Song to dictionary."""
        song = Song(name="Hello", album="25", id=7)

        assert song.to_dict() == {"id": 7, "name": "Hello", "album": "25"}

    def test_natural_key(self):
        """Test that the natural key is the (name, album) pair."""
        song = Song(name="Hello", album="25", id=3)

        assert song.natural_key == ("Hello", "25")

    def test_equality_includes_id(self):
        """Test that songs with the same key but different ids differ."""
        assert Song(name="Hello", album="25", id=1) != Song(name="Hello", album="25", id=2)


class TestDuplicateGroup:
    """Tests for DuplicateGroup model."""

    def test_from_row_parses_ids(self):
        """Test that the comma separated id list is parsed and sorted."""
        group = DuplicateGroup.from_row(("Hello", "25", 3, "4,1,2"))

        assert group.name == "Hello"
        assert group.album == "25"
        assert group.count == 3
        assert group.ids == [1, 2, 4]

    def test_from_row_without_ids(self):
        """Test a row with no id list."""
        group = DuplicateGroup.from_row(("Hello", "25", 2, None))

        assert group.ids == []


class TestDatabaseStats:
    """Tests for DatabaseStats model."""

    def test_defaults(self):
        """Test default statistics."""
        stats = DatabaseStats()

        assert stats.total_songs == 0
        assert stats.integrity_ok is True
        assert stats.duplicate_groups == 0

    def test_total_songs(self):
        """Test total_songs reads the songs table count."""
        stats = DatabaseStats(table_counts={"songs": 12})

        assert stats.total_songs == 12
