"""Shared fixtures for songrecords tests."""

import pytest

from songrecords.db.client import DatabaseClient
from songrecords.db.store import SongStore


@pytest.fixture
def temp_db_path(tmp_path):
    """Return a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def client(temp_db_path):
    """Return an initialized DatabaseClient."""
    db = DatabaseClient(temp_db_path)
    db.initialize_schema()
    yield db
    db.close()


@pytest.fixture
def store(client):
    """Return a SongStore over the initialized database."""
    return SongStore(client)


@pytest.fixture
def config_file(tmp_path, temp_db_path):
    """Write a config file pointing at temporary database and log paths."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f'[database]\npath = "{temp_db_path}"\n\n'
        f'[logging]\ndir = "{tmp_path / "logs"}"\nlevel = "DEBUG"\n'
    )
    return config_path
