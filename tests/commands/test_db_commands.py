"""Tests for database commands."""

import pytest
from typer.testing import CliRunner

from songrecords.commands.db import app, get_db_client
from songrecords.config import SongRecordsConfig
from songrecords.db.client import DatabaseClient
from songrecords.db.store import SongStore

runner = CliRunner()


class TestGetDbClient:
    """Tests for get_db_client function."""

    def test_creates_client_for_config_path(self, temp_db_path):
        """Test that the client uses the configured database path."""
        config = SongRecordsConfig(db_path=temp_db_path)

        client = get_db_client(config)

        assert isinstance(client, DatabaseClient)
        assert client.db_path == temp_db_path


class TestInitCommand:
    """Tests for db init command."""

    def test_init_creates_database(self, config_file, temp_db_path):
        """Test that init creates the database and shows status."""
        result = runner.invoke(app, ["init", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Database initialized successfully!" in result.output
        assert "Database Statistics" in result.output
        assert temp_db_path.exists()

    def test_init_existing_database_without_force(self, client, config_file):
        """Test that init refuses to overwrite an existing database."""
        result = runner.invoke(app, ["init", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_force_resets_database(self, client, config_file):
        """Test that init --force drops existing songs."""
        SongStore(client).create("Hello", "25")

        result = runner.invoke(app, ["init", "--force", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Database reset and re-initialized successfully!" in result.output
        assert SongStore(client).all() == []

    def test_init_creates_missing_config(self, tmp_path):
        """Test that init writes a default config when none exists."""
        config_path = tmp_path / "config.toml"

        result = runner.invoke(app, ["init", "--config", str(config_path)], env={
            "XDG_CONFIG_HOME": str(tmp_path / "xdg"),
            "APPDATA": str(tmp_path / "xdg"),
        })

        assert result.exit_code == 0
        assert "Created default config" in result.output
        assert config_path.exists()
        assert SongRecordsConfig.load(config_path).db_path.exists()


class TestShowStatusCommand:
    """Tests for db status command."""

    def test_status_when_config_not_found(self, tmp_path):
        """Test status when config file doesn't exist."""
        nonexistent_config = tmp_path / "nonexistent.toml"

        result = runner.invoke(app, ["status", "--config", str(nonexistent_config)])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_status_when_database_doesnt_exist(self, config_file):
        """Test status when database doesn't exist."""
        result = runner.invoke(app, ["status", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Database Path" in result.output
        assert "No" in result.output
        assert "Database does not exist" in result.output

    def test_status_shows_statistics(self, client, config_file):
        """Test status for an initialized database with a duplicate."""
        store = SongStore(client)
        store.create("Hello", "25")
        store.create("Hello", "25")

        result = runner.invoke(app, ["status", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Database Statistics" in result.output
        assert "Songs" in result.output
        assert "Duplicate Keys" in result.output
        assert "OK" in result.output


class TestResetCommand:
    """Tests for db reset command."""

    def test_reset_requires_confirm(self, client, config_file):
        """Test that reset without --confirm does nothing."""
        SongStore(client).create("Hello", "25")

        result = runner.invoke(app, ["reset", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "WARNING" in result.output
        assert len(SongStore(client).all()) == 1

    def test_reset_with_confirm(self, client, config_file):
        """Test that reset --confirm deletes all songs."""
        SongStore(client).create("Hello", "25")

        result = runner.invoke(app, ["reset", "--confirm", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Database reset successfully!" in result.output
        assert SongStore(client).all() == []

    def test_reset_creates_missing_database(self, config_file, temp_db_path):
        """Test that reset initializes a database that doesn't exist yet."""
        result = runner.invoke(app, ["reset", "--confirm", "--config", str(config_file)])

        assert result.exit_code == 0
        assert temp_db_path.exists()


class TestPathCommand:
    """Tests for db path command."""

    def test_path_from_config(self, config_file, temp_db_path):
        """Test that the configured database path is printed."""
        result = runner.invoke(app, ["path", "--config", str(config_file)])

        assert result.exit_code == 0
        assert str(temp_db_path) in result.output
