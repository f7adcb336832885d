"""Tests for songrecords logging configuration."""

import logging

import pytest

from songrecords.logging_config import LOG_FILE_NAME, _rotate_log_if_needed, setup_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger("songrecords")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_creates_log_file(self, tmp_path):
        """Test that logging writes to a file in the log directory."""
        log_dir = tmp_path / "logs"

        logger = setup_logging(log_dir)
        logging.getLogger("songrecords.db.store").info("created song 1")
        for handler in logger.handlers:
            handler.flush()

        content = (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "created song 1" in content
        assert "songrecords.db.store" in content

    def test_sets_level(self, tmp_path):
        """Test that the configured level is applied."""
        logger = setup_logging(tmp_path, level="debug")

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        """Test that an unknown level name uses INFO."""
        logger = setup_logging(tmp_path, level="chatty")

        assert logger.level == logging.INFO

    def test_repeated_setup_keeps_one_handler(self, tmp_path):
        """Test that calling setup twice does not duplicate handlers."""
        setup_logging(tmp_path)
        logger = setup_logging(tmp_path)

        assert len(logger.handlers) == 1


class TestRotateLog:
    """Tests for startup log rotation."""

    def test_small_file_not_rotated(self, tmp_path):
        """Test that a file under the limit stays in place."""
        log_file = tmp_path / LOG_FILE_NAME
        log_file.write_text("short")

        _rotate_log_if_needed(log_file, max_bytes=100)

        assert log_file.exists()
        assert not (tmp_path / f"{LOG_FILE_NAME}.1").exists()

    def test_large_file_rotated(self, tmp_path):
        """Test that an oversized file moves to .1 and backups shift."""
        log_file = tmp_path / LOG_FILE_NAME
        log_file.write_text("x" * 200)
        (tmp_path / f"{LOG_FILE_NAME}.1").write_text("older")

        _rotate_log_if_needed(log_file, max_bytes=100, backup_count=3)

        assert not log_file.exists()
        assert (tmp_path / f"{LOG_FILE_NAME}.1").read_text() == "x" * 200
        assert (tmp_path / f"{LOG_FILE_NAME}.2").read_text() == "older"

    def test_oldest_backup_dropped(self, tmp_path):
        """Test that no more than backup_count backups are kept."""
        log_file = tmp_path / LOG_FILE_NAME
        log_file.write_text("x" * 200)
        for i in range(1, 4):
            (tmp_path / f"{LOG_FILE_NAME}.{i}").write_text(f"backup {i}")

        _rotate_log_if_needed(log_file, max_bytes=100, backup_count=3)

        assert (tmp_path / f"{LOG_FILE_NAME}.3").read_text() == "backup 2"
        assert not (tmp_path / f"{LOG_FILE_NAME}.4").exists()
