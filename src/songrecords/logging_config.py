"""Logging configuration for songrecords.

Provides session logging to file so log output does not mix with the
CLI's console output.
"""

import logging
from pathlib import Path

LOG_FILE_NAME = "songrecords.log"


def _rotate_log_if_needed(log_file: Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5) -> None:
    """Rotate log file on startup if it exceeds max size.

    Args:
        log_file: Path to the log file
        max_bytes: Maximum file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    if not log_file.exists():
        return

    if log_file.stat().st_size < max_bytes:
        return

    # Shift backups up by one; the oldest falls off the end
    oldest = log_file.parent / f"{log_file.name}.{backup_count}"
    if oldest.exists():
        oldest.unlink()

    for i in range(backup_count - 1, 0, -1):
        source = log_file.parent / f"{log_file.name}.{i}"
        dest = log_file.parent / f"{log_file.name}.{i + 1}"
        if source.exists():
            source.rename(dest)

    # Move current log to .1
    backup = log_file.parent / f"{log_file.name}.1"
    log_file.rename(backup)


def setup_logging(log_dir: Path, level: str = "INFO") -> logging.Logger:
    """Set up songrecords logging to file with startup rotation.

    Args:
        log_dir: Directory to store log files
        level: Logging level name

    Returns:
        Configured package logger
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / LOG_FILE_NAME

    _rotate_log_if_needed(log_file)

    logger = logging.getLogger("songrecords")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove any existing handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")

    # Detailed format with timestamp, level, module, and message
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)

    logger.addHandler(file_handler)

    logger.info(f"Logging to {log_file}")

    return logger
