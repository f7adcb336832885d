"""Database client for songrecords.

Provides the SQLite connection, transactions, schema management and
statistics for the songs database.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from songrecords.db.models import DatabaseStats
from songrecords.db.schema import (
    ALL_SCHEMA_STATEMENTS,
    DUPLICATES_QUERY,
    INTEGRITY_CHECK_QUERY,
    ROW_COUNT_QUERY,
)

logger = logging.getLogger(__name__)


class DatabaseClient:
    """Client for a local SQLite database.

    The client owns a single connection, opened on first use. Create one
    client at the top of the program and hand it to the stores that need it.

    Attributes:
        db_path: Path to the SQLite database file
        connection: Active database connection
    """

    def __init__(self, db_path: Path):
        """Initialize the database client.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection.

        Returns:
            Active SQLite connection
        """
        if self._connection is None:
            # Ensure directory exists
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            logger.debug(f"Opening database at {self.db_path}")
            self._connection = sqlite3.connect(self.db_path)
            self._connection.row_factory = sqlite3.Row

        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> "DatabaseClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database transactions.

        Yields:
            SQLite connection with active transaction
        """
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def initialize_schema(self) -> None:
        """Initialize the database schema.

        Creates the songs table and its lookup index if they don't exist.
        """
        with self.transaction() as conn:
            cursor = conn.cursor()
            for statement in ALL_SCHEMA_STATEMENTS:
                cursor.execute(statement)
        logger.info(f"Initialized schema at {self.db_path}")

    def reset_database(self) -> None:
        """Reset the database by dropping all tables.

        WARNING: This is a destructive operation that will delete all data.
        """
        with self.transaction() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = cursor.fetchall()

            for (table_name,) in tables:
                if not table_name.startswith("sqlite_"):
                    cursor.execute(f'DROP TABLE IF EXISTS "{table_name}"')

        logger.warning(f"Dropped all tables in {self.db_path}")

        # Re-initialize schema
        self.initialize_schema()

    def get_stats(self) -> DatabaseStats:
        """Get database statistics.

        Returns:
            DatabaseStats with current database state
        """
        cursor = self.connection.cursor()

        cursor.execute(ROW_COUNT_QUERY)
        table_counts = {row[0]: row[1] for row in cursor.fetchall()}

        cursor.execute(INTEGRITY_CHECK_QUERY)
        integrity_result = cursor.fetchone()
        integrity_ok = integrity_result[0] == "ok" if integrity_result else False

        cursor.execute(DUPLICATES_QUERY)
        duplicate_groups = len(cursor.fetchall())

        return DatabaseStats(
            table_counts=table_counts,
            integrity_ok=integrity_ok,
            duplicate_groups=duplicate_groups,
        )
