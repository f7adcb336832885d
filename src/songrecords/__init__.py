"""songrecords - A small SQLite song catalog that avoids duplicate rows.

This package provides:
- A Song record store with find-or-create semantics on (name, album)
- A SQLite database client with schema management and statistics
- A command line interface for managing the catalog
"""

__version__ = "0.1.0"
