"""SQL schema definitions for the songrecords database.

Defines the single songs table and the queries used by the client and
record store. No uniqueness constraint is declared on (name, album);
duplicate prevention happens in SongStore.find_or_create_by.
"""

# SQL to create the songs table
CREATE_SONGS_TABLE = """
CREATE TABLE IF NOT EXISTS songs (
    id INTEGER PRIMARY KEY,
    name TEXT,
    album TEXT
);
"""

# Non-unique index for natural key lookups
CREATE_INDEXES = [
    """
    CREATE INDEX IF NOT EXISTS idx_songs_name_album
    ON songs(name, album);
    """,
]

# All schema creation statements in order
ALL_SCHEMA_STATEMENTS = [
    CREATE_SONGS_TABLE,
    *CREATE_INDEXES,
]

# Song statements
INSERT_SONG = "INSERT INTO songs (name, album) VALUES (?, ?)"

SELECT_SONG_BY_ID = "SELECT id, name, album FROM songs WHERE id = ?"

SELECT_SONG_BY_NAME = "SELECT id, name, album FROM songs WHERE name = ? LIMIT 1"

SELECT_SONG_BY_NATURAL_KEY = (
    "SELECT id, name, album FROM songs WHERE name = ? AND album = ? LIMIT 1"
)

SELECT_ALL_SONGS = "SELECT id, name, album FROM songs ORDER BY id"

UPDATE_SONG = "UPDATE songs SET name = ?, album = ? WHERE id = ?"

# Natural keys stored more than once
DUPLICATES_QUERY = """
SELECT name, album, COUNT(*) AS row_count, GROUP_CONCAT(id) AS ids
FROM songs
GROUP BY name, album
HAVING COUNT(*) > 1
ORDER BY name, album;
"""

# SQL to count rows in each table
ROW_COUNT_QUERY = """
SELECT
    'songs' as table_name,
    COUNT(*) as row_count
FROM songs;
"""

# SQL to check database integrity
INTEGRITY_CHECK_QUERY = "PRAGMA integrity_check;"
