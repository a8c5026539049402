"""Database schema definitions"""

# Singleton credential; the CHECK keeps a second row from ever existing
CREDENTIALS_TABLE = """
CREATE TABLE IF NOT EXISTS credentials (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    secret_hash TEXT NOT NULL,
    created_at INTEGER NOT NULL,  -- ms since epoch
    updated_at INTEGER NOT NULL
)
"""

# Diary entries keyed by the client-generated id
ENTRIES_TABLE = """
CREATE TABLE IF NOT EXISTS entries (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    date TEXT NOT NULL,  -- client-supplied ISO date
    created_at INTEGER NOT NULL,  -- ms since epoch
    updated_at INTEGER NOT NULL
)
"""

# Schema version table for migrations
SCHEMA_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    applied_at DATETIME NOT NULL,
    description TEXT
)
"""

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_entries_updated ON entries(updated_at DESC)"
]

# All tables in order of creation
ALL_TABLES = [
    SCHEMA_VERSION_TABLE,
    CREDENTIALS_TABLE,
    ENTRIES_TABLE
]
