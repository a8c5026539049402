"""Database migration system"""
import logging
from datetime import datetime
from typing import List, Tuple

import aiosqlite

logger = logging.getLogger(__name__)


# Migration format: (version, description, up_sql, down_sql)
MIGRATIONS: List[Tuple[int, str, str, str]] = [
    (
        1,
        "Initial schema",
        """-- This migration is handled by schema.py create_tables()""",
        """-- Rollback not supported for initial schema"""
    ),
    (
        2,
        "Index entries by creation time for recency tie-breaks",
        """CREATE INDEX IF NOT EXISTS idx_entries_created ON entries(created_at DESC)""",
        """DROP INDEX IF EXISTS idx_entries_created"""
    ),
]

_HARMLESS_ERRORS = (
    "duplicate column name",
    "table already exists",
    "index already exists",
    "column already exists",
)


async def get_current_version(db) -> int:
    """Get current schema version"""
    try:
        result = await db.fetch_one(
            "SELECT MAX(version) as version FROM schema_version"
        )
    except aiosqlite.OperationalError:
        # Table doesn't exist yet
        return 0
    return result["version"] if result and result["version"] else 0


async def apply_migration(db, version: int, description: str, up_sql: str):
    """Apply a single migration"""
    statements = [stmt.strip() for stmt in up_sql.split(';') if stmt.strip()]
    for statement in statements:
        if statement.startswith('--'):
            continue
        try:
            await db.execute(statement)
        except aiosqlite.OperationalError as e:
            if any(phrase in str(e).lower() for phrase in _HARMLESS_ERRORS):
                logger.info(f"Migration {version}: skipping statement (already exists): {statement}")
                continue
            logger.error(f"Migration {version} failed on statement: {statement}: {e}")
            raise

    await db.execute(
        "INSERT INTO schema_version (version, applied_at, description) VALUES (?, ?, ?)",
        (version, datetime.now().isoformat(), description)
    )
    await db.commit()
    logger.info(f"Applied migration {version}: {description}")


async def run_migrations(db):
    """Run all pending migrations"""
    current_version = await get_current_version(db)
    logger.debug(f"Current database version: {current_version}")

    for version, description, up_sql, _ in MIGRATIONS:
        if version > current_version:
            await apply_migration(db, version, description, up_sql)

    final_version = await get_current_version(db)
    if final_version > current_version:
        logger.info(f"Database migrated from version {current_version} to {final_version}")
    return final_version
