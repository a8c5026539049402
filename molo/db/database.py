import asyncio
import logging
import os
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Optional

import aiosqlite

from molo.core.config import settings
from molo.db.schema import ALL_TABLES, INDEXES
from molo.db.migrations import run_migrations as run_db_migrations

logger = logging.getLogger(__name__)

# Set while the current task holds the lock inside transaction()
_in_transaction: ContextVar[bool] = ContextVar("molo_db_in_transaction", default=False)


class Database:
    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.database_path
        self._connection: Optional[aiosqlite.Connection] = None
        self._current_path: Optional[str] = None
        self._lock: Optional[asyncio.Lock] = None

    async def set_db_path(self, new_path: str):
        """Switch to a different database path"""
        if self.db_path != new_path:
            self.db_path = new_path
            if self._connection:
                await self.disconnect()
            self._current_path = None

    async def connect(self):
        """Create database connection"""
        if self._connection and self._current_path != self.db_path:
            await self.disconnect()

        if not self._connection:
            directory = os.path.dirname(self.db_path)
            if directory and self.db_path != ":memory:":
                os.makedirs(directory, exist_ok=True)

            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
            await self._connection.execute("PRAGMA foreign_keys = ON")
            self._current_path = self.db_path
            # Bound to the loop that owns the connection
            self._lock = asyncio.Lock()
            logger.info(f"Connected to database at {self.db_path}")

    async def disconnect(self):
        """Close database connection"""
        if self._connection:
            await self._connection.close()
            self._connection = None
            self._lock = None
            logger.info("Database connection closed")

    async def execute(self, query: str, params: tuple = ()):
        """Execute a query"""
        if not self._connection:
            await self.connect()
        return await self._connection.execute(query, params)

    @asynccontextmanager
    async def _reading(self):
        # Outside a transaction, wait until no write is pending on the connection
        if _in_transaction.get():
            yield
            return
        if not self._connection:
            await self.connect()
        async with self._lock:
            yield

    async def fetch_one(self, query: str, params: tuple = ()):
        """Fetch one row"""
        async with self._reading():
            cursor = await self.execute(query, params)
            row = await cursor.fetchone()
        return dict(row) if row else None

    async def fetch_all(self, query: str, params: tuple = ()):
        """Fetch all rows"""
        async with self._reading():
            cursor = await self.execute(query, params)
            rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def commit(self):
        """Commit transaction"""
        if self._connection:
            await self._connection.commit()

    async def rollback(self):
        """Rollback transaction"""
        if self._connection:
            await self._connection.rollback()

    @asynccontextmanager
    async def transaction(self):
        """
        Serialize a write and commit it atomically.

        Everything shares one connection, where uncommitted rows are visible
        to any statement. The lock keeps writers from interleaving, and
        fetch_one/fetch_all outside a transaction take it too, so readers
        only ever see committed state.
        """
        if not self._connection:
            await self.connect()
        async with self._lock:
            marker = _in_transaction.set(True)
            try:
                yield self
            except BaseException:
                await self.rollback()
                raise
            else:
                await self.commit()
            finally:
                _in_transaction.reset(marker)


# Global database instance
db = Database()


def get_db() -> Database:
    """Get the current database instance - use this for all database operations"""
    return db


async def create_tables():
    """Create all database tables"""
    for table_sql in ALL_TABLES:
        await db.execute(table_sql)

    for index_sql in INDEXES:
        await db.execute(index_sql)

    await db.commit()


async def run_migrations():
    """Run database migrations"""
    await run_db_migrations(db)


async def init_db():
    """Initialize database with schema"""
    await db.connect()
    await create_tables()
    await run_migrations()
    logger.info("Database initialized successfully")


async def close_db():
    await db.disconnect()
