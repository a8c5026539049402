from typing import List, Optional

from molo.db.database import get_db
from molo.models.entry import Entry


class EntryRepository:
    """Repository for entry database operations"""

    @staticmethod
    async def upsert(entry: Entry, now: int) -> Entry:
        """
        Create the entry or replace its title/content/date in one statement.

        created_at is only written on insert; updated_at never moves backwards.
        """
        db = get_db()
        async with db.transaction():
            await db.execute(
                """INSERT INTO entries (id, title, content, date, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?)
                   ON CONFLICT(id) DO UPDATE SET
                       title = excluded.title,
                       content = excluded.content,
                       date = excluded.date,
                       updated_at = MAX(entries.updated_at, excluded.updated_at)""",
                (entry.id, entry.title, entry.content, entry.date, now, now)
            )
            row = await db.fetch_one(
                "SELECT * FROM entries WHERE id = ?", (entry.id,)
            )
        return Entry.from_dict(row)

    @staticmethod
    async def get_by_id(entry_id: str) -> Optional[Entry]:
        """Get entry by ID"""
        db = get_db()
        row = await db.fetch_one(
            "SELECT * FROM entries WHERE id = ?", (entry_id,)
        )
        return Entry.from_dict(row) if row else None

    @staticmethod
    async def get_all() -> List[Entry]:
        """Get all entries, most recently updated first"""
        db = get_db()
        rows = await db.fetch_all(
            """SELECT * FROM entries
               ORDER BY updated_at DESC, created_at DESC, id ASC"""
        )
        return [Entry.from_dict(row) for row in rows]

    @staticmethod
    async def delete(entry_id: str) -> bool:
        """Delete an entry, returning False if it did not exist"""
        db = get_db()
        async with db.transaction():
            cursor = await db.execute(
                "DELETE FROM entries WHERE id = ?", (entry_id,)
            )
        return cursor.rowcount > 0

    @staticmethod
    async def count() -> int:
        """Get total count of entries"""
        db = get_db()
        result = await db.fetch_one("SELECT COUNT(*) as count FROM entries")
        return result["count"] if result else 0
