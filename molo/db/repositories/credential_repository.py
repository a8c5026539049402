from typing import Optional

from molo.db.database import get_db
from molo.models.credential import Credential


class CredentialRepository:
    """Repository for the singleton credential row"""

    @staticmethod
    async def exists() -> bool:
        db = get_db()
        row = await db.fetch_one("SELECT 1 AS present FROM credentials WHERE id = 1")
        return row is not None

    @staticmethod
    async def get() -> Optional[Credential]:
        db = get_db()
        row = await db.fetch_one("SELECT * FROM credentials WHERE id = 1")
        return Credential.from_dict(row) if row else None

    @staticmethod
    async def create_if_absent(secret_hash: str, now: int) -> bool:
        """
        Insert the credential unless one already exists.

        Returns True only for the call whose insert actually landed.
        """
        db = get_db()
        async with db.transaction():
            cursor = await db.execute(
                """INSERT INTO credentials (id, secret_hash, created_at, updated_at)
                   VALUES (1, ?, ?, ?)
                   ON CONFLICT(id) DO NOTHING""",
                (secret_hash, now, now)
            )
        return cursor.rowcount == 1
