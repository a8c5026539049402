import aiosqlite
import pytest

from molo.db.migrations import MIGRATIONS, get_current_version, run_migrations


async def test_all_migrations_applied(database):
    assert await get_current_version(database) == len(MIGRATIONS)


async def test_rerun_is_a_no_op(database):
    version = await run_migrations(database)

    assert version == len(MIGRATIONS)
    rows = await database.fetch_all("SELECT version FROM schema_version ORDER BY version")
    assert [row["version"] for row in rows] == [m[0] for m in MIGRATIONS]


async def test_credentials_table_holds_one_row(database):
    await database.execute(
        "INSERT INTO credentials (id, secret_hash, created_at, updated_at) VALUES (1, 'h', 0, 0)"
    )
    await database.commit()

    with pytest.raises(aiosqlite.IntegrityError):
        await database.execute(
            "INSERT INTO credentials (id, secret_hash, created_at, updated_at) VALUES (2, 'h', 0, 0)"
        )
    await database.rollback()

    rows = await database.fetch_all("SELECT id FROM credentials")
    assert [row["id"] for row in rows] == [1]
