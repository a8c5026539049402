import os

# Settings are read at import time
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
import pytest_asyncio

from molo.db.database import get_db, init_db, close_db
from molo.main import app


class FakeClock:
    """Millisecond clock that only moves when told to"""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000):
        self.now += ms


@pytest_asyncio.fixture
async def database(tmp_path):
    db = get_db()
    await db.set_db_path(str(tmp_path / "molo-test.db"))
    await init_db()
    yield db
    await close_db()


@pytest_asyncio.fixture
async def api(database):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def auth_headers(api):
    await api.post("/api/initialize", json={"pin": "1234"})
    response = await api.post("/api/login", json={"pin": "1234"})
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}
