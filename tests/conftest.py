import os
import tempfile

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ------------------------------------------------------------------
# Point settings at throwaway locations BEFORE importing app.main,
# the uploads mount is created at import time.
# ------------------------------------------------------------------
_TMP_ROOT = tempfile.mkdtemp(prefix="admission-portal-tests-")
os.environ["PUBLIC_DIR"] = os.path.join(_TMP_ROOT, "public")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "public", "uploads")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_ROOT}/unused.db"

from app.main import app
from app.api.deps import get_store
from app.core.database import Database
from app.core.storage import FileStore


@pytest_asyncio.fixture
async def db(tmp_path):
    """Fresh SQLite file per test, attached the same way the lifespan does."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.init_db()
    app.state.db = database
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(db):
    async with db.session() as session:
        yield session


@pytest.fixture
def store(tmp_path):
    public = tmp_path / "public"
    return FileStore(str(public / "uploads"), str(public))


@pytest_asyncio.fixture
async def client(db, store):
    app.dependency_overrides[get_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


# ------------------------------------------------------------------
# Shared setup helpers
# ------------------------------------------------------------------
@pytest_asyncio.fixture
async def university_id(client):
    payload = {
        "name": "Northfield University",
        "contactPerson": "Dana Reyes",
        "email": "admissions@northfield.edu",
        "password": "campus-pass-1",
        "address": "12 College Road",
        "website": "https://northfield.edu",
    }
    res = await client.post("/api/universities/register", json=payload)
    assert res.status_code == 200
    return res.json()["universityId"]


@pytest_asyncio.fixture
async def student_id(client):
    payload = {"name": "Ayesha Khan", "email": "ayesha@example.com", "password": "secret123"}
    res = await client.post("/api/students/signup", json=payload)
    assert res.status_code == 200
    return res.json()["studentId"]
