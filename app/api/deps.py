# app/api/deps.py

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Database
from app.core.storage import FileStore, get_file_store


# ------------------------------------------------------------
# Store handle (built in the app lifespan, swapped in tests)
# ------------------------------------------------------------
def get_database(request: Request) -> Database:
    return request.app.state.db


# ------------------------------------------------------------
# DB Session
# ------------------------------------------------------------
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    db: Database = request.app.state.db
    async for session in db.get_session():
        yield session


def get_store() -> FileStore:
    return get_file_store()
