# app/core/database.py

from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)
from sqlmodel import SQLModel


# ----------------------------------------------------
# SQLite needs foreign keys switched on per connection
# ----------------------------------------------------
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Store handle owned by the application.

    Built once at startup (or per test), attached to ``app.state.db`` and
    disposed on shutdown. Nothing in the code base opens a connection
    without going through an instance of this class.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.backend = make_url(url).get_backend_name()

        self.engine = create_async_engine(
            url,
            echo=echo,
            future=True,
            pool_pre_ping=True,
        )

        if self.backend == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    # ----------------------------------------------------
    # Sessions
    # ----------------------------------------------------
    def session(self) -> AsyncSession:
        return self.session_factory()

    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            yield session

    # ----------------------------------------------------
    # Create tables
    # ----------------------------------------------------
    async def init_db(self):
        # table modules must be imported before create_all sees them
        from app.models import admin, campus, department, faculty, program, student, university  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def ping(self):
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.debug(f"DB connection OK ({self.backend})")

    async def dispose(self):
        await self.engine.dispose()
