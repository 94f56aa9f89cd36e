"""Database configuration module."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from billing.settings import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
)

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency for database session."""
    async with async_session() as session:
        yield session


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Scope a group of statements to a single transaction.

    Commits when the block exits normally. On any exception, including
    task cancellation, the whole transaction is rolled back and the
    exception is re-raised unchanged.

    Usage:
        async with unit_of_work(db):
            await db.execute(...)
            await db.execute(...)
    """
    try:
        yield db
        await db.commit()
    except BaseException as e:
        # Cancellation must not leave half-written rows for the next commit
        await db.rollback()
        if isinstance(e, Exception):
            logger.error(f"Transaction rolled back: {e!r}")
        else:
            logger.warning(f"Transaction rolled back after {type(e).__name__}")
        raise
