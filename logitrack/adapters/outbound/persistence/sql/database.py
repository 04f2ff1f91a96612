# logitrack/adapters/outbound/persistence/sql/database.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

# Configure logger
logger = logging.getLogger(__name__)


def to_async_url(database_url: str) -> str:
    """Swap sync Postgres drivers for asyncpg."""
    url = str(database_url)
    for sync_prefix in ("postgresql+psycopg2://", "postgresql://", "postgres://"):
        if url.startswith(sync_prefix):
            return "postgresql+asyncpg://" + url[len(sync_prefix):]
    return url


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for the given URL.

    Pool tuning only applies to server databases; SQLite keeps its defaults.
    """
    url = to_async_url(database_url)
    logger.info(f"Connecting to database: {url.split('@')[-1]}")

    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False, future=True)

    return create_async_engine(
        url,
        echo=False,
        future=True,
        pool_size=20,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    committing on success and rolling back on error.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with session_scope(factory) as db:
            result = await db.execute(select(Service))
        ```
    """
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
