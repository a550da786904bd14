"""Async SQLAlchemy database engine and session management.

Provides the relational layer used by the ``sql`` task store:
- Connection URL built from DATABASE_URL or the DB_* variables
- Lazily created engine with connection pooling
- FastAPI dependency injection via get_session()
- Automatic session lifecycle (commit on success, rollback on error)
"""

import logging
import os
from typing import AsyncGenerator

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration from environment
# ---------------------------------------------------------------------------

DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "5432"))
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_NAME = os.getenv("DB_NAME", "postgres")

POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "20"))
MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
ECHO_SQL = os.getenv("DB_ECHO", "false").lower() == "true"


def database_url() -> URL:
    """Return the configured database URL.

    DATABASE_URL wins when set; otherwise the URL is composed from the
    individual DB_* connection parameters.
    """
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return make_url(explicit)
    return URL.create(
        "postgresql+asyncpg",
        username=DB_USER,
        password=DB_PASSWORD,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
    )


# ---------------------------------------------------------------------------
# Engine & session factory
# ---------------------------------------------------------------------------

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(url: URL | str) -> AsyncEngine:
    """Create an async engine, applying pool settings where the dialect has a pool."""
    url = make_url(url)
    kwargs: dict = {"echo": ECHO_SQL, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        kwargs.update(pool_size=POOL_SIZE, max_overflow=MAX_OVERFLOW)
    return create_async_engine(url, **kwargs)


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        url = database_url()
        logger.info("Connecting to %s", url.render_as_string(hide_password=True))
        _engine = build_engine(url)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session with automatic commit/rollback.

    Usage in FastAPI routes::

        @router.get("/items")
        async def list_items(session: AsyncSession = Depends(get_session)):
            result = await session.execute(select(Item))
            return result.scalars().all()
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------

async def init_db(engine: AsyncEngine | None = None) -> None:
    """Initialize database tables from models (dev/test only)."""
    from core.models.base import Base
    import verticals.todo.models.db_models  # noqa: F401

    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
