"""Database engine management for the local embedded store.

The tracker is single-user and single-device, so one SQLite database (via
``aiosqlite``) holds every event table. Any other async SQLAlchemy URL works
too; pool arguments are only applied to non-SQLite drivers.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from config.database.defaults import ECHO as DB_ECHO, TRACKR_DB_URL
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

AsyncSessionFactory = async_sessionmaker[AsyncSession]
SessionDependency = Callable[[], AsyncIterator[AsyncSession]]

# Lazy-loaded engine and session factory - initialized to None
trackr_engine: Optional[AsyncEngine] = None
trackr_session_factory: Optional[async_sessionmaker] = None


def create_engine(url: str, *, echo: bool = False, url_key: str = "TRACKR_DB_URL") -> AsyncEngine:
    """Create an async SQLAlchemy engine for ``url``."""

    if not url:
        raise ConfigurationError("Database connection URL is required", key=url_key)

    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo)

    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Return an ``async_sessionmaker`` bound to ``engine``."""

    return async_sessionmaker(engine, expire_on_commit=False)


def get_trackr_engine() -> AsyncEngine:
    """Return the application engine, creating it on first use."""

    global trackr_engine
    if trackr_engine is None:
        trackr_engine = create_engine(TRACKR_DB_URL, echo=DB_ECHO)
        logger.info("Created tracker database engine (%s)", trackr_engine.dialect.name)
    return trackr_engine


def require_trackr_session_factory() -> async_sessionmaker:
    """Return the application session factory, creating it on first use."""

    global trackr_session_factory
    if trackr_session_factory is None:
        trackr_session_factory = get_session_factory(get_trackr_engine())
    return trackr_session_factory


async def dispose_engine() -> None:
    """Dispose the application engine if it was initialised."""

    global trackr_engine, trackr_session_factory

    if trackr_engine is None:
        return
    try:
        await trackr_engine.dispose()
    except Exception:  # pragma: no cover - best-effort cleanup
        logger.warning("Failed to dispose tracker engine", exc_info=True)
    finally:
        trackr_engine = None
        trackr_session_factory = None


__all__ = [
    "AsyncSessionFactory",
    "SessionDependency",
    "create_engine",
    "dispose_engine",
    "get_session_factory",
    "get_trackr_engine",
    "require_trackr_session_factory",
]
