"""Dependency wiring for tracking-backed FastAPI endpoints."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.db import (
    SessionDependency,
    get_session_dependency,
    require_trackr_session_factory,
    session_scope,
)

from .repositories import TrackingRepositories, build_repositories

logger = logging.getLogger(__name__)

_session_dependency: SessionDependency | None = None


def _resolve_session_dependency() -> SessionDependency:
    """Return the cached FastAPI session dependency, initialising it on demand."""

    global _session_dependency

    if _session_dependency is None:
        logger.debug("Initialising tracking session dependency")
        _session_dependency = get_session_dependency(require_trackr_session_factory())

    return _session_dependency


async def get_tracking_session() -> AsyncIterator[AsyncSession]:
    """Yield an :class:`AsyncSession` scoped to one request."""

    dependency = _resolve_session_dependency()
    async for session in dependency():
        yield session


def get_tracking_repositories(
    session: AsyncSession = Depends(get_tracking_session),
) -> TrackingRepositories:
    """Provide repositories bound to the request session."""

    return build_repositories(session)


@asynccontextmanager
async def open_repositories() -> AsyncIterator[TrackingRepositories]:
    """Open a standalone session for work that outlives a single request."""

    async with session_scope(require_trackr_session_factory()) as session:
        yield build_repositories(session)


__all__ = ["get_tracking_repositories", "get_tracking_session", "open_repositories"]
