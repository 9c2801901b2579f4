"""Test configuration helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import AsyncIterator

import pytest

# Explicitly opt-in to the async plugins we rely on, even when plugin
# auto-discovery is disabled via ``PYTEST_DISABLE_PLUGIN_AUTOLOAD``.
pytest_plugins = ("anyio", "pytest_asyncio")

# Ensure ``import core`` and the other absolute imports used throughout the
# codebase succeed when tests run from arbitrary working directories.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("TRACKR_DB_URL", "sqlite+aiosqlite:///:memory:")

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from features.tracking.repositories import TrackingRepositories, build_repositories  # noqa: E402
from infrastructure.db import prepare_database  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    """Default AnyIO backend used when tests do not override the fixture."""

    return "asyncio"


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite engine with every tracking table created."""

    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await prepare_database(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def repositories(session: AsyncSession) -> TrackingRepositories:
    return build_repositories(session)
