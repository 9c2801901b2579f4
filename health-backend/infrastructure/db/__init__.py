"""Database infrastructure helpers."""

from __future__ import annotations

from .base import Base, metadata, prepare_database
from .engines import (
    AsyncSessionFactory,
    SessionDependency,
    create_engine,
    dispose_engine,
    get_session_factory,
    get_trackr_engine,
    require_trackr_session_factory,
)
from .sessions import get_session_dependency, session_scope

__all__ = [
    "AsyncSessionFactory",
    "Base",
    "SessionDependency",
    "create_engine",
    "dispose_engine",
    "get_session_dependency",
    "get_session_factory",
    "get_trackr_engine",
    "metadata",
    "prepare_database",
    "require_trackr_session_factory",
    "session_scope",
]
