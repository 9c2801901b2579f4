"""Local embedded database configuration."""

from __future__ import annotations

from core.utils.env import get_env

TRACKR_DB_URL = get_env("TRACKR_DB_URL", "sqlite+aiosqlite:///./trackr.db") or ""
ECHO = (get_env("DB_ECHO", "false") or "false").lower() == "true"

__all__ = [
    "TRACKR_DB_URL",
    "ECHO",
]
