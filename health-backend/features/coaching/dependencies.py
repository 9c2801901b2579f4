"""Application-wide insights store wiring."""

from __future__ import annotations

import logging

from .generator import HealthInsightsGenerator
from .store import AIInsightsStore

logger = logging.getLogger(__name__)

_insights_store: AIInsightsStore | None = None


def get_insights_store() -> AIInsightsStore:
    """Return the shared store, creating it on first use."""

    global _insights_store

    if _insights_store is None:
        logger.debug("Initialising AI insights store")
        _insights_store = AIInsightsStore(HealthInsightsGenerator())

    return _insights_store


def reset_insights_store() -> None:
    """Drop the shared store; the next lookup builds a fresh one."""

    global _insights_store
    _insights_store = None


__all__ = ["get_insights_store", "reset_insights_store"]
