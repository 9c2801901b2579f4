"""Dependency wiring for insights FastAPI endpoints."""

from __future__ import annotations

from fastapi import Depends

from features.tracking.dependencies import get_tracking_repositories
from features.tracking.repositories import TrackingRepositories

from .service import InsightsService


def get_insights_service(
    repositories: TrackingRepositories = Depends(get_tracking_repositories),
) -> InsightsService:
    """Resolve an :class:`InsightsService` bound to the request session."""

    return InsightsService(repositories)


__all__ = ["get_insights_service"]
