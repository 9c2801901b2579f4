"""HTTP routing for the AI coaching store."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from core.pydantic_schemas import ok as api_ok

from .dependencies import get_insights_store
from .schemas import ArtifactKind
from .store import AIInsightsStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/coaching", tags=["Coaching"])


def _state_payload(store: AIInsightsStore) -> dict:
    return store.state.model_dump(mode="json")


@router.get("/state", summary="Current coaching artifacts, loading flags and error")
async def get_state_endpoint(store: AIInsightsStore = Depends(get_insights_store)):
    return api_ok(message="Retrieved coaching state", data=_state_payload(store))


@router.post(
    "/{artifact}",
    summary="Fetch one coaching artifact",
    description="Daily coaching is served from cache for one hour; every other artifact is regenerated.",
)
async def fetch_artifact_endpoint(
    artifact: ArtifactKind,
    store: AIInsightsStore = Depends(get_insights_store),
):
    await store.fetch(artifact)
    state = store.state
    if state.error:
        logger.info("Coaching fetch for %s recorded an error: %s", artifact.value, state.error)
    return api_ok(
        message=f"Fetched {artifact.value}",
        data=_state_payload(store),
        meta={"artifact": artifact.value, "error": state.error},
    )


@router.delete("/error", summary="Clear the shared error message")
async def clear_error_endpoint(store: AIInsightsStore = Depends(get_insights_store)):
    store.clear_error()
    return api_ok(message="Cleared coaching error", data=_state_payload(store))


@router.delete("", summary="Reset every coaching artifact")
async def clear_all_endpoint(store: AIInsightsStore = Depends(get_insights_store)):
    store.clear_all()
    return api_ok(message="Cleared coaching state", data=_state_payload(store))


__all__ = ["router"]
