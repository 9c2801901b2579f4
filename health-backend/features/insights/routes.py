"""HTTP routing for derived insights."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.pydantic_schemas import ok as api_ok

from .dependencies import get_insights_service
from .service import InsightsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/insights", tags=["Insights"])


@router.get(
    "/weekly",
    summary="Weekly statistics",
    description="Aggregate habits, sleep, exercise and meals for the Monday-Sunday week containing a date.",
)
async def weekly_stats_endpoint(
    reference_date: Optional[date] = Query(
        default=None,
        alias="date",
        description="Any day inside the target week (defaults to today)",
    ),
    service: InsightsService = Depends(get_insights_service),
):
    response = await service.get_weekly_stats(reference_date)
    logger.info(
        "Weekly stats requested",
        extra={"week_start": response.week_start.isoformat()},
    )
    return api_ok(
        message="Retrieved weekly stats",
        data=response.model_dump(mode="json"),
        meta={"week_start": response.week_start.isoformat(), "week_end": response.week_end.isoformat()},
    )


@router.get(
    "/trends",
    summary="Week-over-week trends",
    description="Compare this week with last week for sleep, exercise and habit completion.",
)
async def trends_endpoint(service: InsightsService = Depends(get_insights_service)):
    trends = await service.get_trends()
    return api_ok(message="Retrieved trends", data=trends.model_dump(mode="json"))


@router.get(
    "/streak",
    summary="Daily activity streak",
    description="Consecutive days, ending today, with any sleep, exercise or meal record.",
)
async def streak_endpoint(service: InsightsService = Depends(get_insights_service)):
    streak = await service.get_streak()
    return api_ok(message="Retrieved streak", data=streak.model_dump(mode="json"))


__all__ = ["router"]
