"""Classify week-over-week movement of tracked metrics."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from config.insights.defaults import DAYS_PER_WEEK, TREND_THRESHOLD
from features.tracking.repositories import TrackingRepositories

from .aggregation import compute_weekly_stats
from .schemas import Trend, TrendData

logger = logging.getLogger(__name__)


def classify_trend(current: float, previous: float, threshold: float = TREND_THRESHOLD) -> Trend:
    """Return UP/DOWN when the relative change strictly exceeds ``threshold``."""

    if previous == 0:
        return Trend.UP if current > 0 else Trend.STABLE

    relative_change = (current - previous) / previous
    if relative_change > threshold:
        return Trend.UP
    if relative_change < -threshold:
        return Trend.DOWN
    return Trend.STABLE


async def compute_trend_data(
    repositories: TrackingRepositories,
    today: date | None = None,
) -> TrendData:
    """Compare the current week with the week before it."""

    today = today or date.today()
    this_week = await compute_weekly_stats(repositories, today)
    last_week = await compute_weekly_stats(repositories, today - timedelta(days=DAYS_PER_WEEK))

    trend = TrendData(
        this_week=this_week,
        last_week=last_week,
        sleep_trend=classify_trend(this_week.avg_sleep_hours, last_week.avg_sleep_hours),
        exercise_trend=classify_trend(
            this_week.total_exercise_minutes, last_week.total_exercise_minutes
        ),
        habit_trend=classify_trend(
            this_week.habit_completion_rate, last_week.habit_completion_rate
        ),
    )
    logger.debug(
        "Trends as of %s: sleep=%s, exercise=%s, habits=%s",
        today.isoformat(),
        trend.sleep_trend.value,
        trend.exercise_trend.value,
        trend.habit_trend.value,
    )
    return trend


__all__ = ["classify_trend", "compute_trend_data"]
