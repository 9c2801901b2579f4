"""Value objects produced by the aggregation engine and trend classifier."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Trend(str, Enum):
    """Direction of a metric between two weeks."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class WeeklyStats(BaseModel):
    """Aggregated metrics for one Monday..Sunday window."""

    model_config = ConfigDict(frozen=True)

    habits_completed: int = Field(0, ge=0)
    habits_total: int = Field(0, ge=0, description="7 x number of habits in scope")
    habit_completion_rate: float = Field(0.0, ge=0.0)
    avg_sleep_hours: float = Field(0.0, ge=0.0)
    avg_sleep_quality: float = Field(0.0, ge=0.0)
    total_exercise_minutes: int = Field(0, ge=0)
    avg_daily_calories: float = Field(
        0.0, ge=0.0, description="Average over days with at least one meal"
    )
    days_tracked: int = Field(
        0, ge=0, description="Distinct days with sleep, exercise or meal records"
    )


class TrendData(BaseModel):
    """This week against last week, classified per metric."""

    model_config = ConfigDict(frozen=True)

    this_week: WeeklyStats
    last_week: WeeklyStats
    sleep_trend: Trend
    exercise_trend: Trend
    habit_trend: Trend


class StreakResponse(BaseModel):
    """Current consecutive-day activity streak."""

    streak: int = Field(ge=0)
    as_of: date


class WeeklyStatsResponse(BaseModel):
    """Weekly stats together with the window they cover."""

    week_start: date
    week_end: date
    stats: WeeklyStats


__all__ = [
    "StreakResponse",
    "Trend",
    "TrendData",
    "WeeklyStats",
    "WeeklyStatsResponse",
]
