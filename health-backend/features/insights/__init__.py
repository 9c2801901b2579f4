"""Insights feature: weekly aggregation, streaks and trend classification."""

from __future__ import annotations

from .aggregation import compute_daily_streak, compute_weekly_stats
from .schemas import StreakResponse, Trend, TrendData, WeeklyStats
from .trends import classify_trend, compute_trend_data
from .windows import WeekWindow, week_window

__all__ = [
    "StreakResponse",
    "Trend",
    "TrendData",
    "WeekWindow",
    "WeeklyStats",
    "classify_trend",
    "compute_daily_streak",
    "compute_trend_data",
    "compute_weekly_stats",
    "week_window",
]
