"""Service facade over the aggregation engine and trend classifier."""

from __future__ import annotations

from datetime import date
from typing import Callable

from features.tracking.repositories import TrackingRepositories

from .aggregation import compute_daily_streak, compute_weekly_stats
from .schemas import StreakResponse, TrendData, WeeklyStatsResponse
from .trends import compute_trend_data
from .windows import week_window


class InsightsService:
    """Provide weekly stats, trends and streaks for one set of repositories."""

    def __init__(
        self,
        repositories: TrackingRepositories,
        *,
        today_provider: Callable[[], date] = date.today,
    ) -> None:
        self._repositories = repositories
        self._today = today_provider

    async def get_weekly_stats(self, reference_date: date | None = None) -> WeeklyStatsResponse:
        reference = reference_date or self._today()
        window = week_window(reference)
        stats = await compute_weekly_stats(self._repositories, reference)
        return WeeklyStatsResponse(week_start=window.start, week_end=window.end, stats=stats)

    async def get_trends(self) -> TrendData:
        return await compute_trend_data(self._repositories, today=self._today())

    async def get_streak(self) -> StreakResponse:
        today = self._today()
        streak = await compute_daily_streak(self._repositories, today=today)
        return StreakResponse(streak=streak, as_of=today)


__all__ = ["InsightsService"]
