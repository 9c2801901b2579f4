"""Fold raw tracked events into weekly statistics and activity streaks.

Both operations read through the tracking repositories and never write.
Repository failures propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from config.insights.defaults import DAYS_PER_WEEK
from features.tracking.repositories import TrackingRepositories
from features.tracking.schemas import ExerciseRecord, MealRecord, SleepRecord

from .schemas import WeeklyStats
from .windows import WeekWindow, to_date_string, week_window

logger = logging.getLogger(__name__)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def summarise_sleep(entries: list[SleepRecord]) -> tuple[float, float]:
    """Return ``(avg_hours, avg_quality)``; zeros when there are no entries."""

    if not entries:
        return 0.0, 0.0
    hours = _mean([entry.duration_minutes / 60 for entry in entries])
    quality = _mean([float(entry.quality) for entry in entries])
    return hours, quality


def average_daily_calories(meals: list[MealRecord]) -> float:
    """Average calories per day that has at least one meal."""

    unique_days = {meal.date for meal in meals}
    if not unique_days:
        return 0.0
    return sum(meal.total_calories for meal in meals) / len(unique_days)


def activity_dates(
    sleep: Iterable[SleepRecord],
    exercise: Iterable[ExerciseRecord],
    meals: Iterable[MealRecord],
) -> set[str]:
    """Union of dates carrying sleep, exercise or meal records."""

    dates = {entry.date for entry in sleep}
    dates.update(session.date for session in exercise)
    dates.update(meal.date for meal in meals)
    return dates


async def _count_habit_completions(
    repositories: TrackingRepositories, window: WeekWindow
) -> tuple[int, int]:
    habits = await repositories.habits.get_all()
    completed = 0
    total = 0
    for habit in habits:
        completions = await repositories.habits.get_completions_for_habit(
            habit.id, window.start_str, window.end_str
        )
        completed += sum(1 for completion in completions if completion.completed)
        # Every habit contributes a full week regardless of its frequency
        total += DAYS_PER_WEEK
    return completed, total


async def compute_weekly_stats(
    repositories: TrackingRepositories,
    week_start_date: date,
) -> WeeklyStats:
    """Aggregate the Monday..Sunday week containing ``week_start_date``."""

    window = week_window(week_start_date)

    habits_completed, habits_total = await _count_habit_completions(repositories, window)

    week_sleep = [entry for entry in await repositories.sleep.get_all() if window.contains(entry.date)]
    week_exercise = [
        session for session in await repositories.exercise.get_all() if window.contains(session.date)
    ]
    week_meals = [meal for meal in await repositories.nutrition.get_all() if window.contains(meal.date)]

    avg_sleep_hours, avg_sleep_quality = summarise_sleep(week_sleep)
    days_tracked = len(activity_dates(week_sleep, week_exercise, week_meals))

    stats = WeeklyStats(
        habits_completed=habits_completed,
        habits_total=habits_total,
        habit_completion_rate=habits_completed / habits_total if habits_total > 0 else 0.0,
        avg_sleep_hours=avg_sleep_hours,
        avg_sleep_quality=avg_sleep_quality,
        total_exercise_minutes=sum(session.duration_minutes for session in week_exercise),
        avg_daily_calories=average_daily_calories(week_meals),
        days_tracked=days_tracked,
    )
    logger.debug(
        "Weekly stats %s..%s: habits=%d/%d, sleep=%d, exercise=%d, meals=%d, days=%d",
        window.start_str,
        window.end_str,
        habits_completed,
        habits_total,
        len(week_sleep),
        len(week_exercise),
        len(week_meals),
        days_tracked,
    )
    return stats


def count_streak(active_dates: set[str], today: date) -> int:
    """Count consecutive active days walking backwards from ``today``.

    Stops at the first day without activity, so it terminates for any finite
    set of dates.
    """

    streak = 0
    current = today
    while to_date_string(current) in active_dates:
        streak += 1
        current -= timedelta(days=1)
    return streak


async def compute_daily_streak(
    repositories: TrackingRepositories,
    today: date | None = None,
) -> int:
    """Return the number of consecutive days, ending today, with any activity.

    Each source is read exactly once, independent of the streak length.
    """

    today = today or date.today()
    sleep = await repositories.sleep.get_all()
    exercise = await repositories.exercise.get_all()
    meals = await repositories.nutrition.get_all()

    streak = count_streak(activity_dates(sleep, exercise, meals), today)
    logger.debug("Daily streak as of %s: %d", today.isoformat(), streak)
    return streak


__all__ = [
    "activity_dates",
    "average_daily_calories",
    "compute_daily_streak",
    "compute_weekly_stats",
    "count_streak",
    "summarise_sleep",
]
