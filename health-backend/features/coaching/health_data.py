"""Recent history collected for coaching prompts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from config.insights import HISTORY_DAYS
from features.insights.windows import to_date_string
from features.tracking.repositories import TrackingRepositories
from features.tracking.schemas import (
    ExerciseRecord,
    HabitCompletionRecord,
    HabitRecord,
    JournalRecord,
    MealRecord,
    SleepRecord,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HabitHistory:
    habit: HabitRecord
    completions: tuple[HabitCompletionRecord, ...]

    @property
    def completed_count(self) -> int:
        return sum(1 for completion in self.completions if completion.completed)


@dataclass(frozen=True)
class HealthData:
    habits: tuple[HabitHistory, ...]
    sleep: tuple[SleepRecord, ...]
    exercise: tuple[ExerciseRecord, ...]
    meals: tuple[MealRecord, ...]
    journal: tuple[JournalRecord, ...]


def average_sleep_quality(sleep: Sequence[SleepRecord]) -> Optional[float]:
    if not sleep:
        return None
    return sum(entry.quality for entry in sleep) / len(sleep)


async def gather_health_data(
    repositories: TrackingRepositories,
    today: date,
    *,
    history_days: int = HISTORY_DAYS,
) -> HealthData:
    """Read the last ``history_days`` days (inclusive of today) from every source.

    Habit completions are fetched in one range query and grouped per habit.
    """

    start = to_date_string(today - timedelta(days=history_days))
    end = to_date_string(today)

    habits = await repositories.habits.get_all()
    sleep = await repositories.sleep.get_by_date_range(start, end)
    exercise = await repositories.exercise.get_by_date_range(start, end)
    meals = await repositories.nutrition.get_by_date_range(start, end)
    journal = await repositories.journal.get_by_date_range(start, end)
    completions = await repositories.habits.get_completions_for_date_range(start, end)

    by_habit: dict[str, list[HabitCompletionRecord]] = {}
    for completion in completions:
        by_habit.setdefault(completion.habit_id, []).append(completion)

    logger.debug(
        "Gathered health data %s..%s: habits=%d sleep=%d exercise=%d meals=%d journal=%d",
        start,
        end,
        len(habits),
        len(sleep),
        len(exercise),
        len(meals),
        len(journal),
    )
    return HealthData(
        habits=tuple(HabitHistory(habit, tuple(by_habit.get(habit.id, ()))) for habit in habits),
        sleep=tuple(sleep),
        exercise=tuple(exercise),
        meals=tuple(meals),
        journal=tuple(journal),
    )


__all__ = ["HabitHistory", "HealthData", "average_sleep_quality", "gather_health_data"]
