"""Repository exports for the tracking feature."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .exercise import ExerciseRepository
from .habits import HabitRepository
from .journal import JournalRepository
from .nutrition import NutritionRepository
from .sleep import SleepRepository


@dataclass(frozen=True)
class TrackingRepositories:
    """Bundle of event repositories sharing one session."""

    habits: HabitRepository
    sleep: SleepRepository
    exercise: ExerciseRepository
    nutrition: NutritionRepository
    journal: JournalRepository


def build_repositories(session: AsyncSession) -> TrackingRepositories:
    """Instantiate the tracking repositories bound to ``session``."""

    return TrackingRepositories(
        habits=HabitRepository(session),
        sleep=SleepRepository(session),
        exercise=ExerciseRepository(session),
        nutrition=NutritionRepository(session),
        journal=JournalRepository(session),
    )


__all__ = [
    "ExerciseRepository",
    "HabitRepository",
    "JournalRepository",
    "NutritionRepository",
    "SleepRepository",
    "TrackingRepositories",
    "build_repositories",
]
