"""Repository for exercise sessions."""

from __future__ import annotations

from ..db_models import ExerciseSession
from ..schemas import ExerciseRecord
from .base import DatedRepository


class ExerciseRepository(DatedRepository[ExerciseRecord]):
    """Read and log workouts."""

    model = ExerciseSession
    record_type = ExerciseRecord
    name = "exercise_sessions"

    async def create(
        self,
        *,
        date: str,
        type: str,
        duration_minutes: int,
        intensity: str = "moderate",
        calories_burned: int | None = None,
        notes: str | None = None,
    ) -> ExerciseRecord:
        session = ExerciseSession(
            date=date,
            type=type,
            duration_minutes=duration_minutes,
            intensity=intensity,
            calories_burned=calories_burned,
            notes=notes,
        )
        return await self._add(session, operation="exercise_sessions.create")


__all__ = ["ExerciseRepository"]
