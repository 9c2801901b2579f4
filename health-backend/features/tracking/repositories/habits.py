"""Repository for habits and their daily completions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RepositoryError
from ..db_models import Habit, HabitCompletion
from ..schemas import HabitCompletionRecord, HabitRecord

logger = logging.getLogger(__name__)


class HabitRepository:
    """Expose habit definitions and completion history."""

    def __init__(self, session: AsyncSession, *, log: logging.Logger | None = None) -> None:
        self._session = session
        self._logger = log or logger

    async def get_all(self) -> list[HabitRecord]:
        """Return all habits in creation order."""

        statement = select(Habit).order_by(Habit.created_at.asc(), Habit.id.asc())
        rows = await self._execute(statement, operation="habits.get_all")
        return [HabitRecord.model_validate(row) for row in rows]

    async def get_completions_for_habit(
        self,
        habit_id: str,
        start_date: str,
        end_date: str,
    ) -> list[HabitCompletionRecord]:
        """Return completions of one habit within ``[start_date, end_date]``."""

        statement = (
            select(HabitCompletion)
            .where(
                HabitCompletion.habit_id == habit_id,
                HabitCompletion.date >= start_date,
                HabitCompletion.date <= end_date,
            )
            .order_by(HabitCompletion.date.asc())
        )
        rows = await self._execute(statement, operation="habit_completions.for_habit")
        return [HabitCompletionRecord.model_validate(row) for row in rows]

    async def get_completions_for_date_range(
        self,
        start_date: str,
        end_date: str,
    ) -> list[HabitCompletionRecord]:
        """Return completions of every habit within ``[start_date, end_date]``."""

        statement = (
            select(HabitCompletion)
            .where(HabitCompletion.date >= start_date, HabitCompletion.date <= end_date)
            .order_by(HabitCompletion.date.asc())
        )
        rows = await self._execute(statement, operation="habit_completions.for_range")
        return [HabitCompletionRecord.model_validate(row) for row in rows]

    async def create(
        self,
        *,
        name: str,
        frequency: str = "daily",
        description: str | None = None,
        color: str = "#4CAF50",
        target_days_per_week: int | None = None,
    ) -> HabitRecord:
        habit = Habit(
            name=name,
            frequency=frequency,
            description=description,
            color=color,
            target_days_per_week=target_days_per_week,
        )
        self._session.add(habit)
        await self._flush(operation="habits.create")
        return HabitRecord.model_validate(habit)

    async def set_completion(
        self,
        habit_id: str,
        date: str,
        completed: bool,
        notes: str | None = None,
    ) -> HabitCompletionRecord:
        """Insert or update the completion of ``habit_id`` on ``date``."""

        statement = select(HabitCompletion).where(
            HabitCompletion.habit_id == habit_id,
            HabitCompletion.date == date,
        )
        existing = await self._execute(statement, operation="habit_completions.lookup")
        completed_at = datetime.now(timezone.utc) if completed else None

        if existing:
            completion = existing[0]
            completion.completed = completed
            completion.completed_at = completed_at
            completion.notes = notes
        else:
            completion = HabitCompletion(
                habit_id=habit_id,
                date=date,
                completed=completed,
                completed_at=completed_at,
                notes=notes,
            )
            self._session.add(completion)

        await self._flush(operation="habit_completions.set")
        return HabitCompletionRecord.model_validate(completion)

    async def _execute(self, statement: Select, *, operation: str) -> list:
        try:
            result = await self._session.execute(statement)
        except SQLAlchemyError as exc:
            self._logger.exception("Failed to read habits", extra={"operation": operation})
            raise RepositoryError("Failed to read habits", operation=operation) from exc
        return list(result.scalars().all())

    async def _flush(self, *, operation: str) -> None:
        try:
            await self._session.flush()
        except SQLAlchemyError as exc:
            self._logger.exception("Failed to write habits", extra={"operation": operation})
            raise RepositoryError("Failed to write habits", operation=operation) from exc


__all__ = ["HabitRepository"]
