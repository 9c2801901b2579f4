"""SQLAlchemy ORM models for the tracked event tables.

Calendar days are stored as ``YYYY-MM-DD`` strings; the fixed-width format
keeps range filters valid as plain string comparisons.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.db.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Timestamped:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class Habit(_Timestamped, Base):
    """A habit the user wants to perform on a schedule."""

    __tablename__ = "habits"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str] = mapped_column(String(16), nullable=False, default="#4CAF50")
    frequency: Mapped[str] = mapped_column(String(16), nullable=False, default="daily")
    target_days_per_week: Mapped[int | None] = mapped_column(Integer, nullable=True)

    completions: Mapped[list["HabitCompletion"]] = relationship(
        back_populates="habit",
        cascade="all, delete-orphan",
    )


class HabitCompletion(Base):
    """Completion state of one habit on one calendar day."""

    __tablename__ = "habit_completions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    habit_id: Mapped[str] = mapped_column(
        ForeignKey("habits.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    habit: Mapped[Habit] = relationship(back_populates="completions")


class SleepEntry(_Timestamped, Base):
    """One night of sleep, keyed by the calendar day it is logged for."""

    __tablename__ = "sleep_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    bedtime: Mapped[str] = mapped_column(String(40), nullable=False)
    wake_time: Mapped[str] = mapped_column(String(40), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    quality: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    factors: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)


class ExerciseSession(_Timestamped, Base):
    """A logged workout."""

    __tablename__ = "exercise_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(40), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    intensity: Mapped[str] = mapped_column(String(16), nullable=False, default="moderate")
    calories_burned: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class Meal(_Timestamped, Base):
    """A logged meal with its nutrition totals."""

    __tablename__ = "meals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    meal_type: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    total_calories: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total_protein: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_carbs: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    photo_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
    ai_analysis: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)


class JournalEntry(_Timestamped, Base):
    """A written or scanned journal entry."""

    __tablename__ = "journal_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    mood: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    is_scanned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    original_image_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
    ocr_confidence: Mapped[float | None] = mapped_column(Float, nullable=True)


__all__ = [
    "ExerciseSession",
    "Habit",
    "HabitCompletion",
    "JournalEntry",
    "Meal",
    "SleepEntry",
]
