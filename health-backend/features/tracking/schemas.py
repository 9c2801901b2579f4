"""Read models returned by the tracking repositories.

Records are frozen: aggregation code reads them but never mutates source data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

HabitFrequency = Literal["daily", "weekly", "custom"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)


class HabitRecord(_Record):
    id: str
    name: str
    description: str | None = None
    color: str = "#4CAF50"
    frequency: HabitFrequency = "daily"
    target_days_per_week: int | None = None


class HabitCompletionRecord(_Record):
    id: str
    habit_id: str
    date: str = Field(description="Date in YYYY-MM-DD format")
    completed: bool
    notes: str | None = None


class SleepRecord(_Record):
    id: str
    date: str = Field(description="Date in YYYY-MM-DD format")
    bedtime: str
    wake_time: str
    duration_minutes: int = Field(ge=0)
    quality: int = Field(ge=1, le=5)
    notes: str | None = None
    factors: list[str] | None = None


class ExerciseRecord(_Record):
    id: str
    date: str = Field(description="Date in YYYY-MM-DD format")
    type: str
    duration_minutes: int = Field(ge=0)
    intensity: str
    calories_burned: int | None = None
    notes: str | None = None


class MealRecord(_Record):
    id: str
    date: str = Field(description="Date in YYYY-MM-DD format")
    meal_type: MealType
    name: str | None = None
    total_calories: float = Field(ge=0)
    total_protein: float | None = None
    total_carbs: float | None = None
    total_fat: float | None = None


class JournalRecord(_Record):
    id: str
    date: str = Field(description="Date in YYYY-MM-DD format")
    title: str | None = None
    content: str
    mood: int | None = Field(default=None, ge=1, le=5)
    tags: list[str] | None = None
    is_scanned: bool = False
    ocr_confidence: float | None = None


__all__ = [
    "ExerciseRecord",
    "HabitCompletionRecord",
    "HabitFrequency",
    "HabitRecord",
    "JournalRecord",
    "MealRecord",
    "MealType",
    "SleepRecord",
]
