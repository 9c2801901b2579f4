"""Artifacts produced by the coaching generator.

Models accept both snake_case and the camelCase keys the model is prompted to
return, and serialise as snake_case.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InsightCategory = Literal["habits", "sleep", "exercise", "nutrition", "journal", "overall"]
Priority = Literal["low", "medium", "high"]
Direction = Literal["improving", "declining", "stable"]


class _Artifact(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class AIInsight(_Artifact):
    category: InsightCategory
    title: str
    insight: str
    suggestion: str
    priority: Priority


class DailyCoaching(_Artifact):
    greeting: str
    insights: list[AIInsight]
    daily_tip: str
    motivational_message: str


class HabitSuggestion(_Artifact):
    name: str
    description: str
    frequency: Literal["daily", "weekly"]
    reason: str


class SleepAnalysis(_Artifact):
    pattern: str
    quality_trend: Direction
    recommendations: list[str]
    optimal_bedtime: str


class ExerciseRecommendation(_Artifact):
    type: str
    duration: int = Field(ge=0, description="Minutes")
    intensity: Priority
    reason: str
    target_calories: int = Field(ge=0)


class MoodAnalysis(_Artifact):
    overall_mood: str
    common_themes: list[str]
    mood_trend: Direction
    suggestions: list[str]


class NutritionAdvice(_Artifact):
    advice: str
    suggestions: list[str]


class ArtifactKind(str, Enum):
    """The six artifacts the insights store can fetch."""

    COACHING = "coaching"
    HABITS = "habits"
    SLEEP = "sleep"
    EXERCISE = "exercise"
    MOOD = "mood"
    NUTRITION = "nutrition"


__all__ = [
    "AIInsight",
    "ArtifactKind",
    "DailyCoaching",
    "ExerciseRecommendation",
    "HabitSuggestion",
    "MoodAnalysis",
    "NutritionAdvice",
    "SleepAnalysis",
]
