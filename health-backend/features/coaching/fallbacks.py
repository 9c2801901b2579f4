"""Artifacts returned when the model answers with something unusable, or
when there is too little history to ask it at all."""

from __future__ import annotations

from .schemas import (
    AIInsight,
    DailyCoaching,
    ExerciseRecommendation,
    HabitSuggestion,
    MoodAnalysis,
    NutritionAdvice,
    SleepAnalysis,
)

DEFAULT_COACHING = DailyCoaching(
    greeting="Good morning! Let's make today count.",
    insights=[
        AIInsight(
            category="overall",
            title="Keep Tracking",
            insight="Continue logging your health data to get personalized insights.",
            suggestion="Try to log at least one activity today.",
            priority="medium",
        )
    ],
    daily_tip="Stay hydrated by keeping a water bottle nearby.",
    motivational_message="Every small step counts towards better health!",
)

DEFAULT_HABIT_SUGGESTIONS: tuple[HabitSuggestion, ...] = (
    HabitSuggestion(
        name="Morning Stretch",
        description="5-minute stretching routine after waking up",
        frequency="daily",
        reason="Helps improve flexibility and starts your day with movement",
    ),
)

DEFAULT_SLEEP_ANALYSIS = SleepAnalysis(
    pattern="Variable sleep schedule",
    quality_trend="stable",
    recommendations=["Try to maintain consistent sleep and wake times"],
    optimal_bedtime="10:30 PM",
)

DEFAULT_EXERCISE_RECOMMENDATION = ExerciseRecommendation(
    type="Walking",
    duration=30,
    intensity="low",
    reason="A gentle walk is always a great choice",
    target_calories=150,
)

DEFAULT_MOOD_ANALYSIS = MoodAnalysis(
    overall_mood="Varied emotions throughout the week",
    common_themes=[],
    mood_trend="stable",
    suggestions=["Continue journaling to track your emotional patterns"],
)

DEFAULT_NUTRITION_ADVICE = NutritionAdvice(
    advice="Focus on balanced meals with protein, carbs, and healthy fats.",
    suggestions=["Include vegetables with each meal", "Stay hydrated"],
)

# Returned without a remote call when the history is too thin
INSUFFICIENT_SLEEP_ANALYSIS = SleepAnalysis(
    pattern="Not enough data",
    quality_trend="stable",
    recommendations=["Log at least 3 nights of sleep to get personalized analysis"],
    optimal_bedtime="10:30 PM",
)

INSUFFICIENT_MOOD_ANALYSIS = MoodAnalysis(
    overall_mood="Not enough data",
    common_themes=[],
    mood_trend="stable",
    suggestions=["Write a few journal entries to get mood analysis"],
)

INSUFFICIENT_NUTRITION_ADVICE = NutritionAdvice(
    advice="Log more meals to get personalized nutrition advice.",
    suggestions=["Try to log at least 3 meals to see patterns"],
)

__all__ = [
    "DEFAULT_COACHING",
    "DEFAULT_EXERCISE_RECOMMENDATION",
    "DEFAULT_HABIT_SUGGESTIONS",
    "DEFAULT_MOOD_ANALYSIS",
    "DEFAULT_NUTRITION_ADVICE",
    "DEFAULT_SLEEP_ANALYSIS",
    "INSUFFICIENT_MOOD_ANALYSIS",
    "INSUFFICIENT_NUTRITION_ADVICE",
    "INSUFFICIENT_SLEEP_ANALYSIS",
]
