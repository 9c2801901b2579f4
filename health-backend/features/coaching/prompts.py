"""Prompt builders for the coaching generator."""

from __future__ import annotations

from config.insights import PROMPT_MEAL_LIMIT

from .health_data import HealthData, average_sleep_quality


def _lines(items, fallback: str) -> str:
    text = "\n".join(items)
    return text or fallback


def _quality_summary(data: HealthData) -> str:
    average = average_sleep_quality(data.sleep)
    return "Unknown" if average is None else f"{average:.1f}"


def _mood(value) -> str:
    return str(value) if value else "not set"


def _number(value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def build_daily_coaching_prompt(data: HealthData) -> str:
    habits = _lines(
        (f"- {h.habit.name}: {h.completed_count}/7 days completed" for h in data.habits), ""
    )
    sleep = _lines(
        (f"- {s.date}: {s.duration_minutes} min, quality {s.quality}/5" for s in data.sleep),
        "No sleep data",
    )
    exercise = _lines(
        (
            f"- {e.date}: {e.type}, {e.duration_minutes} min, {e.intensity} intensity"
            for e in data.exercise
        ),
        "No exercise data",
    )
    meals = _lines(
        (
            f"- {m.date} {m.meal_type}: {_number(m.total_calories)} cal"
            for m in data.meals[:PROMPT_MEAL_LIMIT]
        ),
        "No nutrition data",
    )
    journal = _lines(
        (f"- {j.date}: mood {_mood(j.mood)}/5" for j in data.journal),
        "No journal entries",
    )

    return f"""You are a supportive health coach AI for the Trackr app. Analyze the user's health data from the past week and provide personalized coaching.

User's Health Data (Last 7 Days):

HABITS ({len(data.habits)} habits):
{habits}

SLEEP ({len(data.sleep)} entries):
{sleep}

EXERCISE ({len(data.exercise)} sessions):
{exercise}

NUTRITION ({len(data.meals)} meals logged):
{meals}

JOURNAL ({len(data.journal)} entries):
{journal}

Respond with ONLY valid JSON in this exact format:
{{
  "greeting": "A warm, personalized morning greeting (1 sentence)",
  "insights": [
    {{
      "category": "habits|sleep|exercise|nutrition|journal|overall",
      "title": "Short insight title",
      "insight": "What you noticed from the data (1-2 sentences)",
      "suggestion": "Actionable suggestion (1 sentence)",
      "priority": "low|medium|high"
    }}
  ],
  "dailyTip": "One practical health tip for today (1 sentence)",
  "motivationalMessage": "Encouraging message based on their progress (1-2 sentences)"
}}

Generate 3-5 insights focusing on the most important patterns. Be supportive but honest. If data is limited, acknowledge it and encourage tracking."""


def build_habit_suggestions_prompt(data: HealthData) -> str:
    habits = _lines(
        (f"- {h.habit.name} ({h.habit.frequency})" for h in data.habits), "No habits yet"
    )
    exercise_types = ", ".join(dict.fromkeys(e.type for e in data.exercise)) or "None"
    moods = ", ".join(str(j.mood) for j in data.journal if j.mood) or "Not tracked"

    return f"""Based on this user's current habits and health patterns, suggest 3 new habits that would complement their routine.

Current Habits:
{habits}

Recent Exercise Types: {exercise_types}
Average Sleep Quality: {_quality_summary(data)}
Recent Journal Moods: {moods}

Respond with ONLY valid JSON array:
[
  {{
    "name": "Habit name (short)",
    "description": "Brief description",
    "frequency": "daily|weekly",
    "reason": "Why this habit would help them"
  }}
]

Suggest habits that fill gaps in their routine. Be specific and practical."""


def build_sleep_analysis_prompt(data: HealthData) -> str:
    sleep = "\n".join(
        f"- {s.date}: Bed {s.bedtime}, Wake {s.wake_time}, Duration {s.duration_minutes}min, "
        f"Quality {s.quality}/5, Factors: {', '.join(s.factors or []) or 'none'}"
        for s in data.sleep
    )
    return f"""Analyze this user's sleep data and provide insights.

Sleep Log (Last 7 Days):
{sleep}

Respond with ONLY valid JSON:
{{
  "pattern": "Brief description of their sleep pattern (1 sentence)",
  "qualityTrend": "improving|declining|stable",
  "recommendations": ["Specific recommendation 1", "Specific recommendation 2", "Specific recommendation 3"],
  "optimalBedtime": "Suggested bedtime based on their data (e.g., 10:30 PM)"
}}

Be specific and reference their actual data."""


def build_exercise_recommendation_prompt(data: HealthData) -> str:
    workouts = _lines(
        (
            f"- {e.date}: {e.type}, {e.duration_minutes}min, {e.intensity} intensity, "
            f"{e.calories_burned or 0} cal"
            for e in data.exercise
        ),
        "No recent workouts",
    )
    return f"""Based on this user's recent exercise history, suggest their next workout.

Recent Workouts (Last 7 Days):
{workouts}

Sleep Quality Average: {_quality_summary(data)}

Respond with ONLY valid JSON:
{{
  "type": "Specific exercise type (e.g., Running, HIIT, Yoga, Strength Training)",
  "duration": 30,
  "intensity": "low|medium|high",
  "reason": "Why this workout is recommended today (1 sentence)",
  "targetCalories": 200
}}

Consider their recent activity level and suggest variety. If they're tired (low sleep quality), suggest lighter exercise."""


def build_mood_analysis_prompt(data: HealthData) -> str:
    entries = "\n".join(
        f"- {j.date}: Mood {_mood(j.mood)}/5, Title: \"{j.title or 'Untitled'}\", "
        f"Tags: {', '.join(j.tags or []) or 'none'}"
        for j in data.journal
    )
    return f"""Analyze the mood patterns from these journal entries.

Recent Journal Entries:
{entries}

Respond with ONLY valid JSON:
{{
  "overallMood": "Brief description of their emotional state (1 sentence)",
  "commonThemes": ["Theme 1", "Theme 2"],
  "moodTrend": "improving|declining|stable",
  "suggestions": ["Supportive suggestion 1", "Supportive suggestion 2"]
}}

Be supportive and non-judgmental. Focus on patterns, not individual entries."""


def build_nutrition_advice_prompt(data: HealthData) -> str:
    meals = "\n".join(
        f"- {m.date} {m.meal_type}: {m.name or 'Unnamed'}, {_number(m.total_calories)} cal, "
        f"P:{_number(m.total_protein or 0)}g C:{_number(m.total_carbs or 0)}g "
        f"F:{_number(m.total_fat or 0)}g"
        for m in data.meals[:PROMPT_MEAL_LIMIT]
    )
    average = sum(m.total_calories for m in data.meals) / len(data.meals) if data.meals else 0
    return f"""Provide brief nutrition advice based on this meal log.

Recent Meals:
{meals}

Average Calories per Meal: {average:.0f}

Respond with ONLY valid JSON:
{{
  "advice": "One sentence of personalized nutrition advice",
  "suggestions": ["Specific suggestion 1", "Specific suggestion 2", "Specific suggestion 3"]
}}

Be practical and encouraging."""


__all__ = [
    "build_daily_coaching_prompt",
    "build_exercise_recommendation_prompt",
    "build_habit_suggestions_prompt",
    "build_mood_analysis_prompt",
    "build_nutrition_advice_prompt",
    "build_sleep_analysis_prompt",
]
