from features.coaching.health_data import HabitHistory, HealthData
from features.coaching.prompts import (
    build_daily_coaching_prompt,
    build_habit_suggestions_prompt,
    build_nutrition_advice_prompt,
)
from tests.helpers.tracking_fakes import completion, exercise, habit, meal, sleep


def _data(**overrides) -> HealthData:
    values = dict(habits=(), sleep=(), exercise=(), meals=(), journal=())
    values.update(overrides)
    return HealthData(**values)


def test_empty_history_uses_placeholders():
    prompt = build_daily_coaching_prompt(_data())

    assert "No sleep data" in prompt
    assert "No exercise data" in prompt
    assert "No nutrition data" in prompt
    assert "No journal entries" in prompt
    assert '"dailyTip"' in prompt


def test_habit_lines_show_completed_days():
    read = habit("Read")
    history = HabitHistory(read, (completion(read.id, "2026-02-19"), completion(read.id, "2026-02-18", False)))

    prompt = build_daily_coaching_prompt(_data(habits=(history,)))

    assert "- Read: 1/7 days completed" in prompt


def test_nutrition_prompt_limits_meals_and_averages():
    meals = tuple(meal(f"2026-02-{day:02d}", 500) for day in range(1, 13))

    prompt = build_nutrition_advice_prompt(_data(meals=meals))

    assert prompt.count("cal, P:") == 10
    assert "Average Calories per Meal: 500" in prompt


def test_habit_suggestion_prompt_summarises_history():
    prompt = build_habit_suggestions_prompt(
        _data(
            sleep=(sleep("2026-02-19", quality=3), sleep("2026-02-20", quality=4)),
            exercise=(exercise("2026-02-19"), exercise("2026-02-20")),
        )
    )

    assert "Recent Exercise Types: Running" in prompt
    assert "Average Sleep Quality: 3.5" in prompt
    assert "No habits yet" in prompt
    assert "Recent Journal Moods: Not tracked" in prompt
