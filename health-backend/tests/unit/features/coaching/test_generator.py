from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from datetime import date
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from core.exceptions import MalformedResponseError, ProviderTimeoutError
from features.coaching import fallbacks
from features.coaching.generator import HealthInsightsGenerator
from features.tracking.repositories import TrackingRepositories


pytestmark = pytest.mark.anyio

TODAY = date(2026, 2, 20)


def _text_response(text: str):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


async def _seed(repositories: TrackingRepositories, *, sleep: int = 0, journal: int = 0, meals: int = 0) -> None:
    for offset in range(sleep):
        await repositories.sleep.create(
            date=f"2026-02-{20 - offset:02d}", bedtime="23:00", wake_time="07:00",
            duration_minutes=480, quality=4,
        )
    for offset in range(journal):
        await repositories.journal.create(date=f"2026-02-{20 - offset:02d}", content="ok", mood=3)
    for offset in range(meals):
        await repositories.nutrition.create(
            date=f"2026-02-{20 - offset:02d}", meal_type="dinner", total_calories=600
        )


@pytest.fixture
def provider() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def make_generator(repositories: TrackingRepositories, provider: AsyncMock):
    @asynccontextmanager
    async def factory():
        yield repositories

    def _make(**kwargs) -> HealthInsightsGenerator:
        return HealthInsightsGenerator(
            provider=provider,
            repositories_factory=factory,
            today_provider=lambda: TODAY,
            **kwargs,
        )

    return _make


async def test_daily_coaching_parses_camel_case(make_generator, provider) -> None:
    payload = {
        "greeting": "Morning!",
        "insights": [
            {
                "category": "sleep",
                "title": "Solid rest",
                "insight": "You slept 8h on average.",
                "suggestion": "Keep the routine.",
                "priority": "low",
            }
        ],
        "dailyTip": "Drink water.",
        "motivationalMessage": "Nice work!",
    }
    provider.generate.return_value = _text_response(json.dumps(payload))

    coaching = await make_generator().generate_daily_coaching()

    assert coaching.daily_tip == "Drink water."
    assert coaching.insights[0].category == "sleep"
    kwargs = provider.generate.await_args.kwargs
    assert kwargs["max_tokens"] == 1024
    assert "HABITS (0 habits)" in kwargs["messages"][0]["content"]


async def test_unparseable_coaching_falls_back(make_generator, provider) -> None:
    provider.generate.return_value = _text_response("I'm not able to answer in JSON today.")

    assert await make_generator().generate_daily_coaching() == fallbacks.DEFAULT_COACHING


async def test_invalid_schema_falls_back(make_generator, provider, repositories) -> None:
    await _seed(repositories, meals=3)
    provider.generate.return_value = _text_response('{"advice": 42}')

    assert await make_generator().get_nutrition_advice() == fallbacks.DEFAULT_NUTRITION_ADVICE


async def test_habit_suggestions_accept_array(make_generator, provider) -> None:
    provider.generate.return_value = _text_response(
        '[{"name": "Walk", "description": "10 min walk", "frequency": "daily", "reason": "Movement"}]'
    )

    suggestions = await make_generator().generate_habit_suggestions()

    assert [s.name for s in suggestions] == ["Walk"]


async def test_non_text_first_block_raises(make_generator, provider) -> None:
    provider.generate.return_value = SimpleNamespace(content=[SimpleNamespace(type="tool_use")])

    with pytest.raises(MalformedResponseError, match="Unexpected response type"):
        await make_generator().get_exercise_recommendation()


async def test_timeout_raises_artifact_message(make_generator, provider) -> None:
    async def never_returns(**_kwargs):
        await asyncio.Event().wait()

    provider.generate.side_effect = never_returns

    with pytest.raises(ProviderTimeoutError, match="Habit suggestions request timed out. Please try again."):
        await make_generator(timeout=0.05).generate_habit_suggestions()


async def test_sleep_analysis_needs_three_nights(make_generator, provider, repositories) -> None:
    await _seed(repositories, sleep=2)

    result = await make_generator().analyze_sleep_patterns()

    assert result == fallbacks.INSUFFICIENT_SLEEP_ANALYSIS
    provider.generate.assert_not_awaited()


async def test_sleep_analysis_with_enough_data_calls_provider(make_generator, provider, repositories) -> None:
    await _seed(repositories, sleep=3)
    provider.generate.return_value = _text_response(
        json.dumps(
            {
                "pattern": "Consistent",
                "qualityTrend": "improving",
                "recommendations": ["Keep going"],
                "optimalBedtime": "10:45 PM",
            }
        )
    )

    result = await make_generator().analyze_sleep_patterns()

    assert result.quality_trend == "improving"
    assert "Bed 23:00, Wake 07:00" in provider.generate.await_args.kwargs["messages"][0]["content"]


async def test_mood_analysis_needs_two_entries(make_generator, provider, repositories) -> None:
    await _seed(repositories, journal=1)

    assert await make_generator().analyze_journal_mood() == fallbacks.INSUFFICIENT_MOOD_ANALYSIS
    provider.generate.assert_not_awaited()


async def test_nutrition_advice_needs_three_meals(make_generator, provider, repositories) -> None:
    await _seed(repositories, meals=2)

    assert await make_generator().get_nutrition_advice() == fallbacks.INSUFFICIENT_NUTRITION_ADVICE
    provider.generate.assert_not_awaited()


async def test_gather_health_data_groups_completions(make_generator, repositories) -> None:
    read = await repositories.habits.create(name="Read")
    await repositories.habits.set_completion(read.id, "2026-02-19", True)
    await repositories.habits.set_completion(read.id, "2026-02-18", False)
    await repositories.habits.set_completion(read.id, "2026-02-01", True)
    await _seed(repositories, sleep=1)

    data = await make_generator().gather_health_data()

    assert len(data.habits) == 1
    assert data.habits[0].completed_count == 1
    assert len(data.habits[0].completions) == 2
    assert len(data.sleep) == 1
