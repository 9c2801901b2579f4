"""Remote generation calls behind each coaching artifact.

Every operation gathers the recent history, builds a prompt and issues one
bounded Messages API request. Transport failures, timeouts and a non-text
reply raise; an unusable answer degrades to the matching fallback artifact.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, AsyncContextManager, Callable, Optional, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from config.insights import (
    HISTORY_DAYS,
    MAX_TOKENS,
    MIN_JOURNAL_ENTRIES,
    MIN_MEALS,
    MIN_SLEEP_ENTRIES,
    REQUEST_TIMEOUT,
    TEXT_MODEL,
)
from core.exceptions import MalformedResponseError, ProviderTimeoutError
from core.providers.anthropic_messages import (
    PROVIDER_NAME,
    AnthropicMessagesProvider,
    build_user_message,
    first_block_text,
)
from core.utils import extract_json_value
from features.tracking.dependencies import open_repositories
from features.tracking.repositories import TrackingRepositories

from . import fallbacks, prompts
from .health_data import HealthData, gather_health_data
from .schemas import (
    ArtifactKind,
    DailyCoaching,
    ExerciseRecommendation,
    HabitSuggestion,
    MoodAnalysis,
    NutritionAdvice,
    SleepAnalysis,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RepositoriesFactory = Callable[[], AsyncContextManager[TrackingRepositories]]

TIMEOUT_MESSAGES = {
    ArtifactKind.COACHING: "Daily coaching request timed out. Please try again.",
    ArtifactKind.HABITS: "Habit suggestions request timed out. Please try again.",
    ArtifactKind.SLEEP: "Sleep analysis request timed out. Please try again.",
    ArtifactKind.EXERCISE: "Exercise recommendation request timed out. Please try again.",
    ArtifactKind.MOOD: "Mood analysis request timed out. Please try again.",
    ArtifactKind.NUTRITION: "Nutrition advice request timed out. Please try again.",
}

_DAILY_COACHING = TypeAdapter(DailyCoaching)
_HABIT_SUGGESTIONS = TypeAdapter(list[HabitSuggestion])
_SLEEP_ANALYSIS = TypeAdapter(SleepAnalysis)
_EXERCISE_RECOMMENDATION = TypeAdapter(ExerciseRecommendation)
_MOOD_ANALYSIS = TypeAdapter(MoodAnalysis)
_NUTRITION_ADVICE = TypeAdapter(NutritionAdvice)


class HealthInsightsGenerator:
    """Produce coaching artifacts from the user's recent history."""

    def __init__(
        self,
        *,
        provider: Optional[AnthropicMessagesProvider] = None,
        repositories_factory: RepositoriesFactory = open_repositories,
        today_provider: Callable[[], date] = date.today,
        timeout: float = REQUEST_TIMEOUT,
        model: str = TEXT_MODEL,
        history_days: int = HISTORY_DAYS,
    ) -> None:
        self._provider = provider or AnthropicMessagesProvider()
        self._repositories_factory = repositories_factory
        self._today = today_provider
        self._timeout = timeout
        self._model = model
        self._history_days = history_days

    async def gather_health_data(self) -> HealthData:
        async with self._repositories_factory() as repositories:
            return await gather_health_data(
                repositories, self._today(), history_days=self._history_days
            )

    async def generate_daily_coaching(self) -> DailyCoaching:
        data = await self.gather_health_data()
        text = await self._request(ArtifactKind.COACHING, prompts.build_daily_coaching_prompt(data))
        return self._parse(text, _DAILY_COACHING, fallbacks.DEFAULT_COACHING, ArtifactKind.COACHING)

    async def generate_habit_suggestions(self) -> list[HabitSuggestion]:
        data = await self.gather_health_data()
        text = await self._request(ArtifactKind.HABITS, prompts.build_habit_suggestions_prompt(data))
        return self._parse(
            text, _HABIT_SUGGESTIONS, list(fallbacks.DEFAULT_HABIT_SUGGESTIONS), ArtifactKind.HABITS
        )

    async def analyze_sleep_patterns(self) -> SleepAnalysis:
        data = await self.gather_health_data()
        if len(data.sleep) < MIN_SLEEP_ENTRIES:
            logger.debug("Skipping sleep analysis: %d entries", len(data.sleep))
            return fallbacks.INSUFFICIENT_SLEEP_ANALYSIS
        text = await self._request(ArtifactKind.SLEEP, prompts.build_sleep_analysis_prompt(data))
        return self._parse(text, _SLEEP_ANALYSIS, fallbacks.DEFAULT_SLEEP_ANALYSIS, ArtifactKind.SLEEP)

    async def get_exercise_recommendation(self) -> ExerciseRecommendation:
        data = await self.gather_health_data()
        text = await self._request(
            ArtifactKind.EXERCISE, prompts.build_exercise_recommendation_prompt(data)
        )
        return self._parse(
            text,
            _EXERCISE_RECOMMENDATION,
            fallbacks.DEFAULT_EXERCISE_RECOMMENDATION,
            ArtifactKind.EXERCISE,
        )

    async def analyze_journal_mood(self) -> MoodAnalysis:
        data = await self.gather_health_data()
        if len(data.journal) < MIN_JOURNAL_ENTRIES:
            logger.debug("Skipping mood analysis: %d entries", len(data.journal))
            return fallbacks.INSUFFICIENT_MOOD_ANALYSIS
        text = await self._request(ArtifactKind.MOOD, prompts.build_mood_analysis_prompt(data))
        return self._parse(text, _MOOD_ANALYSIS, fallbacks.DEFAULT_MOOD_ANALYSIS, ArtifactKind.MOOD)

    async def get_nutrition_advice(self) -> NutritionAdvice:
        data = await self.gather_health_data()
        if len(data.meals) < MIN_MEALS:
            logger.debug("Skipping nutrition advice: %d meals", len(data.meals))
            return fallbacks.INSUFFICIENT_NUTRITION_ADVICE
        text = await self._request(ArtifactKind.NUTRITION, prompts.build_nutrition_advice_prompt(data))
        return self._parse(
            text, _NUTRITION_ADVICE, fallbacks.DEFAULT_NUTRITION_ADVICE, ArtifactKind.NUTRITION
        )

    async def _request(self, kind: ArtifactKind, prompt: str) -> str:
        """Issue one bounded request and return the first block's text."""

        try:
            response = await asyncio.wait_for(
                self._provider.generate(
                    messages=[build_user_message(prompt)],
                    model=self._model,
                    max_tokens=MAX_TOKENS[kind.value],
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("%s generation exceeded %.1fs", kind.value, self._timeout)
            raise ProviderTimeoutError(
                TIMEOUT_MESSAGES[kind], timeout=self._timeout, provider=PROVIDER_NAME
            ) from exc

        text = first_block_text(response)
        if text is None:
            raise MalformedResponseError("Unexpected response type", provider=PROVIDER_NAME)
        return text

    @staticmethod
    def _parse(text: str, adapter: TypeAdapter[T], fallback: T, kind: ArtifactKind) -> T:
        try:
            payload: Any = extract_json_value(text, provider=PROVIDER_NAME)
            return adapter.validate_python(payload)
        except (MalformedResponseError, PydanticValidationError) as exc:
            logger.warning("Using fallback %s artifact: %s", kind.value, exc)
            return fallback


__all__ = ["HealthInsightsGenerator", "RepositoriesFactory", "TIMEOUT_MESSAGES"]
