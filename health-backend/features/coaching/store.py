"""In-memory store for AI coaching artifacts.

Daily coaching is served from memory for ``COACHING_CACHE_TTL_MS``; the other
five artifacts are regenerated on every fetch. Each artifact has its own
loading flag and all of them share one ``error`` slot. Fetch actions never
raise: failures end up as the ``error`` message and prior data stays put.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from config.insights import COACHING_CACHE_TTL_MS

from .generator import HealthInsightsGenerator
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

Listener = Callable[["AIInsightsState"], Any]


class AIInsightsState(BaseModel):
    """Immutable snapshot of the store. Transitions replace it whole."""

    model_config = ConfigDict(frozen=True)

    daily_coaching: Optional[DailyCoaching] = None
    habit_suggestions: tuple[HabitSuggestion, ...] = ()
    sleep_analysis: Optional[SleepAnalysis] = None
    exercise_recommendation: Optional[ExerciseRecommendation] = None
    mood_analysis: Optional[MoodAnalysis] = None
    nutrition_advice: Optional[NutritionAdvice] = None

    is_loading_coaching: bool = False
    is_loading_habits: bool = False
    is_loading_sleep: bool = False
    is_loading_exercise: bool = False
    is_loading_mood: bool = False
    is_loading_nutrition: bool = False

    error: Optional[str] = None
    last_coaching_fetch: Optional[int] = None


class _Slot(NamedTuple):
    operation: str
    data_field: str
    loading_field: str
    failure_message: str


_SLOTS = {
    ArtifactKind.COACHING: _Slot(
        "generate_daily_coaching", "daily_coaching", "is_loading_coaching", "Failed to load AI coaching"
    ),
    ArtifactKind.HABITS: _Slot(
        "generate_habit_suggestions",
        "habit_suggestions",
        "is_loading_habits",
        "Failed to load habit suggestions",
    ),
    ArtifactKind.SLEEP: _Slot(
        "analyze_sleep_patterns", "sleep_analysis", "is_loading_sleep", "Failed to analyze sleep"
    ),
    ArtifactKind.EXERCISE: _Slot(
        "get_exercise_recommendation",
        "exercise_recommendation",
        "is_loading_exercise",
        "Failed to get exercise recommendation",
    ),
    ArtifactKind.MOOD: _Slot(
        "analyze_journal_mood", "mood_analysis", "is_loading_mood", "Failed to analyze mood"
    ),
    ArtifactKind.NUTRITION: _Slot(
        "get_nutrition_advice",
        "nutrition_advice",
        "is_loading_nutrition",
        "Failed to get nutrition advice",
    ),
}


def _now_ms() -> int:
    return int(time.time() * 1000)


class AIInsightsStore:
    """Fetch orchestration and caching for coaching artifacts."""

    def __init__(
        self,
        generator: HealthInsightsGenerator,
        *,
        clock: Optional[Callable[[], int]] = None,
        coaching_ttl_ms: int = COACHING_CACHE_TTL_MS,
    ) -> None:
        self._generator = generator
        self._clock = clock or _now_ms
        self._coaching_ttl_ms = coaching_ttl_ms
        self._state = AIInsightsState()
        self._listeners: list[Listener] = []
        self._pending: dict[ArtifactKind, asyncio.Task] = {}
        # Bumped by clear_all so fetches started earlier cannot land afterwards
        self._generation = 0

    @property
    def state(self) -> AIInsightsState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for every new snapshot; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Insights store listener failed")

    def coaching_is_fresh(self) -> bool:
        state = self._state
        if state.daily_coaching is None or state.last_coaching_fetch is None:
            return False
        return self._clock() - state.last_coaching_fetch < self._coaching_ttl_ms

    async def fetch(self, kind: ArtifactKind) -> None:
        """Fetch one artifact. Concurrent calls for the same kind share one request."""

        if kind is ArtifactKind.COACHING and self.coaching_is_fresh():
            logger.debug("Daily coaching served from cache")
            return

        task = self._pending.get(kind)
        if task is None:
            task = asyncio.ensure_future(self._run(kind))
            self._pending[kind] = task
            task.add_done_callback(lambda done, kind=kind: self._forget(kind, done))
        else:
            logger.debug("Joining in-flight %s fetch", kind.value)
        await asyncio.shield(task)

    def _forget(self, kind: ArtifactKind, task: asyncio.Task) -> None:
        if self._pending.get(kind) is task:
            del self._pending[kind]

    async def _run(self, kind: ArtifactKind) -> None:
        slot = _SLOTS[kind]
        generation = self._generation
        self._set(**{slot.loading_field: True, "error": None})

        try:
            result = await getattr(self._generator, slot.operation)()
        except Exception as exc:
            logger.warning("%s fetch failed: %s", kind.value, exc, exc_info=True)
            if generation != self._generation:
                self._release_stale(kind)
                return
            self._set(**{slot.loading_field: False, "error": str(exc) or slot.failure_message})
            return

        if generation != self._generation:
            logger.info("Discarding %s result that resolved after clear_all", kind.value)
            self._release_stale(kind)
            return

        if kind is ArtifactKind.HABITS:
            result = tuple(result)
        changes: dict[str, Any] = {slot.data_field: result, slot.loading_field: False}
        if kind is ArtifactKind.COACHING:
            changes["last_coaching_fetch"] = self._clock()
        self._set(**changes)
        logger.info("%s fetch completed", kind.value)

    def _release_stale(self, kind: ArtifactKind) -> None:
        # A newer fetch of the same kind owns the loading flag now.
        if kind in self._pending:
            return
        self._set(**{_SLOTS[kind].loading_field: False})

    async def fetch_daily_coaching(self) -> None:
        await self.fetch(ArtifactKind.COACHING)

    async def fetch_habit_suggestions(self) -> None:
        await self.fetch(ArtifactKind.HABITS)

    async def fetch_sleep_analysis(self) -> None:
        await self.fetch(ArtifactKind.SLEEP)

    async def fetch_exercise_recommendation(self) -> None:
        await self.fetch(ArtifactKind.EXERCISE)

    async def fetch_mood_analysis(self) -> None:
        await self.fetch(ArtifactKind.MOOD)

    async def fetch_nutrition_advice(self) -> None:
        await self.fetch(ArtifactKind.NUTRITION)

    def clear_all(self) -> None:
        """Reset every artifact, the coaching timestamp and the error.

        In-flight fetches keep running; their results are discarded.
        """

        self._generation += 1
        self._pending.clear()
        self._set(
            daily_coaching=None,
            habit_suggestions=(),
            sleep_analysis=None,
            exercise_recommendation=None,
            mood_analysis=None,
            nutrition_advice=None,
            last_coaching_fetch=None,
            error=None,
        )

    def clear_error(self) -> None:
        self._set(error=None)


__all__ = ["AIInsightsState", "AIInsightsStore"]
