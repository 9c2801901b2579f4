"""Repository for meals."""

from __future__ import annotations

from typing import Any

from ..db_models import Meal
from ..schemas import MealRecord
from .base import DatedRepository


class NutritionRepository(DatedRepository[MealRecord]):
    """Read and log meals."""

    model = Meal
    record_type = MealRecord
    name = "meals"

    async def create(
        self,
        *,
        date: str,
        meal_type: str,
        total_calories: float,
        name: str | None = None,
        total_protein: float | None = None,
        total_carbs: float | None = None,
        total_fat: float | None = None,
        photo_uri: str | None = None,
        ai_analysis: dict[str, Any] | None = None,
    ) -> MealRecord:
        meal = Meal(
            date=date,
            meal_type=meal_type,
            name=name,
            total_calories=total_calories,
            total_protein=total_protein,
            total_carbs=total_carbs,
            total_fat=total_fat,
            photo_uri=photo_uri,
            ai_analysis=ai_analysis,
        )
        return await self._add(meal, operation="meals.create")


__all__ = ["NutritionRepository"]
