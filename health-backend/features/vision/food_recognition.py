"""Food photo nutrition estimation with a hard ceiling on wait time."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from config.vision import (
    FOOD_ANALYSIS_MAX_TOKENS,
    FOOD_ANALYSIS_TIMEOUT,
    FOOD_ANALYSIS_TIMEOUT_MESSAGE,
    VISION_MODEL,
)
from core.exceptions import MalformedResponseError, ProviderTimeoutError, ValidationError
from core.providers.anthropic_messages import (
    PROVIDER_NAME,
    AnthropicMessagesProvider,
    build_image_block,
    build_user_message,
    find_text_block,
)
from core.utils import extract_json_object

from .images import read_image_base64, resolve_media_type
from .prompts import FOOD_ANALYSIS_PROMPT
from .schemas import (
    AIFoodAnalysis,
    DetectedFood,
    FoodAnalysisPayload,
    FoodEstimate,
    MacroEstimates,
)

logger = logging.getLogger(__name__)


def to_detected_food(estimate: FoodEstimate) -> DetectedFood:
    """Rename provider fields; macros are nested only when all three are present."""

    macros: Optional[MacroEstimates] = None
    if estimate.protein is not None and estimate.carbs is not None and estimate.fat is not None:
        macros = MacroEstimates(protein=estimate.protein, carbs=estimate.carbs, fat=estimate.fat)
    return DetectedFood(
        name=estimate.name,
        portion_estimate=estimate.portion,
        calorie_estimate=estimate.calories,
        macro_estimates=macros,
        confidence=estimate.confidence,
    )


def parse_food_analysis(text: str) -> FoodAnalysisPayload:
    """Extract and validate the JSON payload from the model's text."""

    payload = extract_json_object(text, provider=PROVIDER_NAME)
    try:
        return FoodAnalysisPayload.model_validate(payload)
    except PydanticValidationError as exc:
        logger.warning("Food analysis payload failed validation: %s", exc)
        raise ValidationError(
            "Food analysis response did not match the expected schema",
            field="foods",
            errors=exc.errors(include_url=False),
        ) from exc


async def analyze_food_image(
    image_uri: str,
    *,
    provider: Optional[AnthropicMessagesProvider] = None,
    timeout: float = FOOD_ANALYSIS_TIMEOUT,
) -> AIFoodAnalysis:
    """Estimate the foods and calories visible in a photo.

    The remote call is raced against ``timeout`` seconds. When the timer wins the
    pending request is cancelled and :class:`ProviderTimeoutError` is raised, so a
    late answer can never surface.
    """

    started = time.monotonic()
    provider = provider or AnthropicMessagesProvider()

    image_data = await read_image_base64(image_uri)
    message = build_user_message(
        build_image_block(image_data, resolve_media_type(image_uri)),
        FOOD_ANALYSIS_PROMPT,
    )

    try:
        response = await asyncio.wait_for(
            provider.generate(
                messages=[message],
                model=VISION_MODEL,
                max_tokens=FOOD_ANALYSIS_MAX_TOKENS,
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        logger.warning("Food analysis exceeded %.1fs for %s", timeout, image_uri)
        raise ProviderTimeoutError(
            FOOD_ANALYSIS_TIMEOUT_MESSAGE, timeout=timeout, provider=PROVIDER_NAME
        ) from exc

    text = find_text_block(response)
    if text is None:
        raise MalformedResponseError("No text response from Claude", provider=PROVIDER_NAME)

    parsed = parse_food_analysis(text)
    detected = [to_detected_food(food) for food in parsed.foods]

    elapsed_ms = int((time.monotonic() - started) * 1000)
    logger.info(
        "Food analysis completed",
        extra={"foods": len(detected), "elapsed_ms": elapsed_ms},
    )
    return AIFoodAnalysis(
        raw_response=text,
        detected_foods=detected,
        processing_time_ms=elapsed_ms,
        model_used=VISION_MODEL,
    )


__all__ = ["analyze_food_image", "parse_food_analysis", "to_detected_food"]
