from __future__ import annotations

import asyncio
import base64
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from config.vision import FOOD_ANALYSIS_TIMEOUT
from core.exceptions import MalformedResponseError, ProviderTimeoutError, ValidationError
from features.vision.food_recognition import analyze_food_image


pytestmark = pytest.mark.anyio

VALID_PAYLOAD = {
    "foods": [
        {
            "name": "Apple",
            "portion": "1 medium",
            "calories": 95,
            "protein": 0.5,
            "carbs": 25,
            "fat": 0.3,
            "confidence": 0.9,
        }
    ],
    "totalCalories": 95,
    "notes": "Fresh fruit",
}


def _response(*blocks):
    return SimpleNamespace(content=list(blocks))


def _text(text: str):
    return SimpleNamespace(type="text", text=text)


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "meal.JPG"
    path.write_bytes(b"\xff\xd8fake-jpeg")
    return path


@pytest.fixture
def provider():
    return AsyncMock()


async def test_returns_detected_foods_with_macros(image_path, provider):
    provider.generate.return_value = _response(_text(json.dumps(VALID_PAYLOAD)))

    result = await analyze_food_image(str(image_path), provider=provider)

    assert result.model_used == "claude-sonnet-4-20250514"
    assert result.processing_time_ms >= 0
    food = result.detected_foods[0]
    assert food.name == "Apple"
    assert food.portion_estimate == "1 medium"
    assert food.calorie_estimate == 95
    assert food.macro_estimates.model_dump() == {"protein": 0.5, "carbs": 25, "fat": 0.3}
    assert result.raw_response == json.dumps(VALID_PAYLOAD)


async def test_request_carries_base64_image_and_media_type(image_path, provider):
    provider.generate.return_value = _response(_text(json.dumps(VALID_PAYLOAD)))

    await analyze_food_image(f"file://{image_path}", provider=provider)

    message = provider.generate.await_args.kwargs["messages"][0]
    image_block = message["content"][0]
    assert image_block["source"]["media_type"] == "image/jpeg"
    assert image_block["source"]["data"] == base64.b64encode(b"\xff\xd8fake-jpeg").decode()
    assert message["content"][1]["type"] == "text"


async def test_macros_omitted_unless_all_three_present(image_path, provider):
    payload = {
        "foods": [{"name": "Toast", "portion": "1 slice", "calories": 80, "protein": 3, "confidence": 0.7}],
        "totalCalories": 80,
    }
    provider.generate.return_value = _response(_text(f"Sure!\n```json\n{json.dumps(payload)}\n```"))

    result = await analyze_food_image(str(image_path), provider=provider)

    assert result.detected_foods[0].macro_estimates is None


async def test_text_block_is_found_after_other_blocks(image_path, provider):
    provider.generate.return_value = _response(
        SimpleNamespace(type="thinking", thinking="..."), _text(json.dumps(VALID_PAYLOAD))
    )

    result = await analyze_food_image(str(image_path), provider=provider)

    assert len(result.detected_foods) == 1


async def test_non_text_response_is_malformed(image_path, provider):
    provider.generate.return_value = _response(SimpleNamespace(type="image", source={}))

    with pytest.raises(MalformedResponseError, match="No text response from Claude"):
        await analyze_food_image(str(image_path), provider=provider)


async def test_missing_json_is_malformed(image_path, provider):
    provider.generate.return_value = _response(_text("not json at all"))

    with pytest.raises(MalformedResponseError, match="Could not find JSON in response"):
        await analyze_food_image(str(image_path), provider=provider)


async def test_schema_violation_raises_validation_error(image_path, provider):
    provider.generate.return_value = _response(_text(json.dumps({"invalid": "schema"})))

    with pytest.raises(ValidationError) as excinfo:
        await analyze_food_image(str(image_path), provider=provider)

    assert excinfo.value.errors


async def test_out_of_range_confidence_is_rejected(image_path, provider):
    payload = {**VALID_PAYLOAD, "foods": [{**VALID_PAYLOAD["foods"][0], "confidence": 1.5}]}
    provider.generate.return_value = _response(_text(json.dumps(payload)))

    with pytest.raises(ValidationError):
        await analyze_food_image(str(image_path), provider=provider)


@pytest.mark.parametrize(
    "food_override",
    [
        {"calories": "95"},
        {"confidence": True},
        {"protein": "0.5"},
        {"portion": 1},
    ],
)
async def test_loosely_typed_food_fields_are_rejected(image_path, provider, food_override):
    payload = {**VALID_PAYLOAD, "foods": [{**VALID_PAYLOAD["foods"][0], **food_override}]}
    provider.generate.return_value = _response(_text(json.dumps(payload)))

    with pytest.raises(ValidationError) as excinfo:
        await analyze_food_image(str(image_path), provider=provider)

    assert excinfo.value.field == "foods"


async def test_string_total_calories_is_rejected(image_path, provider):
    payload = {**VALID_PAYLOAD, "totalCalories": "95"}
    provider.generate.return_value = _response(_text(json.dumps(payload)))

    with pytest.raises(ValidationError):
        await analyze_food_image(str(image_path), provider=provider)


async def test_hung_call_times_out_with_fixed_message(image_path, provider):
    async def never_returns(**_kwargs):
        await asyncio.Event().wait()

    provider.generate.side_effect = never_returns

    with pytest.raises(ProviderTimeoutError, match="Food analysis timed out. Please try again.") as excinfo:
        await analyze_food_image(str(image_path), provider=provider, timeout=0.05)

    assert excinfo.value.timeout == 0.05


async def test_missing_image_is_a_validation_error(tmp_path, provider):
    with pytest.raises(ValidationError) as excinfo:
        await analyze_food_image(str(tmp_path / "missing.jpg"), provider=provider)

    assert excinfo.value.field == "image_uri"
    provider.generate.assert_not_awaited()


async def test_call_finishing_under_the_ceiling_succeeds(image_path, provider):
    async def slightly_slow(**_kwargs):
        await asyncio.sleep(0.02)
        return _response(_text(json.dumps(VALID_PAYLOAD)))

    provider.generate.side_effect = slightly_slow

    result = await analyze_food_image(str(image_path), provider=provider, timeout=0.2)

    assert [food.name for food in result.detected_foods] == ["Apple"]


async def test_default_ceiling_is_thirty_seconds():
    assert FOOD_ANALYSIS_TIMEOUT == 30.0
    assert analyze_food_image.__kwdefaults__["timeout"] == 30.0
