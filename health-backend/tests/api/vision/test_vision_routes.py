from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from core.exceptions import ConfigurationError, ProviderTimeoutError
from features.vision.dependencies import get_vision_provider
from main import app


pytestmark = pytest.mark.anyio


def _text_response(text: str):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


@pytest.fixture
def provider() -> AsyncMock:
    provider = AsyncMock()
    app.dependency_overrides[get_vision_provider] = lambda: provider
    return provider


@pytest.fixture
def image_uri(tmp_path) -> str:
    path = tmp_path / "lunch.jpg"
    path.write_bytes(b"jpeg-bytes")
    return f"file://{path}"


async def test_food_analysis_envelope(client, provider, image_uri) -> None:
    payload = {
        "foods": [{"name": "Rice", "portion": "1 cup", "calories": 200, "confidence": 0.8}],
        "totalCalories": 200,
    }
    provider.generate.return_value = _text_response(json.dumps(payload))

    response = await client.post("/api/v1/vision/food", json={"image_uri": image_uri})

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["detected_foods"][0]["portion_estimate"] == "1 cup"
    assert body["meta"]["model"] == "claude-sonnet-4-20250514"


async def test_malformed_response_maps_to_502(client, provider, image_uri) -> None:
    provider.generate.return_value = _text_response("no json here")

    response = await client.post("/api/v1/vision/food", json={"image_uri": image_uri})

    assert response.status_code == 502
    assert response.json()["message"] == "Could not find JSON in response"


async def test_schema_violation_maps_to_422(client, provider, image_uri) -> None:
    provider.generate.return_value = _text_response('{"invalid": "schema"}')

    response = await client.post("/api/v1/vision/food", json={"image_uri": image_uri})

    assert response.status_code == 422
    assert response.json()["data"]["field"] == "foods"


async def test_timeout_maps_to_504(client, provider, image_uri) -> None:
    provider.generate.side_effect = ProviderTimeoutError(
        "Food analysis timed out. Please try again.", timeout=30.0, provider="anthropic"
    )

    response = await client.post("/api/v1/vision/food", json={"image_uri": image_uri})

    assert response.status_code == 504
    assert response.json()["message"] == "Food analysis timed out. Please try again."


async def test_missing_file_maps_to_422(client, provider, tmp_path) -> None:
    response = await client.post(
        "/api/v1/vision/journal-scan", json={"image_uri": str(tmp_path / "nope.png")}
    )

    assert response.status_code == 422
    assert response.json()["data"]["field"] == "image_uri"


async def test_missing_api_key_maps_to_500(client, provider, image_uri) -> None:
    provider.generate.side_effect = ConfigurationError(
        "Claude API key not configured. Please add your API key in settings.", key="CLAUDE_KEY"
    )

    response = await client.post("/api/v1/vision/journal-scan", json={"image_uri": image_uri})

    assert response.status_code == 500
    assert response.json()["data"] == {"key": "CLAUDE_KEY"}


async def test_journal_scan_envelope(client, provider, image_uri) -> None:
    provider.generate.return_value = _text_response("Went hiking.\n---\nConfidence: low")

    response = await client.post("/api/v1/vision/journal-scan", json={"image_uri": image_uri})

    assert response.status_code == 200
    assert response.json()["data"]["text"] == "Went hiking."
    assert response.json()["data"]["confidence"] == 0.5
