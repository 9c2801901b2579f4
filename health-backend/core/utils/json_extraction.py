"""Locate JSON objects embedded in free-form model output."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from core.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

# Greedy: first "{" through the last "}", nested objects included.
_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
_JSON_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


def extract_json_object(text: str, *, provider: str | None = None) -> dict[str, Any]:
    """Return the JSON object wrapped in ``text``.

    Models tend to surround the payload with prose or markdown fences, so the
    span from the first ``{`` to the last ``}`` is decoded. Both a missing span
    and an undecodable one raise :class:`MalformedResponseError`; schema checks
    are left to the caller.
    """

    match = _JSON_OBJECT_PATTERN.search(text or "")
    if match is None:
        raise MalformedResponseError("Could not find JSON in response", provider=provider)

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.debug("Embedded JSON failed to decode: %s", exc)
        raise MalformedResponseError(
            "Could not find JSON in response", provider=provider, original_error=exc
        ) from exc

    if not isinstance(payload, dict):  # pragma: no cover - regex guarantees an object
        raise MalformedResponseError("Could not find JSON in response", provider=provider)
    return payload


def extract_json_value(text: str, *, provider: str | None = None) -> Any:
    """Like :func:`extract_json_object` but also accepts an embedded array.

    Whichever bracket opens first decides between array and object.
    """

    text = text or ""
    array_start = text.find("[")
    object_start = text.find("{")
    if array_start == -1 or (object_start != -1 and object_start < array_start):
        return extract_json_object(text, provider=provider)

    match = _JSON_ARRAY_PATTERN.search(text)
    if match is None:
        raise MalformedResponseError("Could not find JSON in response", provider=provider)
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            "Could not find JSON in response", provider=provider, original_error=exc
        ) from exc


__all__ = ["extract_json_object", "extract_json_value"]
