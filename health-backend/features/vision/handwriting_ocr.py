"""Handwritten journal transcription."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from typing import Optional, Tuple

from config.vision import (
    OCR_CONFIDENCE_HIGH,
    OCR_CONFIDENCE_LOW,
    OCR_CONFIDENCE_MEDIUM,
    OCR_MAX_TOKENS,
    VISION_MODEL,
)
from core.exceptions import MalformedResponseError, ProviderTimeoutError
from core.providers.anthropic_messages import (
    PROVIDER_NAME,
    AnthropicMessagesProvider,
    build_image_block,
    build_user_message,
    find_text_block,
)

from .images import read_image_base64, resolve_media_type
from .prompts import HANDWRITING_OCR_PROMPT
from .schemas import OCRConfidence, OCRResult

logger = logging.getLogger(__name__)

OCR_TIMEOUT_MESSAGE = "Handwriting scan timed out. Please try again."

_CONFIDENCE_MARKER = re.compile(r"---\s*Confidence:\s*(high|medium|low)\s*\Z", re.IGNORECASE)

_CONFIDENCE_SCALE = {
    OCRConfidence.HIGH: OCR_CONFIDENCE_HIGH,
    OCRConfidence.MEDIUM: OCR_CONFIDENCE_MEDIUM,
    OCRConfidence.LOW: OCR_CONFIDENCE_LOW,
}


def parse_confidence(response_text: str) -> Tuple[str, float]:
    """Split the transcription from its trailing confidence marker.

    Without a marker the text is returned unmodified at medium confidence.
    """

    match = _CONFIDENCE_MARKER.search(response_text)
    if match is None:
        return response_text, OCR_CONFIDENCE_MEDIUM
    level = OCRConfidence(match.group(1).lower())
    return response_text[: match.start()].strip(), _CONFIDENCE_SCALE[level]


async def scan_handwritten_journal(
    image_uri: str,
    *,
    provider: Optional[AnthropicMessagesProvider] = None,
    timeout: Optional[float] = None,
) -> OCRResult:
    """Transcribe a photographed journal page.

    No ceiling is applied unless ``timeout`` is given; the transport's own
    timeout governs otherwise.
    """

    started = time.monotonic()
    provider = provider or AnthropicMessagesProvider()

    image_data = await read_image_base64(image_uri)
    message = build_user_message(
        build_image_block(image_data, resolve_media_type(image_uri)),
        HANDWRITING_OCR_PROMPT,
    )
    request = provider.generate(messages=[message], model=VISION_MODEL, max_tokens=OCR_MAX_TOKENS)

    if timeout is None:
        response = await request
    else:
        try:
            response = await asyncio.wait_for(request, timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("Handwriting scan exceeded %.1fs for %s", timeout, image_uri)
            raise ProviderTimeoutError(
                OCR_TIMEOUT_MESSAGE, timeout=timeout, provider=PROVIDER_NAME
            ) from exc

    response_text = find_text_block(response)
    if response_text is None:
        raise MalformedResponseError("No text response from Claude", provider=PROVIDER_NAME)

    text, confidence = parse_confidence(response_text)
    return OCRResult(
        text=text,
        confidence=confidence,
        processing_time_ms=int((time.monotonic() - started) * 1000),
        raw_response=response_text,
    )


__all__ = ["OCR_TIMEOUT_MESSAGE", "parse_confidence", "scan_handwritten_journal"]
