"""HTTP routing for image understanding."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from core.providers.anthropic_messages import AnthropicMessagesProvider
from core.pydantic_schemas import ok as api_ok

from .dependencies import get_vision_provider
from .food_recognition import analyze_food_image
from .handwriting_ocr import scan_handwritten_journal
from .schemas import ImageAnalysisRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/vision", tags=["Vision"])


@router.post(
    "/food",
    summary="Estimate nutrition from a food photo",
)
async def analyze_food_endpoint(
    request: ImageAnalysisRequest,
    provider: AnthropicMessagesProvider = Depends(get_vision_provider),
):
    analysis = await analyze_food_image(request.image_uri, provider=provider)
    return api_ok(
        message="Analyzed food image",
        data=analysis.model_dump(mode="json"),
        meta={"model": analysis.model_used, "processing_time_ms": analysis.processing_time_ms},
    )


@router.post(
    "/journal-scan",
    summary="Transcribe a handwritten journal page",
)
async def scan_journal_endpoint(
    request: ImageAnalysisRequest,
    provider: AnthropicMessagesProvider = Depends(get_vision_provider),
):
    result = await scan_handwritten_journal(request.image_uri, provider=provider)
    return api_ok(
        message="Transcribed journal page",
        data=result.model_dump(mode="json"),
        meta={"processing_time_ms": result.processing_time_ms},
    )


__all__ = ["router"]
