"""Defaults for image understanding calls."""

from __future__ import annotations

from core.utils.env import get_env, get_env_float

VISION_MODEL = get_env("VISION_MODEL", "claude-sonnet-4-20250514") or "claude-sonnet-4-20250514"

# Hard ceiling for food photo analysis (seconds)
FOOD_ANALYSIS_TIMEOUT = get_env_float("VISION_FOOD_TIMEOUT", 30.0)
FOOD_ANALYSIS_TIMEOUT_MESSAGE = "Food analysis timed out. Please try again."

FOOD_ANALYSIS_MAX_TOKENS = 1024
OCR_MAX_TOKENS = 4096

# Numeric scale for the transcription confidence marker
OCR_CONFIDENCE_HIGH = 0.95
OCR_CONFIDENCE_MEDIUM = 0.75
OCR_CONFIDENCE_LOW = 0.5

__all__ = [
    "VISION_MODEL",
    "FOOD_ANALYSIS_TIMEOUT",
    "FOOD_ANALYSIS_TIMEOUT_MESSAGE",
    "FOOD_ANALYSIS_MAX_TOKENS",
    "OCR_MAX_TOKENS",
    "OCR_CONFIDENCE_HIGH",
    "OCR_CONFIDENCE_MEDIUM",
    "OCR_CONFIDENCE_LOW",
]
