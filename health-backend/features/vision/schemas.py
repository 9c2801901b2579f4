"""Schemas for image understanding results."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class FoodEstimate(BaseModel):
    """One food item exactly as the model is asked to return it."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    portion: StrictStr
    calories: StrictFloat
    protein: Optional[StrictFloat] = None
    carbs: Optional[StrictFloat] = None
    fat: Optional[StrictFloat] = None
    confidence: StrictFloat = Field(ge=0, le=1)


class FoodAnalysisPayload(BaseModel):
    """Expected JSON body of a food photo analysis response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    foods: list[FoodEstimate]
    total_calories: StrictFloat = Field(alias="totalCalories")
    notes: Optional[StrictStr] = None


class MacroEstimates(BaseModel):
    protein: float
    carbs: float
    fat: float


class DetectedFood(BaseModel):
    """Domain representation of a recognised food item."""

    name: str
    portion_estimate: str
    calorie_estimate: float
    macro_estimates: Optional[MacroEstimates] = None
    confidence: float


class AIFoodAnalysis(BaseModel):
    """Result of analysing one food photo."""

    raw_response: str
    detected_foods: list[DetectedFood]
    processing_time_ms: int = Field(ge=0)
    model_used: str


class OCRConfidence(str, Enum):
    """Confidence marker the model appends to a transcription."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OCRResult(BaseModel):
    """Transcription of a handwritten journal page."""

    text: str
    confidence: float = Field(ge=0, le=1)
    processing_time_ms: int = Field(ge=0)
    raw_response: str


class ImageAnalysisRequest(BaseModel):
    """Request body pointing at a local image."""

    model_config = ConfigDict(extra="forbid")

    image_uri: str = Field(min_length=1, description="Local path or file:// URI of the image")


__all__ = [
    "AIFoodAnalysis",
    "DetectedFood",
    "FoodAnalysisPayload",
    "FoodEstimate",
    "ImageAnalysisRequest",
    "MacroEstimates",
    "OCRConfidence",
    "OCRResult",
]
