"""Food photo recognition and handwriting transcription."""

from .food_recognition import analyze_food_image
from .handwriting_ocr import scan_handwritten_journal
from .schemas import AIFoodAnalysis, DetectedFood, OCRResult

__all__ = [
    "AIFoodAnalysis",
    "DetectedFood",
    "OCRResult",
    "analyze_food_image",
    "scan_handwritten_journal",
]
