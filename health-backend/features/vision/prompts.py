"""Prompt text sent alongside images."""

FOOD_ANALYSIS_PROMPT = """Analyze this food image and provide nutritional estimates.

Return a JSON object with this exact structure:
{
  "foods": [
    {
      "name": "food item name",
      "portion": "estimated portion size (e.g., '1 cup', '6 oz', '1 medium')",
      "calories": estimated calories as number,
      "protein": grams of protein as number,
      "carbs": grams of carbs as number,
      "fat": grams of fat as number,
      "confidence": confidence score from 0 to 1
    }
  ],
  "totalCalories": sum of all calories,
  "notes": "any relevant notes about the meal"
}

Be conservative with portion estimates. If you cannot identify a food item clearly, still include it with a lower confidence score. Focus on accuracy over completeness.

Return ONLY the JSON object, no other text."""

HANDWRITING_OCR_PROMPT = """This is a photo of a handwritten journal entry. Please transcribe the handwritten text as accurately as possible.

Instructions:
1. Preserve paragraph breaks and formatting where visible
2. If any words are unclear, make your best interpretation
3. Maintain the original tone and style of the writing
4. Do not add any commentary or corrections
5. If the image contains drawings or non-text elements, briefly note them in [brackets]

Return ONLY the transcribed text, nothing else. At the end, on a new line, add:
---
Confidence: [high/medium/low]"""

__all__ = ["FOOD_ANALYSIS_PROMPT", "HANDWRITING_OCR_PROMPT"]
