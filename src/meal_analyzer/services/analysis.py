"""Meal image analysis using vision models."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from meal_analyzer.domain.analysis import MealAnalysis, VisionMealExtract
from meal_analyzer.services.aggregation import sum_totals
from meal_analyzer.services.meal_assessment import assess_meal

_logger = logging.getLogger(__name__)

_NUTRIENT_NAMES = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")

MEAL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "meal_name": {"anyOf": [{"type": "string"}, {"type": "null"}]},
        "foods": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "confidence": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                    "nutrition": {
                        "type": "object",
                        "properties": {
                            name: {"type": "number", "minimum": 0.0}
                            for name in _NUTRIENT_NAMES
                        },
                        "required": list(_NUTRIENT_NAMES),
                        "additionalProperties": False,
                    },
                },
                "required": ["name", "confidence", "nutrition"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["meal_name", "foods"],
    "additionalProperties": False,
}

MEAL_PROMPT = (
    "Identify the foods on the plate. "
    "For each food return a short name, a confidence (0-1), and the estimated "
    "nutrition of the visible portion: calories (kcal), protein, carbs, fat, "
    "fiber and sugar in grams, sodium in milligrams. "
    "Also suggest a short name for the whole meal."
)


class ImageAnalyzer(Protocol):
    """Interface for turning a meal photo into a nutrition breakdown."""

    async def analyze(self, image_bytes: bytes) -> MealAnalysis:
        """Return detected foods and total nutrition for an image."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured vision extraction data."""


@dataclass
class VisionImageAnalyzer(ImageAnalyzer):
    """Image analyzer backed by a structured-output vision model."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes) -> MealAnalysis:
        """Extract foods from an image and total their nutrition."""
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=_to_data_url(image_bytes),
            schema=MEAL_SCHEMA,
            prompt=MEAL_PROMPT,
        )
        extract = VisionMealExtract.model_validate(raw)
        foods = extract.detected_foods()
        _logger.info("Meal analysis detected %s foods", len(foods))
        totals = sum_totals(food.nutrition for food in foods)
        return MealAnalysis(
            name=extract.meal_name or _fallback_name(foods),
            detected_foods=foods,
            total_nutrition=totals,
            confidence=_mean_confidence(foods),
            assessment=assess_meal(totals),
        )


def _fallback_name(foods: list) -> str:
    if not foods:
        return "Unknown Meal"
    return ", ".join(food.name for food in foods[:3])


def _mean_confidence(foods: list) -> float:
    if not foods:
        return 0.0
    return sum(food.confidence for food in foods) / len(foods)


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
