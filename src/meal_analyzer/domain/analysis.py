"""Models for meal image analysis results."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from meal_analyzer.domain.meals import DetectedFood, MealAssessment
from meal_analyzer.domain.nutrition import NutritionTotals


class FoodNutrition(BaseModel):
    """Nutrition estimate for one detected food."""

    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    fiber: float = Field(ge=0.0)
    sugar: float = Field(ge=0.0)
    sodium: float = Field(ge=0.0)


class VisionFood(BaseModel):
    """Single detected food item from vision."""

    name: str
    confidence: float = Field(ge=0.0, le=1.0)
    nutrition: FoodNutrition


class VisionMealExtract(BaseModel):
    """Structured output for meal image extraction."""

    meal_name: str | None = None
    foods: list[VisionFood]

    def detected_foods(self) -> list[DetectedFood]:
        return [
            DetectedFood(
                name=food.name,
                confidence=food.confidence,
                nutrition=NutritionTotals(**food.nutrition.model_dump()),
            )
            for food in self.foods
        ]


@dataclass(frozen=True)
class MealAnalysis:
    """Analyzer result consumed by meal logging."""

    name: str
    detected_foods: list[DetectedFood]
    total_nutrition: NutritionTotals
    confidence: float
    assessment: MealAssessment
