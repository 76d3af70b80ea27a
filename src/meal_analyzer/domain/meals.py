"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from meal_analyzer.domain.nutrition import NutritionTotals


class MealType(StrEnum):
    """Meal slot chosen at upload time."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class DetectedFood:
    """Food line item detected in a meal photo."""

    name: str
    confidence: float
    nutrition: NutritionTotals


class NutritionalBalance(StrEnum):
    """Macro balance band of a single meal."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class MacroDistribution:
    """Share of calories from protein, carbs and fat, in percent."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MealAssessment:
    """Deterministic quality assessment of one meal's nutrition."""

    nutritional_balance: NutritionalBalance
    macro_distribution: MacroDistribution
    overall_assessment: str
    recommendations: list[str]
    health_score: int


@dataclass(frozen=True)
class Meal:
    """A logged meal with its analyzed nutrition."""

    id: UUID
    user_id: UUID
    name: str
    meal_type: str
    logged_at: datetime
    nutrition: NutritionTotals | None = None
    detected_foods: list[DetectedFood] = field(default_factory=list)
    image_url: str | None = None
    tags: list[str] = field(default_factory=list)
    notes: str = ""
    assessment: MealAssessment | None = None


@dataclass(frozen=True)
class NewMeal:
    """Meal data to persist after analysis."""

    user_id: UUID
    name: str
    meal_type: str
    logged_at: datetime
    nutrition: NutritionTotals
    detected_foods: list[DetectedFood]
    image_url: str | None = None
    tags: list[str] = field(default_factory=list)
    notes: str = ""
    assessment: MealAssessment | None = None


@dataclass(frozen=True)
class MealMetadataUpdate:
    """Editable meal fields; None leaves a field unchanged."""

    name: str | None = None
    meal_type: str | None = None
    tags: list[str] | None = None
    notes: str | None = None


@dataclass(frozen=True)
class MealPage:
    """A page of meal history."""

    meals: list[Meal]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return -(-self.total // self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


@dataclass(frozen=True)
class MealInsights:
    """Comparison of one meal against the user's history."""

    meal: Meal
    current: NutritionTotals
    average: NutritionTotals | None
    meal_pattern: dict[str, int]
    suggestions: list[str]
