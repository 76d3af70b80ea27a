"""Nutrition domain models."""

from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round a value with halves going away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class NutritionTotals:
    """Additive nutrition vector for a food, meal, day or period."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    @classmethod
    def zero(cls) -> "NutritionTotals":
        """Return the additive identity."""
        return cls()

    @classmethod
    def from_mapping(cls, raw: dict[str, object] | None) -> "NutritionTotals":
        """Build totals from a loose mapping, treating missing values as zero."""
        if not raw:
            return cls.zero()
        values: dict[str, float] = {}
        for field in fields(cls):
            value = raw.get(field.name)
            values[field.name] = float(value) if value is not None else 0.0
        return cls(**values)

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
            sugar=self.sugar + other.sugar,
            sodium=self.sodium + other.sodium,
        )

    def divide(self, divisor: float) -> "NutritionTotals":
        """Divide every field; a non-positive divisor yields zeros."""
        if divisor <= 0:
            return NutritionTotals.zero()
        return NutritionTotals(
            calories=self.calories / divisor,
            protein=self.protein / divisor,
            carbs=self.carbs / divisor,
            fat=self.fat / divisor,
            fiber=self.fiber / divisor,
            sugar=self.sugar / divisor,
            sodium=self.sodium / divisor,
        )

    def rounded(self, digits: int = 0) -> "NutritionTotals":
        """Return totals rounded half-up; calories always to whole units."""
        return NutritionTotals(
            calories=round_half_up(self.calories),
            protein=round_half_up(self.protein, digits),
            carbs=round_half_up(self.carbs, digits),
            fat=round_half_up(self.fat, digits),
            fiber=round_half_up(self.fiber, digits),
            sugar=round_half_up(self.sugar, digits),
            sodium=round_half_up(self.sodium, digits),
        )

    def to_dict(self, digits: int = 1) -> dict[str, float | int]:
        """Serialize with integer calories and rounded nutrients."""
        rounded = self.rounded(digits)
        return {
            "calories": int(rounded.calories),
            "protein": rounded.protein,
            "carbs": rounded.carbs,
            "fat": rounded.fat,
            "fiber": rounded.fiber,
            "sugar": rounded.sugar,
            "sodium": rounded.sodium,
        }
