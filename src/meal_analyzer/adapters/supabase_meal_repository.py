"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_analyzer.domain.meals import (
    DetectedFood,
    MacroDistribution,
    Meal,
    MealAssessment,
    MealMetadataUpdate,
    NewMeal,
    NutritionalBalance,
)
from meal_analyzer.domain.nutrition import NutritionTotals
from meal_analyzer.services.aggregation import as_utc
from meal_analyzer.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, user_id, name, meal_type, logged_at, image_url, tags, notes, "
    "nutrition, detected_foods, assessment"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def find_meals_by_user_and_date_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[Meal]:
        """Return meals logged in the half-open range."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_meals(
        self, user_id: UUID, limit: int, offset: int, meal_type: str | None = None
    ) -> list[Meal]:
        """Return a page of meals, newest first."""
        query = (
            self.client.table("meals").select(_MEAL_COLUMNS).eq("user_id", str(user_id))
        )
        if meal_type:
            query = query.eq("meal_type", meal_type)
        response = (
            query.order("logged_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def count_meals(self, user_id: UUID, meal_type: str | None = None) -> int:
        """Return the number of meals for a user."""
        query = (
            self.client.table("meals")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
        )
        if meal_type:
            query = query.eq("meal_type", meal_type)
        response = query.execute()
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, meal: NewMeal) -> Meal:
        """Insert a meal row and return the stored meal."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(meal.user_id),
                    "name": meal.name,
                    "meal_type": meal.meal_type,
                    "logged_at": meal.logged_at.isoformat(),
                    "image_url": meal.image_url,
                    "tags": meal.tags,
                    "notes": meal.notes,
                    "nutrition": _nutrition_payload(meal.nutrition),
                    "detected_foods": [
                        {
                            "name": food.name,
                            "confidence": food.confidence,
                            "nutrition": _nutrition_payload(food.nutrition),
                        }
                        for food in meal.detected_foods
                    ],
                    "assessment": _assessment_payload(meal.assessment),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal in Supabase")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, update: MealMetadataUpdate) -> None:
        """Update the provided metadata fields."""
        payload: dict[str, object] = {}
        if update.name is not None:
            payload["name"] = update.name
        if update.meal_type is not None:
            payload["meal_type"] = update.meal_type
        if update.tags is not None:
            payload["tags"] = update.tags
        if update.notes is not None:
            payload["notes"] = update.notes
        if not payload:
            return
        self.client.table("meals").update(payload).eq("id", str(meal_id)).execute()

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _nutrition_payload(totals: NutritionTotals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
        "fiber": totals.fiber,
        "sugar": totals.sugar,
        "sodium": totals.sodium,
    }


def _assessment_payload(
    assessment: MealAssessment | None,
) -> dict[str, object] | None:
    if assessment is None:
        return None
    return {
        "nutritional_balance": assessment.nutritional_balance.value,
        "macro_distribution": {
            "protein": assessment.macro_distribution.protein,
            "carbs": assessment.macro_distribution.carbs,
            "fat": assessment.macro_distribution.fat,
        },
        "overall_assessment": assessment.overall_assessment,
        "recommendations": assessment.recommendations,
        "health_score": assessment.health_score,
    }


def _parse_assessment(raw: object) -> MealAssessment | None:
    if not isinstance(raw, dict):
        return None
    distribution = raw.get("macro_distribution") or {}
    return MealAssessment(
        nutritional_balance=NutritionalBalance(
            raw.get("nutritional_balance") or NutritionalBalance.POOR
        ),
        macro_distribution=MacroDistribution(
            protein=float(distribution.get("protein") or 0.0),
            carbs=float(distribution.get("carbs") or 0.0),
            fat=float(distribution.get("fat") or 0.0),
        ),
        overall_assessment=str(raw.get("overall_assessment") or ""),
        recommendations=[str(item) for item in raw.get("recommendations") or []],
        health_score=int(raw.get("health_score") or 0),
    )


def _parse_meal(row: dict[str, object]) -> Meal:
    nutrition_raw = row.get("nutrition")
    foods_raw = row.get("detected_foods") or []
    tags_raw = row.get("tags") or []
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        meal_type=str(row.get("meal_type") or ""),
        logged_at=as_utc(datetime.fromisoformat(str(row["logged_at"]))),
        nutrition=(
            NutritionTotals.from_mapping(nutrition_raw)
            if isinstance(nutrition_raw, dict)
            else None
        ),
        detected_foods=[
            DetectedFood(
                name=str(food.get("name", "")),
                confidence=float(food.get("confidence") or 0.0),
                nutrition=NutritionTotals.from_mapping(food.get("nutrition")),
            )
            for food in foods_raw
            if isinstance(food, dict)
        ],
        image_url=row.get("image_url"),
        tags=[str(tag) for tag in tags_raw] if isinstance(tags_raw, list) else [],
        notes=str(row.get("notes") or ""),
        assessment=_parse_assessment(row.get("assessment")),
    )
