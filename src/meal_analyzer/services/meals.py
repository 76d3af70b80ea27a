"""Meal logging service."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from meal_analyzer.domain.analysis import MealAnalysis
from meal_analyzer.domain.meals import (
    Meal,
    MealInsights,
    MealMetadataUpdate,
    MealPage,
    NewMeal,
)
from meal_analyzer.domain.nutrition import NutritionTotals
from meal_analyzer.services.aggregation import sum_nutrition
from meal_analyzer.services.analysis import ImageAnalyzer

LOW_HEALTH_SCORE = 60
HIGH_CALORIE_MEAL = 800
LOW_PROTEIN_MEAL_G = 20

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def find_meals_by_user_and_date_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[Meal]:
        """Return meals logged in ``[start, end)``."""

    def list_meals(
        self, user_id: UUID, limit: int, offset: int, meal_type: str | None = None
    ) -> list[Meal]:
        """Return a user's meals, newest first."""

    def count_meals(self, user_id: UUID, meal_type: str | None = None) -> int:
        """Return the number of meals a user has logged."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""

    def create_meal(self, meal: NewMeal) -> Meal:
        """Persist an analyzed meal and return it."""

    def update_meal(self, meal_id: UUID, update: MealMetadataUpdate) -> None:
        """Update editable meal metadata."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal and its detected foods."""


@dataclass
class MealService:
    """Service that analyzes meal photos and manages meal history."""

    analyzer: ImageAnalyzer
    repository: MealRepository
    history_limit: int = 50

    async def analyze_image(self, image_bytes: bytes) -> MealAnalysis:
        """Analyze a meal photo without persisting anything."""
        return await self.analyzer.analyze(image_bytes)

    async def log_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        image_bytes: bytes,
        meal_type: str,
        *,
        name: str | None = None,
        tags: list[str] | None = None,
        notes: str = "",
        logged_at: datetime | None = None,
        image_url: str | None = None,
    ) -> Meal:
        """Analyze a meal photo and persist the resulting meal."""
        analysis = await self.analyzer.analyze(image_bytes)
        meal = self.repository.create_meal(
            NewMeal(
                user_id=user_id,
                name=name or analysis.name,
                meal_type=meal_type,
                logged_at=logged_at or datetime.now(tz=UTC),
                nutrition=analysis.total_nutrition,
                detected_foods=analysis.detected_foods,
                image_url=image_url,
                tags=tags or [],
                notes=notes,
                assessment=analysis.assessment,
            )
        )
        _logger.info("Logged meal %s for user %s", meal.id, user_id)
        return meal

    def list_history(
        self,
        user_id: UUID,
        page: int = 1,
        limit: int = 10,
        meal_type: str | None = None,
    ) -> MealPage:
        """Return a page of the user's meals, newest first."""
        page = max(page, 1)
        meals = self.repository.list_meals(
            user_id, limit=limit, offset=(page - 1) * limit, meal_type=meal_type
        )
        total = self.repository.count_meals(user_id, meal_type=meal_type)
        return MealPage(meals=meals, page=page, limit=limit, total=total)

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        """Return a meal owned by the user."""
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def update_meal(
        self, user_id: UUID, meal_id: UUID, update: MealMetadataUpdate
    ) -> Meal | None:
        """Edit meal metadata; nutrition is left untouched."""
        if self.get_meal(user_id, meal_id) is None:
            return None
        self.repository.update_meal(meal_id, update)
        return self.repository.get_meal(meal_id)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the user."""
        if self.get_meal(user_id, meal_id) is None:
            return False
        self.repository.delete_meal(meal_id)
        _logger.info("Deleted meal %s for user %s", meal_id, user_id)
        return True

    def get_meal_insights(self, user_id: UUID, meal_id: UUID) -> MealInsights | None:
        """Compare a meal with the user's recent history."""
        meal = self.get_meal(user_id, meal_id)
        if meal is None:
            return None
        history = self.repository.list_meals(
            user_id, limit=self.history_limit, offset=0
        )
        average = None
        if len(history) > 1:
            average = sum_nutrition(history).divide(len(history)).rounded()
        pattern = Counter(entry.meal_type for entry in history)
        return MealInsights(
            meal=meal,
            current=meal.nutrition or NutritionTotals.zero(),
            average=average,
            meal_pattern=dict(pattern),
            suggestions=_meal_suggestions(meal),
        )


def _meal_suggestions(meal: Meal) -> list[str]:
    if meal.nutrition is None:
        return []
    suggestions = []
    if meal.assessment and meal.assessment.health_score < LOW_HEALTH_SCORE:
        suggestions.append(
            "Consider adding more vegetables and lean proteins "
            "to improve nutritional balance"
        )
    if meal.nutrition.calories > HIGH_CALORIE_MEAL:
        suggestions.append(
            "This meal is quite high in calories. "
            "Consider portion control for weight management"
        )
    if meal.nutrition.protein < LOW_PROTEIN_MEAL_G:
        suggestions.append(
            "Consider adding protein-rich foods for better satiety "
            "and muscle maintenance"
        )
    return suggestions
