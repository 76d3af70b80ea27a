"""Tests for per-meal assessment."""

import pytest

from meal_analyzer.domain.meals import MacroDistribution, NutritionalBalance
from meal_analyzer.domain.nutrition import NutritionTotals
from meal_analyzer.services.meal_assessment import (
    BALANCED_RECOMMENDATIONS,
    CARBS_RECOMMENDATION,
    FAT_RECOMMENDATION,
    FIBER_RECOMMENDATION,
    OVERALL_ASSESSMENTS,
    PROTEIN_RECOMMENDATION,
    SODIUM_RECOMMENDATION,
    SUGAR_RECOMMENDATION,
    assess_meal,
    health_score,
    macro_distribution,
    nutritional_balance,
)

BALANCED_MEAL = NutritionTotals(
    calories=500, protein=30, carbs=60, fat=15, fiber=8, sugar=10, sodium=500
)


@pytest.mark.parametrize(
    ("shares", "expected"),
    [
        ((20, 40, 20), NutritionalBalance.GOOD),
        ((30, 65, 35), NutritionalBalance.GOOD),
        ((19.9, 50, 25), NutritionalBalance.FAIR),
        ((15, 30, 15), NutritionalBalance.FAIR),
        ((35, 70, 40), NutritionalBalance.FAIR),
        ((35.1, 50, 25), NutritionalBalance.POOR),
        ((14.9, 50, 25), NutritionalBalance.POOR),
        ((25, 70.5, 25), NutritionalBalance.POOR),
        ((25, 50, 40.5), NutritionalBalance.POOR),
    ],
)
def test_balance_band_boundaries(shares, expected) -> None:
    protein, carbs, fat = shares
    distribution = MacroDistribution(protein=protein, carbs=carbs, fat=fat)

    assert nutritional_balance(distribution) is expected


def test_macro_distribution_uses_calories() -> None:
    distribution = macro_distribution(BALANCED_MEAL)

    assert distribution.protein == pytest.approx(24)
    assert distribution.carbs == pytest.approx(48)
    assert distribution.fat == pytest.approx(27)


def test_balanced_meal_is_praised_and_score_is_capped() -> None:
    assessment = assess_meal(BALANCED_MEAL)

    assert assessment.nutritional_balance is NutritionalBalance.GOOD
    assert assessment.macro_distribution == MacroDistribution(
        protein=24, carbs=48, fat=27
    )
    assert assessment.overall_assessment == OVERALL_ASSESSMENTS[NutritionalBalance.GOOD]
    assert assessment.recommendations == list(BALANCED_RECOMMENDATIONS)
    assert assessment.health_score == 100


def test_health_score_bonus_per_balance() -> None:
    totals = NutritionTotals(calories=400, protein=25, carbs=45, fat=20)

    assert health_score(totals, NutritionalBalance.GOOD) == 100
    assert health_score(totals, NutritionalBalance.FAIR) == 95
    assert health_score(totals, NutritionalBalance.POOR) == 90


def test_recommendations_keep_check_order() -> None:
    totals = NutritionTotals(
        calories=1000, protein=10, carbs=200, fat=10, fiber=2, sugar=40, sodium=2500
    )

    assessment = assess_meal(totals)

    assert assessment.recommendations == [
        PROTEIN_RECOMMENDATION,
        CARBS_RECOMMENDATION,
        FIBER_RECOMMENDATION,
        SUGAR_RECOMMENDATION,
        SODIUM_RECOMMENDATION,
    ]
    assert assessment.health_score == 50


def test_fatty_meal_gets_fat_advice() -> None:
    totals = NutritionTotals(calories=500, protein=25, carbs=25, fat=35, fiber=6)

    assert assess_meal(totals).recommendations == [FAT_RECOMMENDATION]


def test_meal_without_calories() -> None:
    assessment = assess_meal(NutritionTotals.zero())

    assert assessment.macro_distribution == MacroDistribution(
        protein=0, carbs=0, fat=0
    )
    assert assessment.nutritional_balance is NutritionalBalance.POOR
    assert assessment.recommendations == [
        PROTEIN_RECOMMENDATION,
        FIBER_RECOMMENDATION,
    ]
    assert assessment.health_score == 60
