"""Per-meal nutritional assessment.

Scores a single meal from its totals: macro distribution, a balance band,
recommendations and a 0-100 health score.
"""

from meal_analyzer.domain.meals import (
    MacroDistribution,
    MealAssessment,
    NutritionalBalance,
)
from meal_analyzer.domain.nutrition import NutritionTotals, round_half_up

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

# Inclusive (low, high) percentage ranges for protein, carbs and fat.
GOOD_BALANCE = ((20, 30), (40, 65), (20, 35))
FAIR_BALANCE = ((15, 35), (30, 70), (15, 40))

LOW_PROTEIN_SHARE = 15
HIGH_CARBS_SHARE = 70
HIGH_FAT_SHARE = 40
LOW_FIBER_G = 5
HIGH_SUGAR_G = 30
HIGH_SODIUM_MG = 2000

BASE_HEALTH_SCORE = 50
MAX_HEALTH_SCORE = 100

PROTEIN_RECOMMENDATION = (
    "Consider adding more protein-rich foods like chicken, fish, eggs, or legumes"
)
CARBS_RECOMMENDATION = (
    "High carbohydrate content detected. "
    "Consider balancing with more vegetables and protein"
)
FAT_RECOMMENDATION = (
    "High fat content detected. "
    "Consider healthier fat sources like avocados or nuts"
)
FIBER_RECOMMENDATION = (
    "Low fiber content. Consider adding more vegetables, fruits, or whole grains"
)
SUGAR_RECOMMENDATION = (
    "High sugar content detected. Consider reducing sugary foods and drinks"
)
SODIUM_RECOMMENDATION = (
    "High sodium content detected. Consider reducing salt and processed foods"
)
BALANCED_RECOMMENDATIONS = (
    "Great meal composition! Keep up the balanced nutrition",
    "Consider portion control to maintain calorie goals",
)

OVERALL_ASSESSMENTS = {
    NutritionalBalance.GOOD: (
        "This meal has a good nutritional balance "
        "with appropriate macro distribution."
    ),
    NutritionalBalance.FAIR: (
        "This meal has a fair nutritional balance. "
        "Some adjustments could improve it."
    ),
    NutritionalBalance.POOR: "This meal could benefit from better nutritional balance.",
}


def macro_distribution(totals: NutritionTotals) -> MacroDistribution:
    """Return the percentage of calories from each macro; zero without calories."""
    if totals.calories <= 0:
        return MacroDistribution(protein=0.0, carbs=0.0, fat=0.0)
    return MacroDistribution(
        protein=totals.protein * PROTEIN_KCAL_PER_G * 100 / totals.calories,
        carbs=totals.carbs * CARBS_KCAL_PER_G * 100 / totals.calories,
        fat=totals.fat * FAT_KCAL_PER_G * 100 / totals.calories,
    )


def nutritional_balance(distribution: MacroDistribution) -> NutritionalBalance:
    """Classify a macro distribution as good, fair or poor."""
    if _within(distribution, GOOD_BALANCE):
        return NutritionalBalance.GOOD
    if _within(distribution, FAIR_BALANCE):
        return NutritionalBalance.FAIR
    return NutritionalBalance.POOR


def meal_recommendations(
    totals: NutritionTotals, distribution: MacroDistribution
) -> list[str]:
    """Return ordered advice for one meal."""
    advice = []
    if distribution.protein < LOW_PROTEIN_SHARE:
        advice.append(PROTEIN_RECOMMENDATION)
    if distribution.carbs > HIGH_CARBS_SHARE:
        advice.append(CARBS_RECOMMENDATION)
    if distribution.fat > HIGH_FAT_SHARE:
        advice.append(FAT_RECOMMENDATION)
    if totals.fiber < LOW_FIBER_G:
        advice.append(FIBER_RECOMMENDATION)
    if totals.sugar > HIGH_SUGAR_G:
        advice.append(SUGAR_RECOMMENDATION)
    if totals.sodium > HIGH_SODIUM_MG:
        advice.append(SODIUM_RECOMMENDATION)
    return advice or list(BALANCED_RECOMMENDATIONS)


def health_score(totals: NutritionTotals, balance: NutritionalBalance) -> int:
    """Score a meal from 0 to 100 using gram ranges and its balance band."""
    score = BASE_HEALTH_SCORE
    if 20 <= totals.protein <= 40:
        score += 10
    if 30 <= totals.carbs <= 60:
        score += 10
    if 15 <= totals.fat <= 35:
        score += 10
    if totals.fiber >= 8:
        score += 10
    if totals.sugar <= 20:
        score += 5
    if totals.sodium <= 1500:
        score += 5
    if balance is NutritionalBalance.GOOD:
        score += 10
    elif balance is NutritionalBalance.FAIR:
        score += 5
    return min(max(score, 0), MAX_HEALTH_SCORE)


def assess_meal(totals: NutritionTotals) -> MealAssessment:
    """Build the full assessment for a meal's nutrition totals."""
    distribution = macro_distribution(totals)
    balance = nutritional_balance(distribution)
    return MealAssessment(
        nutritional_balance=balance,
        macro_distribution=MacroDistribution(
            protein=round_half_up(distribution.protein),
            carbs=round_half_up(distribution.carbs),
            fat=round_half_up(distribution.fat),
        ),
        overall_assessment=OVERALL_ASSESSMENTS[balance],
        recommendations=meal_recommendations(totals, distribution),
        health_score=health_score(totals, balance),
    )


def _within(
    distribution: MacroDistribution, ranges: tuple[tuple[float, float], ...]
) -> bool:
    shares = (distribution.protein, distribution.carbs, distribution.fat)
    return all(
        low <= share <= high
        for share, (low, high) in zip(shares, ranges, strict=True)
    )
