"""Calorie progress and goal evaluation."""

from dataclasses import dataclass

from meal_analyzer.domain.analytics import CalorieProgress, GoalStatus
from meal_analyzer.domain.nutrition import NutritionTotals

LOSE_WEIGHT = "lose_weight"
MAINTAIN_WEIGHT = "maintain_weight"
GAIN_WEIGHT = "gain_weight"

PROTEIN_MINIMUM_G = 50
FIBER_MINIMUM_G = 25

ON_TRACK_MESSAGE = "Great progress! Keep up the good work"
LOSE_WEIGHT_ADVICE = (
    "Reduce calorie intake by choosing lower-calorie alternatives",
    "Increase vegetable portions and reduce portion sizes",
)
GAIN_WEIGHT_ADVICE = (
    "Increase calorie intake with nutrient-dense foods",
    "Add healthy fats like avocados, nuts, and olive oil",
)
MAINTAIN_WEIGHT_ADVICE = (
    "Adjust portion sizes to better match your daily calorie needs",
)
PROTEIN_ADVICE = (
    "Consider increasing protein intake for better satiety and muscle maintenance"
)
FIBER_ADVICE = "Increase fiber intake with more vegetables, fruits, and whole grains"


@dataclass(frozen=True)
class ProgressBand:
    """Inclusive percentage band counted as on track."""

    low: float
    high: float


DASHBOARD_BAND = ProgressBand(low=80, high=120)
GOAL_BAND = ProgressBand(low=90, high=110)


def calorie_progress_percent(actual: float, target: int | None) -> float | None:
    """Return actual calories as a percentage of target, or None."""
    if not target:
        return None
    return actual / target * 100


def calorie_progress(
    actual: float, target: int | None, band: ProgressBand = DASHBOARD_BAND
) -> CalorieProgress:
    """Classify actual calories against a target using a band policy."""
    percent = calorie_progress_percent(actual, target)
    if percent is None:
        return CalorieProgress.UNKNOWN
    if percent < band.low:
        return CalorieProgress.UNDER
    if percent <= band.high:
        return CalorieProgress.ON_TRACK
    return CalorieProgress.OVER


def goal_status(goal: str | None, percent: float | None) -> GoalStatus:
    """Decide whether calorie progress matches the declared goal."""
    if percent is None:
        return GoalStatus.UNKNOWN
    if goal == LOSE_WEIGHT and percent < GOAL_BAND.low:
        return GoalStatus.ON_TRACK
    if goal == GAIN_WEIGHT and percent > GOAL_BAND.high:
        return GoalStatus.ON_TRACK
    if goal == MAINTAIN_WEIGHT and GOAL_BAND.low <= percent <= GOAL_BAND.high:
        return GoalStatus.ON_TRACK
    return GoalStatus.NEEDS_ADJUSTMENT


def recommendations(
    status: GoalStatus,
    goal: str | None,
    daily_averages: NutritionTotals,
    target: int | None,
) -> list[str]:
    """Build ordered advice for a goal status and daily averages."""
    advice: list[str] = []
    if status is GoalStatus.ON_TRACK:
        advice.append(ON_TRACK_MESSAGE)
    elif status is GoalStatus.NEEDS_ADJUSTMENT:
        advice.extend(_adjustment_advice(goal, daily_averages.calories, target))

    if daily_averages.protein < PROTEIN_MINIMUM_G:
        advice.append(PROTEIN_ADVICE)
    if daily_averages.fiber < FIBER_MINIMUM_G:
        advice.append(FIBER_ADVICE)
    return advice


def _adjustment_advice(
    goal: str | None, average_calories: float, target: int | None
) -> tuple[str, ...]:
    if target is None:
        return ()
    if goal == LOSE_WEIGHT and average_calories > target:
        return LOSE_WEIGHT_ADVICE
    if goal == GAIN_WEIGHT and average_calories < target:
        return GAIN_WEIGHT_ADVICE
    if goal == MAINTAIN_WEIGHT:
        return MAINTAIN_WEIGHT_ADVICE
    return ()
