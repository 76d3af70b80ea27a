"""Physiological calculations derived from a user profile."""

from meal_analyzer.domain.analytics import ProfileMetrics
from meal_analyzer.domain.models import UserProfile
from meal_analyzer.domain.nutrition import round_half_up

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extra_active": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["sedentary"]


def bmi(height_cm: float | None, weight_kg: float | None) -> float | None:
    """Return body mass index rounded to one decimal, or None."""
    if not _positive(height_cm) or not _positive(weight_kg):
        return None
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def bmr(
    height_cm: float | None,
    weight_kg: float | None,
    age: int | None,
    gender: str | None,
) -> int | None:
    """Return basal metabolic rate (Mifflin-St Jeor), or None.

    Only ``male`` takes the +5 branch; every other gender uses -161.
    """
    if not (_positive(height_cm) and _positive(weight_kg) and _positive(age)):
        return None
    if not gender:
        return None
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == "male":
        return int(round_half_up(base + 5))
    return int(round_half_up(base - 161))


def daily_calorie_target(bmr_value: int | None, activity_level: str | None) -> int | None:
    """Return BMR scaled by the activity multiplier, or None."""
    if bmr_value is None:
        return None
    multiplier = ACTIVITY_MULTIPLIERS.get(
        activity_level or "sedentary", DEFAULT_ACTIVITY_MULTIPLIER
    )
    return int(round_half_up(bmr_value * multiplier))


def profile_metrics(profile: UserProfile) -> ProfileMetrics:
    """Compute BMI, BMR and the daily calorie target for a profile."""
    bmr_value = bmr(profile.height_cm, profile.weight_kg, profile.age, profile.gender)
    return ProfileMetrics(
        bmi=bmi(profile.height_cm, profile.weight_kg),
        bmr=bmr_value,
        daily_calories=daily_calorie_target(bmr_value, profile.activity_level),
    )


def _positive(value: float | None) -> bool:
    return value is not None and value > 0
