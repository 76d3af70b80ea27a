"""Tests for physiological calculations."""

import pytest

from meal_analyzer.domain.models import UserProfile
from meal_analyzer.services.physiology import (
    bmi,
    bmr,
    daily_calorie_target,
    profile_metrics,
)


def test_bmi_rounds_to_one_decimal() -> None:
    assert bmi(175, 70) == 22.9


@pytest.mark.parametrize(
    ("height", "weight"), [(None, 70), (175, None), (0, 70), (175, -1)]
)
def test_bmi_missing_inputs_return_none(height, weight) -> None:
    assert bmi(height, weight) is None


def test_bmr_male_and_female_branches() -> None:
    # 10*70 + 6.25*175 - 5*30 = 1643.75
    assert bmr(175, 70, 30, "male") == 1649
    assert bmr(175, 70, 30, "female") == 1483


def test_bmr_other_gender_uses_female_branch() -> None:
    assert bmr(175, 70, 30, "other") == bmr(175, 70, 30, "female")


def test_bmr_requires_all_inputs() -> None:
    assert bmr(None, 70, 30, "male") is None
    assert bmr(175, 70, None, "male") is None
    assert bmr(175, 70, 30, None) is None
    assert bmr(175, 70, 30, "") is None


def test_daily_calorie_target_applies_multiplier() -> None:
    assert daily_calorie_target(1674, "sedentary") == 2009
    assert daily_calorie_target(1649, "moderately_active") == 2556
    assert daily_calorie_target(1000, "extra_active") == 1900


def test_daily_calorie_target_defaults_to_sedentary() -> None:
    assert daily_calorie_target(1674, None) == 2009
    assert daily_calorie_target(1674, "couch_potato") == 2009


def test_daily_calorie_target_none_without_bmr() -> None:
    assert daily_calorie_target(None, "very_active") is None


def test_profile_metrics_degrades_to_none() -> None:
    metrics = profile_metrics(UserProfile(height_cm=180, weight_kg=81))

    assert metrics.bmi == 25.0
    assert metrics.bmr is None
    assert metrics.daily_calories is None
