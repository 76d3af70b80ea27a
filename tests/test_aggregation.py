"""Tests for nutrition aggregation."""

import math
from datetime import UTC, date, datetime, timedelta, timezone
from uuid import uuid4

from meal_analyzer.domain.analytics import AveragingMode
from meal_analyzer.domain.nutrition import NutritionTotals
from meal_analyzer.services.aggregation import (
    average,
    bucket_by_date,
    calendar_span_days,
    daily_average,
    sum_nutrition,
)
from tests.conftest import NOW, make_meal


def test_sum_of_no_meals_is_zero() -> None:
    assert sum_nutrition([]) == NutritionTotals.zero()


def test_unanalyzed_meal_contributes_zero() -> None:
    meal = make_meal(uuid4(), NOW, analyzed=False)

    assert sum_nutrition([meal]) == NutritionTotals.zero()


def test_sum_adds_every_field() -> None:
    user_id = uuid4()
    meals = [
        make_meal(user_id, NOW, calories=500, protein=30, fiber=5),
        make_meal(user_id, NOW, calories=700, protein=20, fiber=8),
        make_meal(user_id, NOW, analyzed=False),
    ]

    totals = sum_nutrition(meals)

    assert totals.calories == 1200
    assert totals.protein == 50
    assert totals.fiber == 13


def test_daily_average_by_zero_days_is_zero() -> None:
    totals = NutritionTotals(calories=900, protein=45)

    result = daily_average(totals, 0)

    assert result == NutritionTotals.zero()
    assert all(math.isfinite(value) for value in vars(result).values())


def test_bucket_by_date_groups_on_utc_dates() -> None:
    user_id = uuid4()
    late_evening_east = datetime(2026, 3, 11, 1, 30, tzinfo=timezone(timedelta(hours=3)))
    meals = [
        make_meal(user_id, datetime(2026, 3, 10, 8, 0, tzinfo=UTC), calories=300),
        make_meal(user_id, late_evening_east, calories=200),
        make_meal(user_id, datetime(2026, 3, 11, 12, 0, tzinfo=UTC), calories=600),
    ]

    buckets = bucket_by_date(meals)

    assert list(buckets) == [date(2026, 3, 10), date(2026, 3, 11)]
    assert buckets[date(2026, 3, 10)].totals.calories == 500
    assert len(buckets[date(2026, 3, 11)].meals) == 1


def test_bucket_by_date_treats_naive_timestamps_as_utc() -> None:
    meal = make_meal(uuid4(), datetime(2026, 3, 10, 23, 59), calories=100)

    assert list(bucket_by_date([meal])) == [date(2026, 3, 10)]


def test_averaging_modes_use_different_divisors() -> None:
    user_id = uuid4()
    meals = [
        make_meal(user_id, NOW - timedelta(days=offset), calories=2100, protein=70)
        for offset in (0, 2, 5)
    ]

    with_data = average(meals, AveragingMode.DAYS_WITH_DATA)
    over_span = average(meals, AveragingMode.CALENDAR_SPAN, 7)

    assert with_data.calories == 2100
    assert over_span.calories == 900
    assert with_data.protein == 70
    assert over_span.protein == 30


def test_calendar_span_rounds_partial_days_up() -> None:
    assert calendar_span_days(NOW - timedelta(days=7), NOW) == 7
    assert calendar_span_days(NOW - timedelta(days=6, hours=1), NOW) == 7
    assert calendar_span_days(NOW, NOW) == 0
