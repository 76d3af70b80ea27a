"""Nutrition aggregation over collections of meals.

All functions are pure. Meals without an analysis contribute zero and
calendar dates are taken in UTC.
"""

import math
from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta

from meal_analyzer.domain.analytics import AveragingMode, DailyBucket
from meal_analyzer.domain.meals import Meal
from meal_analyzer.domain.nutrition import NutritionTotals

_ONE_DAY = timedelta(days=1)


def sum_totals(totals: Iterable[NutritionTotals]) -> NutritionTotals:
    """Field-wise sum of nutrition vectors."""
    result = NutritionTotals.zero()
    for entry in totals:
        result = result + entry
    return result


def sum_nutrition(meals: Iterable[Meal]) -> NutritionTotals:
    """Sum the nutrition of every meal, counting unanalyzed meals as zero."""
    return sum_totals(meal.nutrition or NutritionTotals.zero() for meal in meals)


def daily_average(totals: NutritionTotals, day_count: int) -> NutritionTotals:
    """Divide totals by a day count; zero days yields all zeros."""
    return totals.divide(day_count)


def meal_date(meal: Meal) -> date:
    """Return the UTC calendar date a meal was logged on."""
    return as_utc(meal.logged_at).date()


def bucket_by_date(meals: Iterable[Meal]) -> dict[date, DailyBucket]:
    """Group meals by UTC calendar date, ordered by date."""
    grouped: dict[date, list[Meal]] = {}
    for meal in meals:
        grouped.setdefault(meal_date(meal), []).append(meal)
    return {
        day: DailyBucket(day=day, meals=day_meals, totals=sum_nutrition(day_meals))
        for day, day_meals in sorted(grouped.items())
    }


def average_over_days_with_data(meals: list[Meal]) -> NutritionTotals:
    """Average totals over the number of distinct dates that have meals."""
    buckets = bucket_by_date(meals)
    return daily_average(
        sum_totals(bucket.totals for bucket in buckets.values()), len(buckets)
    )


def average_over_calendar_span(meals: list[Meal], span_days: int) -> NutritionTotals:
    """Average totals over a literal number of calendar days."""
    return daily_average(sum_nutrition(meals), span_days)


def average(
    meals: list[Meal], mode: AveragingMode, span_days: int = 0
) -> NutritionTotals:
    """Average meal totals using the given divisor mode."""
    if mode is AveragingMode.DAYS_WITH_DATA:
        return average_over_days_with_data(meals)
    return average_over_calendar_span(meals, span_days)


def calendar_span_days(start: datetime, end: datetime) -> int:
    """Return the number of days between two instants, rounded up."""
    seconds = (end - start).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / _ONE_DAY.total_seconds())


def start_of_day(moment: datetime) -> datetime:
    """Return UTC midnight of the day containing ``moment``."""
    return as_utc(moment).replace(hour=0, minute=0, second=0, microsecond=0)


def as_utc(moment: datetime) -> datetime:
    """Interpret naive timestamps as UTC and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
