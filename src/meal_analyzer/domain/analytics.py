"""Domain models for analytics views."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from meal_analyzer.domain.meals import Meal
from meal_analyzer.domain.nutrition import NutritionTotals


class CalorieProgress(StrEnum):
    """Position of actual calories relative to a target band."""

    UNDER = "under"
    ON_TRACK = "on_track"
    OVER = "over"
    UNKNOWN = "unknown"


class GoalStatus(StrEnum):
    """Whether calorie intake matches the declared goal."""

    ON_TRACK = "on_track"
    NEEDS_ADJUSTMENT = "needs_adjustment"
    UNKNOWN = "unknown"


class AveragingMode(StrEnum):
    """Divisor used when turning period totals into daily averages."""

    DAYS_WITH_DATA = "days_with_data"
    CALENDAR_SPAN = "calendar_span"


class GoalPeriod(StrEnum):
    """Lookback window for goal progress."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class DailyBucket:
    """Meals and summed totals for one calendar date."""

    day: date
    meals: list[Meal]
    totals: NutritionTotals


@dataclass(frozen=True)
class ProfileMetrics:
    """Derived physiological values; None when inputs are missing."""

    bmi: float | None
    bmr: int | None
    daily_calories: int | None


@dataclass(frozen=True)
class TodaySnapshot:
    """Today's meal count, totals and calorie progress."""

    meal_count: int
    totals: NutritionTotals
    progress: CalorieProgress


@dataclass(frozen=True)
class WeeklySnapshot:
    """Rolling seven-day meal count and daily averages."""

    meal_count: int
    daily_averages: NutritionTotals


@dataclass(frozen=True)
class Dashboard:
    """Composite dashboard view."""

    metrics: ProfileMetrics
    today: TodaySnapshot
    weekly: WeeklySnapshot
    recent_meals: list[Meal]


@dataclass(frozen=True)
class DailySeriesPoint:
    """Chart point for a single day."""

    day: date
    meal_count: int
    totals: NutritionTotals


@dataclass(frozen=True)
class WeeklyAnalytics:
    """Per-day series and averages over a multi-week window."""

    start_date: date
    end_date: date
    total_days: int
    daily: list[DailySeriesPoint]
    averages: NutritionTotals
    totals: NutritionTotals


@dataclass(frozen=True)
class GoalProgress:
    """Progress of average intake towards the calorie target."""

    period: GoalPeriod
    target: int | None
    goal: str | None
    status: GoalStatus
    progress_percent: int | None
    meal_count: int
    daily_averages: NutritionTotals
    totals: NutritionTotals
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DailyAnalytics:
    """Totals and meals for one calendar date."""

    day: date
    meal_count: int
    totals: NutritionTotals
    meals: list[Meal]


@dataclass(frozen=True)
class HealthInsights:
    """Trend observations over a lookback window."""

    days: int
    meal_count: int
    daily_averages: NutritionTotals | None
    meals_per_day: int | None
    concerns: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
