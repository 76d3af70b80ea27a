"""Dashboard and analytics views over the meal store.

Every view is recomputed from storage on each call. Day boundaries are UTC
midnights derived from the injected clock.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from uuid import UUID

from meal_analyzer.domain.analytics import (
    AveragingMode,
    Dashboard,
    DailyAnalytics,
    DailySeriesPoint,
    GoalPeriod,
    GoalProgress,
    HealthInsights,
    ProfileMetrics,
    TodaySnapshot,
    WeeklyAnalytics,
    WeeklySnapshot,
)
from meal_analyzer.domain.meals import Meal
from meal_analyzer.domain.models import UserProfile
from meal_analyzer.domain.nutrition import round_half_up
from meal_analyzer.services.aggregation import (
    as_utc,
    average,
    bucket_by_date,
    calendar_span_days,
    daily_average,
    start_of_day,
    sum_nutrition,
    sum_totals,
)
from meal_analyzer.services.goals import (
    DASHBOARD_BAND,
    calorie_progress,
    calorie_progress_percent,
    goal_status,
    recommendations,
)
from meal_analyzer.services.meals import MealRepository
from meal_analyzer.services.physiology import profile_metrics
from meal_analyzer.services.users import UserRepository

WEEK_DAYS = 7
GOAL_PERIOD_DAYS = {GoalPeriod.WEEKLY: 7, GoalPeriod.MONTHLY: 28}

LOW_CALORIE_AVERAGE = 1800
HIGH_CALORIE_AVERAGE = 2500
LOW_PROTEIN_AVERAGE_G = 50
HIGH_PROTEIN_AVERAGE_G = 100
REGULAR_MEALS_PER_DAY = 3


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class AnalyticsService:
    """Service composing aggregation, physiology and goal evaluation."""

    meal_repository: MealRepository
    user_repository: UserRepository
    clock: Callable[[], datetime] = _utc_now
    recent_meals_limit: int = 5

    def get_dashboard(self, user_id: UUID) -> Dashboard:
        """Return profile metrics, today's snapshot and the rolling week."""
        metrics = profile_metrics(self._profile(user_id))
        today, today_meals = self._today(user_id, metrics)
        recent = sorted(today_meals, key=lambda meal: meal.logged_at, reverse=True)
        return Dashboard(
            metrics=metrics,
            today=today,
            weekly=self.get_weekly_snapshot(user_id),
            recent_meals=recent[: self.recent_meals_limit],
        )

    def get_today(self, user_id: UUID) -> TodaySnapshot:
        """Return today's meal count, totals and calorie progress."""
        metrics = profile_metrics(self._profile(user_id))
        snapshot, _ = self._today(user_id, metrics)
        return snapshot

    def get_weekly_snapshot(self, user_id: UUID) -> WeeklySnapshot:
        """Return the last seven days averaged over the full calendar span."""
        end = self._now()
        start = end - timedelta(days=WEEK_DAYS)
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, end
        )
        averages = average(meals, AveragingMode.CALENDAR_SPAN, WEEK_DAYS)
        return WeeklySnapshot(meal_count=len(meals), daily_averages=averages.rounded())

    def get_weekly_analytics(self, user_id: UUID, weeks: int = 1) -> WeeklyAnalytics:
        """Return a per-day series averaged over days that have meals."""
        end = self._now()
        start = end - timedelta(days=WEEK_DAYS * max(weeks, 1))
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, end
        )
        buckets = bucket_by_date(meals)
        totals = sum_totals(bucket.totals for bucket in buckets.values())
        daily = [
            DailySeriesPoint(
                day=bucket.day, meal_count=len(bucket.meals), totals=bucket.totals
            )
            for bucket in buckets.values()
        ]
        return WeeklyAnalytics(
            start_date=start.date(),
            end_date=end.date(),
            total_days=len(buckets),
            daily=daily,
            averages=daily_average(totals, len(buckets)).rounded(),
            totals=totals,
        )

    def get_goal_progress(
        self, user_id: UUID, period: GoalPeriod = GoalPeriod.WEEKLY
    ) -> GoalProgress:
        """Compare average intake over the period with the calorie target."""
        profile = self._profile(user_id)
        target = profile_metrics(profile).daily_calories
        end = self._now()
        start = end - timedelta(days=GOAL_PERIOD_DAYS[period])
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, end
        )
        span = calendar_span_days(start, end)
        averages = average(meals, AveragingMode.CALENDAR_SPAN, span).rounded()
        percent = calorie_progress_percent(averages.calories, target)
        status = goal_status(profile.goal, percent)
        return GoalProgress(
            period=period,
            target=target,
            goal=profile.goal,
            status=status,
            progress_percent=(
                int(round_half_up(percent)) if percent is not None else None
            ),
            meal_count=len(meals),
            daily_averages=averages,
            totals=sum_nutrition(meals),
            recommendations=recommendations(status, profile.goal, averages, target),
        )

    def get_daily_analytics(
        self, user_id: UUID, day: date | None = None
    ) -> DailyAnalytics:
        """Return totals and meals for one UTC calendar date."""
        day = day or self._now().date()
        start = datetime.combine(day, time.min, tzinfo=UTC)
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, start + timedelta(days=1)
        )
        return DailyAnalytics(
            day=day,
            meal_count=len(meals),
            totals=sum_nutrition(meals),
            meals=meals,
        )

    def get_health_insights(self, user_id: UUID, days: int = 7) -> HealthInsights:
        """Return averages, concerns and achievements over recent days."""
        end = self._now()
        start = end - timedelta(days=max(days, 1))
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, end
        )
        if not meals:
            return HealthInsights(
                days=days, meal_count=0, daily_averages=None, meals_per_day=None
            )

        day_count = len(bucket_by_date(meals))
        raw_averages = average(meals, AveragingMode.DAYS_WITH_DATA)
        averages = raw_averages.rounded()
        meals_per_day = int(round_half_up(len(meals) / day_count))

        insights = HealthInsights(
            days=days,
            meal_count=len(meals),
            daily_averages=averages,
            meals_per_day=meals_per_day,
        )
        if raw_averages.calories < LOW_CALORIE_AVERAGE:
            insights.concerns.append(
                "Average daily calories seem low. "
                "Consider consulting with a nutritionist."
            )
        elif raw_averages.calories > HIGH_CALORIE_AVERAGE:
            insights.concerns.append(
                "Average daily calories seem high. Consider portion control."
            )

        if averages.protein < LOW_PROTEIN_AVERAGE_G:
            insights.concerns.append(
                "Protein intake appears low. Consider adding more protein-rich foods."
            )
        elif averages.protein > HIGH_PROTEIN_AVERAGE_G:
            insights.achievements.append(
                "Good protein intake! You're meeting your daily protein goals."
            )

        if meals_per_day >= REGULAR_MEALS_PER_DAY:
            insights.achievements.append(
                "Great meal frequency! Regular meals help maintain energy levels."
            )
        else:
            insights.suggestions.append(
                "Consider eating more regularly throughout the day "
                "for better energy management."
            )
        return insights

    def _today(
        self, user_id: UUID, metrics: ProfileMetrics
    ) -> tuple[TodaySnapshot, list[Meal]]:
        start = start_of_day(self._now())
        meals = self.meal_repository.find_meals_by_user_and_date_range(
            user_id, start, start + timedelta(days=1)
        )
        totals = sum_nutrition(meals)
        snapshot = TodaySnapshot(
            meal_count=len(meals),
            totals=totals,
            progress=calorie_progress(
                totals.calories, metrics.daily_calories, DASHBOARD_BAND
            ),
        )
        return snapshot, meals

    def _profile(self, user_id: UUID) -> UserProfile:
        user = self.user_repository.get_user(user_id)
        return user.profile if user else UserProfile()

    def _now(self) -> datetime:
        return as_utc(self.clock())
