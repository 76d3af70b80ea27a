"""JSON views of domain objects using the public camelCase contract."""

from meal_analyzer.domain.analysis import MealAnalysis
from meal_analyzer.domain.analytics import (
    DailyAnalytics,
    Dashboard,
    GoalProgress,
    HealthInsights,
    ProfileMetrics,
    WeeklyAnalytics,
)
from meal_analyzer.domain.meals import (
    DetectedFood,
    Meal,
    MealAssessment,
    MealInsights,
    MealPage,
)
from meal_analyzer.domain.models import UserRecord

AVERAGE_DIGITS = 0


def user_view(user: UserRecord, metrics: ProfileMetrics) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "profile": user.profile.to_json(),
        "bmi": metrics.bmi,
        "bmr": metrics.bmr,
        "dailyCalories": metrics.daily_calories,
    }


def detected_food_view(food: DetectedFood) -> dict[str, object]:
    return {
        "name": food.name,
        "confidence": food.confidence,
        "nutrition": food.nutrition.to_dict(),
    }


def assessment_view(
    assessment: MealAssessment | None,
) -> dict[str, object] | None:
    if assessment is None:
        return None
    return {
        "overallAssessment": assessment.overall_assessment,
        "recommendations": assessment.recommendations,
        "nutritionalBalance": assessment.nutritional_balance.value,
        "macroDistribution": {
            "protein": assessment.macro_distribution.protein,
            "carbs": assessment.macro_distribution.carbs,
            "fat": assessment.macro_distribution.fat,
        },
        "healthScore": assessment.health_score,
    }


def meal_view(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "mealType": meal.meal_type,
        "date": meal.logged_at.isoformat(),
        "imageUrl": meal.image_url,
        "tags": meal.tags,
        "notes": meal.notes,
        "totalNutrition": meal.nutrition.to_dict() if meal.nutrition else {},
        "detectedFoods": [detected_food_view(food) for food in meal.detected_foods],
        "aiAnalysis": assessment_view(meal.assessment),
    }


def meal_page_view(page: MealPage) -> dict[str, object]:
    return {
        "meals": [meal_view(meal) for meal in page.meals],
        "pagination": {
            "currentPage": page.page,
            "totalPages": page.total_pages,
            "totalMeals": page.total,
            "hasNext": page.has_next,
            "hasPrev": page.has_prev,
        },
    }


def analysis_view(analysis: MealAnalysis) -> dict[str, object]:
    return {
        "name": analysis.name,
        "detectedFoods": [detected_food_view(food) for food in analysis.detected_foods],
        "totalNutrition": analysis.total_nutrition.to_dict(),
        "confidence": analysis.confidence,
        "aiAnalysis": assessment_view(analysis.assessment),
    }


def dashboard_view(user: UserRecord, dashboard: Dashboard) -> dict[str, object]:
    return {
        "user": user_view(user, dashboard.metrics),
        "today": {
            "mealCount": dashboard.today.meal_count,
            "totals": dashboard.today.totals.to_dict(),
            "calorieProgress": dashboard.today.progress.value,
        },
        "weekly": {
            "mealCount": dashboard.weekly.meal_count,
            "dailyAverages": dashboard.weekly.daily_averages.to_dict(AVERAGE_DIGITS),
        },
        "recentMeals": [
            {
                "id": str(meal.id),
                "name": meal.name,
                "mealType": meal.meal_type,
                "calories": _calories(meal),
                "time": meal.logged_at.isoformat(),
            }
            for meal in dashboard.recent_meals
        ],
    }


def weekly_analytics_view(analytics: WeeklyAnalytics) -> dict[str, object]:
    return {
        "period": {
            "startDate": analytics.start_date.isoformat(),
            "endDate": analytics.end_date.isoformat(),
            "totalDays": analytics.total_days,
        },
        "dailyData": [
            {
                "date": point.day.isoformat(),
                "mealCount": point.meal_count,
                "totals": point.totals.to_dict(),
            }
            for point in analytics.daily
        ],
        "weeklyAverages": analytics.averages.to_dict(AVERAGE_DIGITS),
        "weeklyTotals": analytics.totals.to_dict(),
    }


def goal_progress_view(progress: GoalProgress) -> dict[str, object]:
    return {
        "period": progress.period.value,
        "target": progress.target,
        "goal": progress.goal,
        "status": progress.status.value,
        "progressPercent": progress.progress_percent,
        "mealCount": progress.meal_count,
        "dailyAverages": progress.daily_averages.to_dict(AVERAGE_DIGITS),
        "totals": progress.totals.to_dict(),
        "recommendations": progress.recommendations,
    }


def daily_analytics_view(analytics: DailyAnalytics) -> dict[str, object]:
    return {
        "date": analytics.day.isoformat(),
        "totalMeals": analytics.meal_count,
        "nutritionTotals": analytics.totals.to_dict(),
        "meals": [
            {
                "id": str(meal.id),
                "name": meal.name,
                "mealType": meal.meal_type,
                "nutrition": meal.nutrition.to_dict() if meal.nutrition else {},
                "time": meal.logged_at.isoformat(),
            }
            for meal in analytics.meals
        ],
    }


def health_insights_view(insights: HealthInsights) -> dict[str, object]:
    averages: dict[str, object] = {}
    if insights.daily_averages is not None:
        averages = {
            **insights.daily_averages.to_dict(AVERAGE_DIGITS),
            "mealsPerDay": insights.meals_per_day,
        }
    return {
        "period": f"{insights.days} days",
        "insights": {
            "dailyAverages": averages,
            "concerns": insights.concerns,
            "achievements": insights.achievements,
            "suggestions": insights.suggestions,
        },
        "totalMeals": insights.meal_count,
    }


def meal_insights_view(insights: MealInsights) -> dict[str, object]:
    comparison: dict[str, object] = {}
    if insights.average is not None:
        comparison = {
            "current": insights.current.to_dict(),
            "average": insights.average.to_dict(AVERAGE_DIGITS),
        }
    return {
        "meal": meal_view(insights.meal),
        "insights": {
            "nutritionalComparison": comparison,
            "mealPattern": insights.meal_pattern,
            "suggestions": insights.suggestions,
        },
    }


def _calories(meal: Meal) -> int:
    if meal.nutrition is None:
        return 0
    return int(meal.nutrition.rounded().calories)
