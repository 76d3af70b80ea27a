"""Profile, dashboard and analytics endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from meal_analyzer.api.schemas import ProfileUpdate
from meal_analyzer.api.security import get_container, require_api_token, require_user
from meal_analyzer.api.serializers import (
    daily_analytics_view,
    dashboard_view,
    goal_progress_view,
    health_insights_view,
    user_view,
    weekly_analytics_view,
)
from meal_analyzer.containers import AppContainer
from meal_analyzer.domain.analytics import GoalPeriod
from meal_analyzer.domain.models import UserRecord
from meal_analyzer.services.physiology import profile_metrics

router = APIRouter(
    prefix="/users/{user_id}",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/profile")
async def get_profile(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the profile with derived BMI, BMR and calorie target."""
    return user_view(user, profile_metrics(user.profile))


@router.put("/profile")
async def update_profile(
    body: ProfileUpdate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Merge profile changes and return the updated user."""
    updated = container.user_service.update_profile(user.id, body.changes())
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return {
        "message": "Profile updated successfully",
        "user": user_view(updated, profile_metrics(updated.profile)),
    }


@router.get("/dashboard")
async def dashboard(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return today's snapshot, the rolling week and profile metrics."""
    return dashboard_view(user, container.analytics_service.get_dashboard(user.id))


@router.get("/analytics/weekly")
async def weekly_analytics(
    weeks: int = Query(default=1, ge=1, le=52),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return per-day totals and averages over the last weeks."""
    return weekly_analytics_view(
        container.analytics_service.get_weekly_analytics(user.id, weeks)
    )


@router.get("/analytics/daily")
async def daily_analytics(
    day: date | None = Query(default=None, alias="date"),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return totals and meals for one date (UTC)."""
    return daily_analytics_view(
        container.analytics_service.get_daily_analytics(user.id, day)
    )


@router.get("/goals/progress")
async def goal_progress(
    period: GoalPeriod = GoalPeriod.WEEKLY,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return progress towards the calorie target for the declared goal."""
    return goal_progress_view(
        container.analytics_service.get_goal_progress(user.id, period)
    )


@router.get("/health-insights")
async def health_insights(
    days: int = Query(default=7, ge=1, le=365),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return trend concerns and achievements over recent days."""
    return health_insights_view(
        container.analytics_service.get_health_insights(user.id, days)
    )
