"""Meal logging and history endpoints."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from meal_analyzer.api.schemas import MealUpdate, parse_tags
from meal_analyzer.api.security import get_container, require_api_token, require_user
from meal_analyzer.api.serializers import (
    analysis_view,
    meal_insights_view,
    meal_page_view,
    meal_view,
)
from meal_analyzer.containers import AppContainer
from meal_analyzer.domain.meals import MealType
from meal_analyzer.domain.models import UserRecord
from meal_analyzer.services.aggregation import as_utc

router = APIRouter(
    prefix="/users/{user_id}/meals",
    tags=["meals"],
    dependencies=[Depends(require_api_token)],
)


async def _read_image(request: Request) -> bytes:
    image_bytes = await request.body()
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="No image file provided"
        )
    return image_bytes


def _meal_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found")


@router.get("")
async def list_meals(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    meal_type: MealType | None = Query(default=None, alias="mealType"),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a page of meal history, newest first."""
    history = container.meal_service.list_history(
        user.id,
        page=page,
        limit=limit,
        meal_type=meal_type.value if meal_type else None,
    )
    return meal_page_view(history)


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_meal(  # noqa: PLR0913
    meal_type: MealType = Query(alias="mealType"),
    name: str | None = None,
    tags: str | None = None,
    notes: str = "",
    logged_at: datetime | None = Query(default=None, alias="date"),
    image_bytes: bytes = Depends(_read_image),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Analyze the raw image body and store the meal."""
    meal = await container.meal_service.log_meal(
        user.id,
        image_bytes,
        meal_type.value,
        name=name.strip() if name and name.strip() else None,
        tags=parse_tags(tags),
        notes=notes,
        logged_at=as_utc(logged_at) if logged_at else None,
    )
    return {"message": "Meal analyzed successfully", "meal": meal_view(meal)}


@router.post("/analyze")
async def analyze_meal_image(
    image_bytes: bytes = Depends(_read_image),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Analyze the raw image body without saving a meal."""
    analysis = await container.meal_service.analyze_image(image_bytes)
    return {
        "message": "Image analyzed successfully",
        "analysis": analysis_view(analysis),
    }


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single meal."""
    meal = container.meal_service.get_meal(user.id, meal_id)
    if meal is None:
        raise _meal_not_found()
    return {"meal": meal_view(meal)}


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: MealUpdate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Edit meal name, type, tags or notes."""
    meal = container.meal_service.update_meal(user.id, meal_id, body.to_update())
    if meal is None:
        raise _meal_not_found()
    return {"message": "Meal updated successfully", "meal": meal_view(meal)}


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a meal."""
    if not container.meal_service.delete_meal(user.id, meal_id):
        raise _meal_not_found()
    return {"message": "Meal deleted successfully"}


@router.get("/{meal_id}/insights")
async def meal_insights(
    meal_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Compare a meal with the user's recent meals."""
    insights = container.meal_service.get_meal_insights(user.id, meal_id)
    if insights is None:
        raise _meal_not_found()
    return meal_insights_view(insights)
