"""Request dependencies shared by the API routers."""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from meal_analyzer.containers import AppContainer
from meal_analyzer.domain.models import UserRecord


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def _get_api_token(request: Request) -> str:
    return get_container(request).settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def require_user(user_id: UUID, request: Request) -> UserRecord:
    """Resolve the path user or respond with 404."""
    user = get_container(request).user_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return user
