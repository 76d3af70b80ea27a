"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_analyzer.adapters.openai_vision_client import OpenAIVisionClient
from meal_analyzer.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_analyzer.adapters.supabase_user_repository import SupabaseUserRepository
from meal_analyzer.config import Settings
from meal_analyzer.services.analysis import VisionImageAnalyzer
from meal_analyzer.services.analytics import AnalyticsService
from meal_analyzer.services.meals import MealService
from meal_analyzer.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    meal_service: MealService
    analytics_service: AnalyticsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    vision_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    analyzer = VisionImageAnalyzer(
        client=vision_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    user_service = UserService(user_repository)
    meal_service = MealService(
        analyzer=analyzer,
        repository=meal_repository,
        history_limit=resolved_settings.history_limit,
    )
    analytics_service = AnalyticsService(
        meal_repository=meal_repository,
        user_repository=user_repository,
        recent_meals_limit=resolved_settings.recent_meals_limit,
    )

    async def close_resources() -> None:
        await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        meal_service=meal_service,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
