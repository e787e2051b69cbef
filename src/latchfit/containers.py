"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from latchfit.adapters.memory_session_repository import InMemoryMilkSessionRepository
from latchfit.adapters.recipe_client import (
    HttpxRecipeClient,
    MockRecipeClient,
    OfflineRecipeClient,
    RecipeSearchClient,
)
from latchfit.app_logging import configure_logging
from latchfit.config import FeatureFlags, Settings
from latchfit.services.meal_plans import MealIdeaGenerator
from latchfit.services.milk_stats import MilkStatsService
from latchfit.services.milk_timer import (
    MilkLogService,
    MilkSessionRepository,
    TimerSettings,
)
from latchfit.services.recipes import RecipeSuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    flags: FeatureFlags
    recipe_client: RecipeSearchClient
    session_repository: MilkSessionRepository
    meal_idea_generator: MealIdeaGenerator
    recipe_suggestion_service: RecipeSuggestionService
    milk_log_service: MilkLogService
    milk_stats_service: MilkStatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    session_repository: MilkSessionRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    flags = FeatureFlags.from_settings(resolved_settings)
    repository = session_repository or InMemoryMilkSessionRepository()
    recipe_client = _build_recipe_client(resolved_settings, flags)

    recipe_suggestion_service = RecipeSuggestionService(
        client=recipe_client,
        flags=flags,
    )
    milk_log_service = MilkLogService(
        repository=repository,
        settings=TimerSettings(default_mode=resolved_settings.default_timer_mode),
    )
    milk_stats_service = MilkStatsService(repository)

    async def close_resources() -> None:
        await recipe_client.close()

    return AppContainer(
        settings=resolved_settings,
        flags=flags,
        recipe_client=recipe_client,
        session_repository=repository,
        meal_idea_generator=MealIdeaGenerator(),
        recipe_suggestion_service=recipe_suggestion_service,
        milk_log_service=milk_log_service,
        milk_stats_service=milk_stats_service,
        close_resources=close_resources,
    )


def _build_recipe_client(
    settings: Settings, flags: FeatureFlags
) -> HttpxRecipeClient | MockRecipeClient | OfflineRecipeClient:
    if flags.use_mock_recipes:
        return MockRecipeClient()
    if settings.recipe_backend_base_url:
        return HttpxRecipeClient.create(
            base_url=settings.recipe_backend_base_url,
            timeout_seconds=settings.recipe_timeout_seconds,
        )
    return OfflineRecipeClient()
