"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from happy_foods.adapters.off_client import (
    HttpxOpenFoodFactsClient,
    OpenFoodFactsClient,
)
from happy_foods.config import Settings
from happy_foods.services.extraction import NutrientExtractor
from happy_foods.services.meals import MealAnalysisService
from happy_foods.services.neurochemistry import NeurochemistryScorer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    off_client: OpenFoodFactsClient
    meal_analysis_service: MealAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    off_client = HttpxOpenFoodFactsClient.create(
        search_url=resolved_settings.off_search_url,
        user_agent=resolved_settings.off_user_agent,
        timeout_seconds=resolved_settings.off_timeout_seconds,
    )
    meal_analysis_service = MealAnalysisService(
        off_client=off_client,
        extractor=NutrientExtractor(),
        scorer=NeurochemistryScorer(),
        page_size=resolved_settings.off_page_size,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        off_client=off_client,
        meal_analysis_service=meal_analysis_service,
        close_resources=close_resources,
    )
