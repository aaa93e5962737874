"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from happy_foods.adapters.off_client import OpenFoodFactsClient
from happy_foods.config import Settings
from happy_foods.containers import AppContainer
from happy_foods.services.meals import MealAnalysisService

DARK_CHOCOLATE: dict[str, object] = {
    "product_name": "Dark Chocolate",
    "brands": "Cocoa Co",
    "nutriments": {
        "proteins_100g": 7.8,
        "magnesium_100g": 228,
        "caffeine_100g": 0.02,
    },
}


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake OFF client returning canned products and recording queries."""

    products: list[dict[str, object]] = field(
        default_factory=lambda: [dict(DARK_CHOCOLATE)]
    )
    queries: list[tuple[str, int]] = field(default_factory=list)
    closed: bool = False

    async def search_products(
        self, query: str, page_size: int = 1
    ) -> dict[str, object]:
        self.queries.append((query, page_size))
        return {"count": len(self.products), "products": self.products}

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(off_search_url="https://off.test/cgi/search.pl")


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(settings: Settings, off_client: FakeOpenFoodFactsClient) -> AppContainer:
    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=settings,
        off_client=off_client,
        meal_analysis_service=MealAnalysisService(off_client=off_client),
        close_resources=close_resources,
    )


@pytest.fixture(autouse=True)
def reset_app_logging() -> Iterator[None]:
    yield
    logging.getLogger("happy_foods").handlers.clear()
