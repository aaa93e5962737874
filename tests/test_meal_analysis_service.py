"""Tests for the meal analysis service."""

import asyncio

import pytest

from happy_foods.domain.errors import EmptyQueryError, ProductNotFoundError
from happy_foods.services.meals import MealAnalysisService
from tests.conftest import FakeOpenFoodFactsClient


def test_analyze_returns_product_metadata_and_nutrients(
    off_client: FakeOpenFoodFactsClient,
) -> None:
    service = MealAnalysisService(off_client=off_client)

    analysis = asyncio.run(service.analyze("  dark chocolate "))

    assert off_client.queries == [("dark chocolate", 1)]
    assert analysis.product_name == "Dark Chocolate"
    assert analysis.brand == "Cocoa Co"
    assert analysis.serving_estimate_g == 100
    assert analysis.nutrients.magnesium_mg == pytest.approx(228)


def test_analyze_falls_back_to_query_for_unnamed_product() -> None:
    client = FakeOpenFoodFactsClient(products=[{"categories": "Juices"}])
    service = MealAnalysisService(off_client=client)

    analysis = asyncio.run(service.analyze("orange juice"))

    assert analysis.product_name == "orange juice"
    assert analysis.brand is None
    assert analysis.serving_estimate_g == 240
    assert "brand" not in analysis.as_dict()


def test_analyze_raises_when_no_product_found() -> None:
    service = MealAnalysisService(off_client=FakeOpenFoodFactsClient(products=[]))

    with pytest.raises(ProductNotFoundError) as excinfo:
        asyncio.run(service.analyze("unobtainium"))

    assert excinfo.value.query == "unobtainium"
    assert str(excinfo.value) == "No product found for that query"


def test_analyze_rejects_blank_query(off_client: FakeOpenFoodFactsClient) -> None:
    service = MealAnalysisService(off_client=off_client)

    with pytest.raises(EmptyQueryError, match="Missing 'query'"):
        asyncio.run(service.analyze("   "))

    assert off_client.queries == []


def test_predict_scores_analysis_nutrients(off_client: FakeOpenFoodFactsClient) -> None:
    service = MealAnalysisService(off_client=off_client)
    analysis = asyncio.run(service.analyze("dark chocolate"))

    profile = service.predict(analysis.nutrients)

    assert profile.gaba == pytest.approx(0.38)
