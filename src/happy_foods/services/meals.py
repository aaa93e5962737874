"""Meal analysis service integrating Open Food Facts."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from happy_foods.adapters.off_client import OpenFoodFactsClient
from happy_foods.domain.errors import EmptyQueryError, ProductNotFoundError
from happy_foods.domain.nutrition import (
    MealAnalysis,
    NeurochemistryProfile,
    ProductRecord,
)
from happy_foods.services.extraction import NutrientExtractor
from happy_foods.services.neurochemistry import NeurochemistryScorer
from happy_foods.services.serving import estimate_serving_grams

_logger = logging.getLogger(__name__)


@dataclass
class MealAnalysisService:
    """Resolves a food query and computes its mood-relevant nutrients."""

    off_client: OpenFoodFactsClient
    extractor: NutrientExtractor = field(default_factory=NutrientExtractor)
    scorer: NeurochemistryScorer = field(default_factory=NeurochemistryScorer)
    page_size: int = 1
    debug: bool = False

    async def analyze(self, query: str) -> MealAnalysis:
        """Look up the best matching product and return per-serving nutrients."""
        cleaned = query.strip()
        if not cleaned:
            raise EmptyQueryError()
        product = await self.search_top_product(cleaned)
        analysis = MealAnalysis(
            product_name=_optional_text(product.get("product_name")) or cleaned,
            brand=_optional_text(product.get("brands")),
            serving_estimate_g=estimate_serving_grams(product),
            nutrients=self.extractor.extract(product),
        )
        if self.debug:
            _logger.info(
                "Meal analysis OFF: query=%s product=%s serving_g=%s",
                cleaned,
                analysis.product_name,
                analysis.serving_estimate_g,
            )
        return analysis

    async def search_top_product(self, query: str) -> ProductRecord:
        """Return the first OFF product for a query."""
        payload = await self.off_client.search_products(
            query, page_size=self.page_size
        )
        products = payload.get("products") if isinstance(payload, Mapping) else None
        if not isinstance(products, list) or not products:
            _logger.warning("No OFF product found: query=%s", query)
            raise ProductNotFoundError(query)
        product = products[0]
        if not isinstance(product, Mapping):
            raise ProductNotFoundError(query)
        return product

    def predict(self, nutrients: Mapping[str, object]) -> NeurochemistryProfile:
        """Score a nutrient map into a neurotransmitter profile."""
        return self.scorer.predict(nutrients)


def _optional_text(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None
