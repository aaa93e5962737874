"""Per-serving nutrient extraction from Open Food Facts records."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from happy_foods.domain.nutrition import NutrientProfile, ProductRecord
from happy_foods.services.normalize import as_number
from happy_foods.services.serving import estimate_serving_grams

_logger = logging.getLogger(__name__)

# OFF spells the same nutrient with or without the "_100g" suffix depending on
# the product. Candidates are tried in order; every value is per 100 g.
_PER_100G_SOURCES: Mapping[str, tuple[str, ...]] = {
    "calories": ("energy-kcal_100g", "energy-kcal"),
    "protein_g": ("proteins_100g", "proteins"),
    "fat_g": ("fat_100g", "fat"),
    "carbs_g": ("carbohydrates_100g", "carbohydrates"),
    "magnesium_mg": ("magnesium_100g", "magnesium"),
    "vitaminC_mg": ("vitamin-c_100g", "vitamin-c"),
    "vitaminB6_mg": ("vitamin-b6_100g", "vitamin-b6"),
    "choline_mg": ("choline_100g", "choline"),
    "caffeine_mg": ("caffeine_100g", "caffeine"),
}

_OMEGA3_SOURCES: tuple[tuple[str, ...], ...] = (
    ("ala_100g", "ala"),
    ("epa_100g", "epa"),
    ("dha_100g", "dha"),
)

# Amino acids reported as per-serving milligrams.
_REPORTED_AMINO_KEYS = ("tryptophan_mg", "tyrosine_mg")


@dataclass(frozen=True)
class ExtractionHeuristics:
    """Estimates for nutrients OFF rarely or never reports."""

    theanine_keywords: tuple[str, ...] = ("matcha", "green tea")
    theanine_estimate_mg: float = 25.0
    tryptophan_mg_per_protein_g: float = 12.0
    tyrosine_mg_per_protein_g: float = 40.0


DEFAULT_HEURISTICS = ExtractionHeuristics()


@dataclass(frozen=True)
class NutrientExtractor:
    """Scales OFF per-100g values to one serving and fills known gaps."""

    heuristics: ExtractionHeuristics = DEFAULT_HEURISTICS

    def extract(self, record: ProductRecord) -> NutrientProfile:
        """Return the per-serving nutrient profile for a product record."""
        nutriments = record.get("nutriments")
        if not isinstance(nutriments, Mapping):
            nutriments = {}

        serving_g = estimate_serving_grams(record)
        scale = serving_g / 100

        values = {
            field: (lookup_nutrient(nutriments, candidates) or 0.0) * scale
            for field, candidates in _PER_100G_SOURCES.items()
        }
        omega3_g = sum(
            value
            for value in (
                lookup_nutrient(nutriments, candidates)
                for candidates in _OMEGA3_SOURCES
            )
            if value is not None
        )
        values["omega3_mg"] = omega3_g * scale * 1000
        values["theanine_mg"] = self.infer_theanine(record.get("product_name"))
        values.update(self.amino_acids(values["protein_g"], nutriments))

        profile = NutrientProfile(
            **{
                key: max(0.0, value) if math.isfinite(value) else 0.0
                for key, value in values.items()
            }
        )
        _logger.debug(
            "Extracted nutrients: product=%s serving_g=%s",
            record.get("product_name"),
            serving_g,
        )
        return profile

    def infer_theanine(self, product_name: object) -> float:
        """Estimate theanine from the product name; OFF does not list it."""
        name = product_name.lower() if isinstance(product_name, str) else ""
        if any(keyword in name for keyword in self.heuristics.theanine_keywords):
            return self.heuristics.theanine_estimate_mg
        return 0.0

    def amino_acids(
        self, protein_g: float, nutriments: Mapping[str, object]
    ) -> dict[str, float]:
        """Return tryptophan and tyrosine, preferring reported values.

        A reported amount wins even when it is 0; the protein-based proxy only
        applies when the key is absent or not numeric.
        """
        proxies = {
            "tryptophan_mg": self.heuristics.tryptophan_mg_per_protein_g,
            "tyrosine_mg": self.heuristics.tyrosine_mg_per_protein_g,
        }
        result: dict[str, float] = {}
        for key in _REPORTED_AMINO_KEYS:
            reported = as_number(nutriments.get(key))
            if reported is not None:
                result[key] = reported
            elif protein_g > 0:
                result[key] = protein_g * proxies[key]
            else:
                result[key] = 0.0
        return result


def lookup_nutrient(
    nutriments: Mapping[str, object], candidates: tuple[str, ...]
) -> float | None:
    """Return the first numeric value among candidate key spellings."""
    for key in candidates:
        value = as_number(nutriments.get(key))
        if value is not None:
            return value
    return None


def extract_nutrients_per_serving(record: ProductRecord) -> NutrientProfile:
    """Extract per-serving nutrients using the default heuristics."""
    return NutrientExtractor().extract(record)
