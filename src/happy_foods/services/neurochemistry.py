"""Neurotransmitter scoring from per-serving nutrients."""

from collections.abc import Mapping
from dataclasses import dataclass

from happy_foods.domain.nutrition import NeurochemistryProfile
from happy_foods.domain.weights import (
    DEFAULT_TABLES,
    NEUROTRANSMITTERS,
    NORM,
    ModelTables,
)
from happy_foods.services.normalize import as_number, ratio_capped


def score(
    weights: Mapping[str, float],
    nutrients: Mapping[str, object],
    anchors: Mapping[str, float] = NORM,
) -> float:
    """Score one neurotransmitter as a weighted average of capped ratios.

    Each nutrient is divided by its anchor and capped to [0, 1]; the weighted
    sum is divided by the total weight so the result stays in [0, 1] however
    many nutrients contribute. Non-numeric nutrient values count as 0.
    """
    raw = 0.0
    total = 0.0
    for key, weight in weights.items():
        value = as_number(nutrients.get(key)) or 0.0
        raw += weight * ratio_capped(value, anchors.get(key))
        total += weight
    return raw / total if total else 0.0


@dataclass(frozen=True)
class NeurochemistryScorer:
    """Turns a nutrient map into a neurotransmitter profile."""

    tables: ModelTables = DEFAULT_TABLES

    def predict(self, nutrients: Mapping[str, object]) -> NeurochemistryProfile:
        """Score serotonin, dopamine, GABA and acetylcholine independently."""
        return NeurochemistryProfile(
            **{name: self._score(name, nutrients) for name in NEUROTRANSMITTERS}
        )

    def _score(self, name: str, nutrients: Mapping[str, object]) -> float:
        return score(self.tables.weights.get(name, {}), nutrients, self.tables.anchors)


def predict_neurochemistry(nutrients: Mapping[str, object]) -> NeurochemistryProfile:
    """Predict a profile with the default anchor and weight tables."""
    return NeurochemistryScorer().predict(nutrients)
