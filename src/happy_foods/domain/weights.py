"""Reference anchors and neurotransmitter weights for mood scoring."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

NEUROTRANSMITTERS = ("serotonin", "dopamine", "gaba", "acetylcholine")

# Meal-scale anchors so per-serving values land in roughly 0..1 once divided.
NORM: Mapping[str, float] = MappingProxyType(
    {
        "tryptophan_mg": 400,
        "tyrosine_mg": 1500,
        "magnesium_mg": 300,
        "omega3_mg": 1000,
        "protein_g": 40,
        "vitaminB6_mg": 1.3,
        "vitaminC_mg": 90,
        "choline_mg": 425,
        "theanine_mg": 50,
    }
)

W: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "serotonin": MappingProxyType(
            {
                "tryptophan_mg": 0.8,
                "vitaminB6_mg": 0.3,
                "omega3_mg": 0.2,
                "magnesium_mg": 0.2,
                "vitaminC_mg": 0.1,
            }
        ),
        "dopamine": MappingProxyType(
            {
                "tyrosine_mg": 0.8,
                "protein_g": 0.3,
                "vitaminB6_mg": 0.2,
                "magnesium_mg": 0.1,
            }
        ),
        "gaba": MappingProxyType({"magnesium_mg": 0.6, "theanine_mg": 0.6}),
        "acetylcholine": MappingProxyType({"choline_mg": 1.0}),
    }
)


@dataclass(frozen=True)
class ModelTables:
    """Immutable anchor and weight tables used by the scorer.

    Anchors map a nutrient key to a typical per-meal amount. Weights map each
    neurotransmitter to the nutrients that influence it. Invalid tables are a
    programming error and raise ``ValueError`` on construction.
    """

    anchors: Mapping[str, float]
    weights: Mapping[str, Mapping[str, float]]

    def __post_init__(self) -> None:
        for key, anchor in self.anchors.items():
            if not (_is_finite_number(anchor) and anchor > 0):
                raise ValueError(f"Anchor for {key!r} must be positive, got {anchor!r}")
        for name, entry in self.weights.items():
            for key, weight in entry.items():
                if not (_is_finite_number(weight) and weight >= 0):
                    raise ValueError(
                        f"Weight {name}.{key} must be non-negative, got {weight!r}"
                    )
                if key not in self.anchors:
                    raise ValueError(f"Weight {name}.{key} has no matching anchor")
        object.__setattr__(self, "anchors", MappingProxyType(dict(self.anchors)))
        object.__setattr__(
            self,
            "weights",
            MappingProxyType(
                {
                    name: MappingProxyType(dict(entry))
                    for name, entry in self.weights.items()
                }
            ),
        )


def _is_finite_number(value: object) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


DEFAULT_TABLES = ModelTables(anchors=NORM, weights=W)
