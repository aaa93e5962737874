"""Nutrition domain models."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields

ProductRecord = Mapping[str, object]
"""One Open Food Facts product as returned by the search API."""


class _FieldMapping(Mapping[str, float]):
    """Read-only mapping view over the dataclass fields."""

    def __getitem__(self, key: str) -> float:
        if key not in self._field_names():
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._field_names())

    def __len__(self) -> int:
        return len(self._field_names())

    def _field_names(self) -> tuple[str, ...]:
        return tuple(item.name for item in fields(self))  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, float]:
        """Return a plain dict suitable for JSON output."""
        return dict(self.items())


@dataclass(frozen=True, eq=True)
class NutrientProfile(_FieldMapping):
    """Per-serving nutrient amounts; every key is always present."""

    tryptophan_mg: float = 0.0
    tyrosine_mg: float = 0.0
    magnesium_mg: float = 0.0
    omega3_mg: float = 0.0
    protein_g: float = 0.0
    vitaminB6_mg: float = 0.0  # noqa: N815
    vitaminC_mg: float = 0.0  # noqa: N815
    choline_mg: float = 0.0
    theanine_mg: float = 0.0
    calories: float = 0.0
    fat_g: float = 0.0
    carbs_g: float = 0.0
    caffeine_mg: float = 0.0


@dataclass(frozen=True, eq=True)
class NeurochemistryProfile(_FieldMapping):
    """Relative neurotransmitter support, each score in [0, 1]."""

    serotonin: float
    dopamine: float
    gaba: float
    acetylcholine: float


@dataclass(frozen=True)
class MealAnalysis:
    """Resolved product with its per-serving nutrients."""

    product_name: str
    brand: str | None
    serving_estimate_g: float
    nutrients: NutrientProfile

    def as_dict(self) -> dict[str, object]:
        """Return a plain dict suitable for JSON output."""
        payload: dict[str, object] = {
            "product_name": self.product_name,
            "serving_estimate_g": self.serving_estimate_g,
            "nutrients": self.nutrients.as_dict(),
        }
        if self.brand:
            payload["brand"] = self.brand
        return payload
