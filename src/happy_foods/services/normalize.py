"""Numeric helpers for turning nutrient amounts into bounded signals."""

import math


def clamp01(value: float) -> float:
    """Keep a number between 0 and 1."""
    return max(0.0, min(1.0, value))


def as_number(value: object) -> float | None:
    """Return ``value`` as a finite float, or None when it is not a real number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def ratio_capped(value: float, anchor: float | None) -> float:
    """Return ``value`` relative to a typical ``anchor`` amount, capped to [0, 1].

    A missing, zero or negative anchor yields 0.
    """
    if anchor is None or math.isnan(anchor) or anchor <= 0:
        return 0.0
    if math.isnan(value):
        return 0.0
    return clamp01(value / anchor)
