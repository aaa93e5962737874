"""Tests for ratio helpers."""

import math

from happy_foods.services.normalize import as_number, clamp01, ratio_capped


def test_clamp01_bounds() -> None:
    assert clamp01(-0.5) == 0
    assert clamp01(0.25) == 0.25
    assert clamp01(3) == 1


def test_ratio_capped_divides_by_anchor() -> None:
    assert ratio_capped(120, 400) == 0.3


def test_ratio_capped_saturates_at_anchor() -> None:
    assert ratio_capped(400, 400) == 1
    assert ratio_capped(5000, 400) == 1


def test_ratio_capped_clamps_negative_values() -> None:
    assert ratio_capped(-10, 400) == 0


def test_ratio_capped_returns_zero_for_invalid_anchor() -> None:
    assert ratio_capped(50, None) == 0
    assert ratio_capped(50, 0) == 0
    assert ratio_capped(50, -3) == 0
    assert ratio_capped(50, math.nan) == 0


def test_ratio_capped_stays_in_unit_interval_for_non_finite_values() -> None:
    assert ratio_capped(math.nan, 10) == 0
    assert ratio_capped(math.inf, 10) == 1
    assert ratio_capped(-math.inf, 10) == 0


def test_as_number_rejects_non_numeric_values() -> None:
    assert as_number(3) == 3.0
    assert as_number(2.5) == 2.5
    assert as_number("7.8") is None
    assert as_number(None) is None
    assert as_number(True) is None
    assert as_number(math.nan) is None
    assert as_number(math.inf) is None
