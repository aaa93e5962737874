"""Serving size estimation for Open Food Facts products.

OFF stores most nutrients per 100 g (or 100 ml). A product may expose a
numeric ``serving_quantity`` or a free-text ``serving_size`` such as
``"240 ml"``; when neither is usable, beverages default to 240 (about 8 fl oz)
and everything else to 100, the database's own reporting basis.
"""

import re

from happy_foods.domain.nutrition import ProductRecord
from happy_foods.services.normalize import as_number

BEVERAGE_KEYWORDS = ("drink", "beverage", "tea", "coffee", "latte", "milk", "juice")
BEVERAGE_SERVING_G = 240.0
DEFAULT_SERVING_G = 100.0

_NUMBER_TOKEN = re.compile(r"[\d.]+")


def estimate_serving_grams(record: ProductRecord) -> float:
    """Return the assumed serving size in grams (or ml) for a product."""
    quantity = _positive_number(record.get("serving_quantity"))
    if quantity is not None:
        return quantity

    serving_size = record.get("serving_size")
    if isinstance(serving_size, str):
        parsed = _parse_leading_number(serving_size)
        if parsed is not None:
            return parsed

    return BEVERAGE_SERVING_G if is_beverage(record) else DEFAULT_SERVING_G


def is_beverage(record: ProductRecord) -> bool:
    """Return true when the product name or categories look like a drink."""
    text = f"{_text(record.get('product_name'))} {_text(record.get('categories'))}"
    lowered = text.lower()
    return any(keyword in lowered for keyword in BEVERAGE_KEYWORDS)


def _positive_number(value: object) -> float | None:
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    number = as_number(value)
    if number is None or number <= 0:
        return None
    return number


def _parse_leading_number(text: str) -> float | None:
    match = _NUMBER_TOKEN.search(text)
    if match is None:
        return None
    return _positive_number(match.group(0))


def _text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list | tuple):
        return " ".join(item for item in value if isinstance(item, str))
    return ""
