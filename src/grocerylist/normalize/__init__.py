"""Normalize raw ingredient data before aggregation."""

from grocerylist.normalize.cleaning import (
    IngredientEntry,
    clean_ingredient,
    clean_ingredients,
)
from grocerylist.normalize.units import (
    ParsedQuantity,
    UnitTag,
    detect_unit,
    parse_amount,
    parse_leading_number,
)

__all__ = [
    "IngredientEntry",
    "ParsedQuantity",
    "UnitTag",
    "clean_ingredient",
    "clean_ingredients",
    "detect_unit",
    "parse_amount",
    "parse_leading_number",
]
