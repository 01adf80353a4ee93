"""Shopping list aggregation for planned meals."""

from grocerylist.normalize import (
    IngredientEntry,
    ParsedQuantity,
    UnitTag,
    clean_ingredient,
    parse_amount,
)
from grocerylist.plan import ShoppingListItem, build_shopping_list, combine_ingredients

__version__ = "0.1.0"

__all__ = [
    "IngredientEntry",
    "ParsedQuantity",
    "ShoppingListItem",
    "UnitTag",
    "build_shopping_list",
    "clean_ingredient",
    "combine_ingredients",
    "parse_amount",
]
