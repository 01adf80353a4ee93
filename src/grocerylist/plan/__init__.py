"""Shopping list planning and aggregation."""

from grocerylist.plan.aggregate import (
    AggregatedIngredient,
    ShoppingListItem,
    combine_ingredients,
    group_ingredients,
)
from grocerylist.plan.meal_plan import (
    MEAL_SLOTS,
    iter_day_recipes,
    prune_past_dates,
    recipe_ingredients,
)
from grocerylist.plan.shopping_list import (
    ShoppingList,
    ShoppingListGenerator,
    build_shopping_list,
    collect_ingredients,
)

__all__ = [
    "MEAL_SLOTS",
    "AggregatedIngredient",
    "ShoppingList",
    "ShoppingListGenerator",
    "ShoppingListItem",
    "build_shopping_list",
    "collect_ingredients",
    "combine_ingredients",
    "group_ingredients",
    "iter_day_recipes",
    "prune_past_dates",
    "recipe_ingredients",
]
