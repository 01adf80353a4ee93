"""Shopping list generation from meal plans."""

from dataclasses import dataclass, field
from typing import Any

from grocerylist.config import get_settings
from grocerylist.logging_config import get_logger
from grocerylist.normalize.cleaning import IngredientEntry, clean_ingredients
from grocerylist.plan.aggregate import ShoppingListItem, combine_ingredients
from grocerylist.plan.meal_plan import iter_day_recipes, iter_plan_days, recipe_ingredients

logger = get_logger(__name__)


def collect_ingredients(meal_plan: Any) -> list[IngredientEntry]:
    """
    Collect the cleaned ingredients of every recipe in the plan.

    Each recipe's list is cleaned before it is accumulated, so one bad
    entry only drops itself.
    """
    collected: list[IngredientEntry] = []

    for date_key, day_meals in iter_plan_days(meal_plan):
        for recipe in iter_day_recipes(day_meals):
            raw = recipe_ingredients(recipe)
            cleaned = clean_ingredients(raw)
            if len(cleaned) < len(raw):
                logger.debug(
                    f"Dropped {len(raw) - len(cleaned)} invalid ingredients on {date_key}"
                )
            collected.extend(cleaned)

    return collected


def build_shopping_list(meal_plan: Any) -> list[ShoppingListItem]:
    """
    Build the consolidated shopping list for a meal-plan snapshot.

    Args:
        meal_plan: Mapping of date key to the day's meal slots. Only read.

    Returns:
        One ShoppingListItem per distinct ingredient, in first-seen order.
    """
    return combine_ingredients(collect_ingredients(meal_plan))


@dataclass
class ShoppingList:
    """Shopping list for a meal plan plus any items the user added by hand."""

    meal_items: list[ShoppingListItem] = field(default_factory=list)
    custom_items: list[ShoppingListItem] = field(default_factory=list)

    @property
    def items(self) -> list[ShoppingListItem]:
        """Meal items followed by custom items."""
        return [*self.meal_items, *self.custom_items]

    @property
    def total_count(self) -> int:
        return len(self.meal_items) + len(self.custom_items)

    def add_custom_item(self, name: str, amount: str | None = None) -> ShoppingListItem | None:
        """
        Append a hand-added item. Custom items are never merged.

        Returns the added item, or None when the name is blank.
        """
        if not isinstance(name, str) or not name.strip():
            return None

        item = ShoppingListItem(
            name=name.strip(),
            amount=amount or get_settings().custom_item_amount,
        )
        self.custom_items.append(item)
        return item

    def to_text(self, bullet: str | None = None) -> str:
        """Render the list as plain text, one "• name - amount" line per item."""
        if bullet is None:
            bullet = get_settings().export_bullet
        return "\n".join(f"{bullet} {item.name} - {item.amount}" for item in self.items)


class ShoppingListGenerator:
    """
    Generates shopping lists from meal plans with:
    - Ingredient cleanup (invalid entries are dropped)
    - Quantity aggregation for identical units
    - Side-by-side amounts when units differ
    """

    def generate(
        self,
        meal_plan: Any,
        custom_items: list[str] | None = None,
    ) -> ShoppingList:
        """
        Generate a shopping list from a meal-plan snapshot.

        Args:
            meal_plan: Mapping of date key to the day's meal slots.
            custom_items: Names of items the user added by hand.

        Returns:
            ShoppingList with aggregated meal items and the custom items.
        """
        shopping_list = ShoppingList(meal_items=build_shopping_list(meal_plan))

        for name in custom_items or []:
            shopping_list.add_custom_item(name)

        logger.info(
            f"Generated shopping list: {len(shopping_list.meal_items)} meal items, "
            f"{len(shopping_list.custom_items)} custom items"
        )

        return shopping_list
