"""Read-only helpers for walking meal-plan snapshots."""

import re
from collections.abc import Iterator, Mapping
from datetime import date, datetime
from typing import Any

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)

SINGLE_RECIPE_SLOTS = ("breakfast", "lunch", "dinner")
SNACKS_SLOT = "snacks"
MEAL_SLOTS = (*SINGLE_RECIPE_SLOTS, SNACKS_SLOT)

# year-month-day, with or without zero padding, optionally followed by a time
_DATE_KEY_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?!\d)")


def recipe_ingredients(recipe: Any) -> list[Any]:
    """Get a recipe's raw ingredient list, or an empty list when it has none."""
    if recipe is None:
        return []

    if isinstance(recipe, Mapping):
        ingredients = recipe.get("ingredients")
    else:
        ingredients = getattr(recipe, "ingredients", None)

    if not isinstance(ingredients, (list, tuple)):
        return []
    return list(ingredients)


def _slot_recipes(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return [recipe for recipe in value if recipe is not None]
    if value is None:
        return []
    return [value]


def iter_day_recipes(day_meals: Any) -> Iterator[Any]:
    """
    Yield every recipe assigned on one day.

    Slots are visited breakfast, lunch, dinner, snacks, then any other
    slot keys in the order the day stores them. A slot may hold a single
    recipe or a list of recipes.
    """
    if not isinstance(day_meals, Mapping):
        return

    for slot in MEAL_SLOTS:
        yield from _slot_recipes(day_meals.get(slot))

    for slot, value in day_meals.items():
        if slot not in MEAL_SLOTS:
            yield from _slot_recipes(value)


def _parse_date_key(date_key: Any) -> date | None:
    if isinstance(date_key, datetime):
        return date_key.date()
    if isinstance(date_key, date):
        return date_key

    match = _DATE_KEY_RE.match(str(date_key))
    if not match:
        return None
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def _day_sort_key(date_key: Any) -> tuple[int, date, str]:
    day = _parse_date_key(date_key)
    if day is None:
        return (1, date.min, str(date_key))
    return (0, day, str(date_key))


def iter_plan_days(meal_plan: Any) -> Iterator[tuple[str, Any]]:
    """
    Yield (date key, day meals) pairs in calendar order.

    Keys are compared by the date they name, so "2026-1-9" comes before
    "2026-1-10". Keys that are not dates follow in string order.
    """
    if not isinstance(meal_plan, Mapping):
        return

    for date_key in sorted(meal_plan, key=_day_sort_key):
        yield date_key, meal_plan[date_key]


def prune_past_dates(meal_plan: Any, today: date) -> dict[str, Any]:
    """
    Return a copy of the plan without days before ``today``.

    Days whose keys are not year-month-day dates are dropped as well.
    """
    if not isinstance(meal_plan, Mapping):
        return {}

    pruned: dict[str, Any] = {}
    for date_key, day_meals in meal_plan.items():
        day = _parse_date_key(date_key)
        if day is None:
            logger.debug(f"Dropping meal plan day with unreadable date: {date_key!r}")
            continue
        if day >= today:
            pruned[date_key] = day_meals

    return pruned
