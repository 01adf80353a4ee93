"""Combine ingredient entries into a consolidated shopping list."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from grocerylist.logging_config import get_logger
from grocerylist.normalize.cleaning import clean_ingredient
from grocerylist.normalize.units import DEFAULT_AMOUNT, ParsedQuantity, UnitTag, parse_amount

logger = get_logger(__name__)

# Display units that read as plural nouns ("3 cups", "2 cans")
PLURAL_UNITS: dict[UnitTag, str] = {
    UnitTag.CUP: "cups",
    UnitTag.CAN: "cans",
    UnitTag.PACKAGE: "packages",
    UnitTag.BUNCH: "bunches",
    UnitTag.CLOVE: "cloves",
    UnitTag.HEAD: "heads",
}

AMOUNT_SEPARATOR = " + "


@dataclass(frozen=True)
class ShoppingListItem:
    """A single rendered line of the shopping list."""

    name: str
    amount: str


@dataclass
class AggregatedIngredient:
    """All parsed amounts collected for one ingredient name."""

    name: str
    amounts: list[ParsedQuantity] = field(default_factory=list)
    total_value: float = 0.0
    primary_unit: UnitTag | None = None
    has_incompatible_units: bool = False

    def add(self, quantity: ParsedQuantity) -> None:
        """
        Add a parsed amount to the group.

        The primary unit is taken from the first amount that is not
        "to taste". To-taste amounts are always compatible but never summed.
        Once a mismatching unit is seen the group stays incompatible.
        """
        self.amounts.append(quantity)

        if quantity.is_to_taste:
            return

        if self.primary_unit is None:
            self.primary_unit = quantity.unit

        if quantity.unit == self.primary_unit:
            self.total_value += quantity.value
        elif not self.has_incompatible_units:
            logger.debug(
                f"Incompatible units for {self.name!r}: "
                f"{self.primary_unit.value} vs {quantity.unit.value}"
            )
            self.has_incompatible_units = True

    @property
    def has_to_taste(self) -> bool:
        return any(quantity.is_to_taste for quantity in self.amounts)

    def display_amount(self) -> str:
        """Get the human-readable amount for this ingredient."""
        if self.has_incompatible_units or len(self.amounts) == 1:
            return AMOUNT_SEPARATOR.join(quantity.original for quantity in self.amounts)

        combined = ""
        if self.total_value > 0 and self.primary_unit is not None:
            combined = format_quantity(self.total_value, self.primary_unit)

        if self.has_to_taste:
            combined = f"{combined} + to taste" if combined else "to taste"

        return combined or DEFAULT_AMOUNT

    def to_item(self) -> ShoppingListItem:
        return ShoppingListItem(name=self.name, amount=self.display_amount())


def format_number(value: float) -> str:
    """
    Format a total without a trailing ".0" and with at most two decimals.

    Positive totals too small to survive two decimals keep their first
    significant digits instead of printing as "0".
    """
    if not math.isfinite(value):
        return str(value)
    if value == int(value):
        return str(int(value))

    decimals = 2
    if 0 < abs(value) < 0.005:
        decimals = 1 - math.floor(math.log10(abs(value)))
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def format_quantity(value: float, unit: UnitTag) -> str:
    """
    Render a summed quantity.

    Examples:
        (3, cup) -> "3 cups"
        (100, g) -> "100 g"
        (4, piece) -> "4"
    """
    number = format_number(value)
    if unit is UnitTag.PIECE:
        return number
    if value != 1 and unit in PLURAL_UNITS:
        return f"{number} {PLURAL_UNITS[unit]}"
    return f"{number} {unit.value}"


def merge_key(name: str) -> str:
    """Key used to decide whether two ingredient names are the same item."""
    return name.lower().strip()


def group_ingredients(entries: Iterable[Any]) -> dict[str, AggregatedIngredient]:
    """
    Clean, parse and group ingredient entries by name.

    Returns:
        Dict mapping merge keys to AggregatedIngredient, in first-seen order.
    """
    grouped: dict[str, AggregatedIngredient] = {}

    for entry in entries:
        cleaned = clean_ingredient(entry)
        if cleaned is None:
            continue

        key = merge_key(cleaned.name)
        if key not in grouped:
            grouped[key] = AggregatedIngredient(name=cleaned.name)
        grouped[key].add(parse_amount(cleaned.amount))

    return grouped


def combine_ingredients(entries: Iterable[Any] | None) -> list[ShoppingListItem]:
    """
    Combine ingredient entries into one line per distinct ingredient.

    Amounts with the same unit are summed; amounts with different units are
    shown side by side ("100g + 2 tbsp"). Invalid entries are dropped, and
    the output keeps the order in which each ingredient was first seen.
    """
    if entries is None or isinstance(entries, (str, bytes, Mapping)):
        return []
    if not isinstance(entries, Iterable):
        return []

    return [aggregated.to_item() for aggregated in group_ingredients(entries).values()]
