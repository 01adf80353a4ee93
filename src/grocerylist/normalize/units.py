"""Quantity parsing and unit normalization."""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

# =============================================================================
# Unit Tags
# =============================================================================


class UnitTag(str, Enum):
    """Normalized unit tags. Quantities only merge when their tags are equal."""

    # Weight
    GRAM = "g"
    KILOGRAM = "kg"
    OUNCE = "oz"
    POUND = "lb"
    # Volume
    MILLILITER = "ml"
    LITER = "l"
    CUP = "cup"
    TABLESPOON = "tbsp"
    TEASPOON = "tsp"
    FLUID_OUNCE = "fl oz"
    # Count
    PIECE = "piece"
    CAN = "can"
    PACKAGE = "package"
    BUNCH = "bunch"
    CLOVE = "clove"
    HEAD = "head"
    # Special
    TO_TASTE = "to taste"

    @property
    def unit_type(self) -> str:
        """Get the unit type: "weight", "volume", "count" or "special"."""
        return UNIT_TYPES[self]

    def __str__(self) -> str:
        return self.value


UNIT_TYPES: dict[UnitTag, str] = {
    UnitTag.GRAM: "weight",
    UnitTag.KILOGRAM: "weight",
    UnitTag.OUNCE: "weight",
    UnitTag.POUND: "weight",
    UnitTag.MILLILITER: "volume",
    UnitTag.LITER: "volume",
    UnitTag.CUP: "volume",
    UnitTag.TABLESPOON: "volume",
    UnitTag.TEASPOON: "volume",
    UnitTag.FLUID_OUNCE: "volume",
    UnitTag.PIECE: "count",
    UnitTag.CAN: "count",
    UnitTag.PACKAGE: "count",
    UnitTag.BUNCH: "count",
    UnitTag.CLOVE: "count",
    UnitTag.HEAD: "count",
    UnitTag.TO_TASTE: "special",
}


# =============================================================================
# Synonym Tables
# =============================================================================

# Single-token synonyms, matched against whole words only
UNIT_SYNONYMS: dict[str, UnitTag] = {
    # Weight
    "g": UnitTag.GRAM,
    "gr": UnitTag.GRAM,
    "gram": UnitTag.GRAM,
    "grams": UnitTag.GRAM,
    "kg": UnitTag.KILOGRAM,
    "kgs": UnitTag.KILOGRAM,
    "kilogram": UnitTag.KILOGRAM,
    "kilograms": UnitTag.KILOGRAM,
    "oz": UnitTag.OUNCE,
    "ounce": UnitTag.OUNCE,
    "ounces": UnitTag.OUNCE,
    "lb": UnitTag.POUND,
    "lbs": UnitTag.POUND,
    "pound": UnitTag.POUND,
    "pounds": UnitTag.POUND,
    # Volume
    "ml": UnitTag.MILLILITER,
    "milliliter": UnitTag.MILLILITER,
    "milliliters": UnitTag.MILLILITER,
    "millilitre": UnitTag.MILLILITER,
    "millilitres": UnitTag.MILLILITER,
    "l": UnitTag.LITER,
    "liter": UnitTag.LITER,
    "liters": UnitTag.LITER,
    "litre": UnitTag.LITER,
    "litres": UnitTag.LITER,
    "cup": UnitTag.CUP,
    "cups": UnitTag.CUP,
    "tbsp": UnitTag.TABLESPOON,
    "tbsps": UnitTag.TABLESPOON,
    "tbs": UnitTag.TABLESPOON,
    "tablespoon": UnitTag.TABLESPOON,
    "tablespoons": UnitTag.TABLESPOON,
    "tsp": UnitTag.TEASPOON,
    "tsps": UnitTag.TEASPOON,
    "teaspoon": UnitTag.TEASPOON,
    "teaspoons": UnitTag.TEASPOON,
    "floz": UnitTag.FLUID_OUNCE,
    # Count
    "piece": UnitTag.PIECE,
    "pieces": UnitTag.PIECE,
    "pc": UnitTag.PIECE,
    "pcs": UnitTag.PIECE,
    "item": UnitTag.PIECE,
    "items": UnitTag.PIECE,
    "large": UnitTag.PIECE,
    "medium": UnitTag.PIECE,
    "small": UnitTag.PIECE,
    "can": UnitTag.CAN,
    "cans": UnitTag.CAN,
    "tin": UnitTag.CAN,
    "tins": UnitTag.CAN,
    "package": UnitTag.PACKAGE,
    "packages": UnitTag.PACKAGE,
    "pkg": UnitTag.PACKAGE,
    "pack": UnitTag.PACKAGE,
    "packs": UnitTag.PACKAGE,
    "bunch": UnitTag.BUNCH,
    "bunches": UnitTag.BUNCH,
    "clove": UnitTag.CLOVE,
    "cloves": UnitTag.CLOVE,
    "head": UnitTag.HEAD,
    "heads": UnitTag.HEAD,
}

# Two-token synonyms, checked before single tokens at each position
UNIT_PHRASE_SYNONYMS: dict[tuple[str, str], UnitTag] = {
    ("fl", "oz"): UnitTag.FLUID_OUNCE,
    ("fl", "ounce"): UnitTag.FLUID_OUNCE,
    ("fl", "ounces"): UnitTag.FLUID_OUNCE,
    ("fluid", "ounce"): UnitTag.FLUID_OUNCE,
    ("fluid", "ounces"): UnitTag.FLUID_OUNCE,
}

TO_TASTE_PHRASES = ("to taste", "as needed")

DEFAULT_AMOUNT = "1 piece"

_NUMBER_RE = re.compile(r"^(\d+(?:\.\d+)?)(?:\s*/\s*(\d+(?:\.\d+)?))?")
_TOKEN_RE = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class ParsedQuantity:
    """A quantity parsed from a free-text amount string."""

    value: float
    unit: UnitTag
    original: str

    @property
    def is_to_taste(self) -> bool:
        return self.unit is UnitTag.TO_TASTE


# =============================================================================
# Parsing Functions
# =============================================================================


def parse_leading_number(text: str) -> tuple[float | None, str]:
    """
    Split a leading number off the front of ``text``.

    Handles formats like:
    - "2"
    - "1.5"
    - "1/2"

    Returns:
        Tuple of (value or None when there is no usable number, remaining text)
    """
    match = _NUMBER_RE.match(text)
    if not match:
        return None, text

    rest = text[match.end() :]
    value = float(match.group(1))
    if match.group(2) is not None:
        denominator = float(match.group(2))
        if denominator == 0:
            return None, rest
        value /= denominator

    if not math.isfinite(value):
        return None, rest
    return value, rest


def detect_unit(text: str) -> UnitTag:
    """
    Find the first known unit word in ``text``.

    Matching is done on whole alphabetic tokens, so "tbsp" never matches
    inside a longer word. Falls back to ``UnitTag.PIECE``.
    """
    tokens = _TOKEN_RE.findall(text.lower())

    for index, token in enumerate(tokens):
        if index + 1 < len(tokens):
            phrase = UNIT_PHRASE_SYNONYMS.get((token, tokens[index + 1]))
            if phrase is not None:
                return phrase

        unit = UNIT_SYNONYMS.get(token)
        if unit is not None:
            return unit

    return UnitTag.PIECE


def parse_amount(amount: Any) -> ParsedQuantity:
    """
    Parse a human-readable amount like "2 cups" or "1/2 tsp".

    Never raises. Blank or non-string input becomes ``1 piece``; amounts
    mentioning "to taste" or "as needed" become a zero-valued to-taste
    quantity whatever number precedes them.
    """
    if not isinstance(amount, str) or not amount.strip():
        return ParsedQuantity(value=1.0, unit=UnitTag.PIECE, original=DEFAULT_AMOUNT)

    text = amount.strip().lower()

    if any(phrase in text for phrase in TO_TASTE_PHRASES):
        return ParsedQuantity(value=0.0, unit=UnitTag.TO_TASTE, original=amount)

    value, rest = parse_leading_number(text)
    if value is None:
        value = 1.0

    return ParsedQuantity(value=value, unit=detect_unit(rest), original=amount)
