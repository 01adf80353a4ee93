"""Validation and cleanup of raw ingredient entries."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import DEFAULT_AMOUNT

logger = get_logger(__name__)

# Names produced by upstream serialization bugs rather than real ingredients
CORRUPT_NAMES = frozenset({"undefined", "null"})


@dataclass(frozen=True)
class IngredientEntry:
    """An ingredient line as supplied by a recipe."""

    name: str
    amount: str


def _get_field(entry: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute-style object."""
    if isinstance(entry, Mapping):
        return entry.get(key)
    return getattr(entry, key, None)


def clean_ingredient(entry: Any) -> IngredientEntry | None:
    """
    Validate and tidy a raw ingredient entry.

    Returns None when the entry cannot be used:
    - the entry itself is missing
    - ``name`` is missing, not a string, or blank after trimming
    - the trimmed name is "undefined" or "null"

    Otherwise returns a new entry with the name trimmed and the amount
    trimmed, or defaulted to "1 piece" when it is not a string.
    """
    if entry is None:
        return None

    name = _get_field(entry, "name")
    if not isinstance(name, str):
        logger.debug(f"Dropping ingredient without a usable name: {entry!r}")
        return None

    name = name.strip()
    if not name or name.lower() in CORRUPT_NAMES:
        logger.debug(f"Dropping ingredient with empty or corrupt name: {entry!r}")
        return None

    amount = _get_field(entry, "amount")
    if isinstance(amount, str):
        amount = amount.strip()
    else:
        amount = DEFAULT_AMOUNT

    return IngredientEntry(name=name, amount=amount)


def clean_ingredients(entries: Any) -> list[IngredientEntry]:
    """Clean a list of raw entries, dropping the unusable ones."""
    if not isinstance(entries, (list, tuple)):
        return []

    cleaned = []
    for entry in entries:
        result = clean_ingredient(entry)
        if result is not None:
            cleaned.append(result)
    return cleaned
