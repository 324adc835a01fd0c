"""Pluralization of display units."""

from mealprep.normalize.units import DEFAULT_REGISTRY, UnitClass, UnitRegistry

# Metric units are written the same for any amount
NEVER_PLURAL: frozenset[str] = frozenset({"ml", "g"})

IRREGULAR_PLURALS: dict[str, str] = {
    "whole": "whole",
    "clove": "cloves",
    "stalk": "stalks",
    "package": "packages",
    "slice": "slices",
    "slices": "slices",
    "bunch": "bunches",
    "fillet": "fillets",
    "filet": "filets",
    "pinch": "pinches",
}

# Tolerance for treating a converted amount as exactly one
SINGULAR_EPSILON = 0.01


def is_singular(amount: float) -> bool:
    """Check whether an amount reads as one, allowing for conversion rounding."""
    return abs(amount - 1) <= SINGULAR_EPSILON


def pluralize(unit: str | None, amount: float, registry: UnitRegistry = DEFAULT_REGISTRY) -> str:
    """
    Inflect a display unit for the given amount.

    Count units entered in plural form ("cloves") are reduced to their
    singular name first, so they are never pluralized twice.

    Examples:
        pluralize("clove", 1) -> "clove"
        pluralize("clove", 3) -> "cloves"
        pluralize("cloves", 1) -> "clove"
        pluralize("pinch", 2) -> "pinches"
        pluralize("ml", 250) -> "ml"
        pluralize("cup", 2) -> "cups"
    """
    if not unit:
        return ""

    normalized = unit.lower()
    if normalized in NEVER_PLURAL:
        return unit

    if registry.classify(unit) is UnitClass.COUNT:
        canonical = registry.canonical(unit)
        if canonical != normalized:
            unit = normalized = canonical

    if is_singular(amount):
        return unit

    return IRREGULAR_PLURALS.get(normalized, unit + "s")
