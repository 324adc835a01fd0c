"""Unit registry: conversion tables and unit classification."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

# =============================================================================
# Unit Conversion Tables
# =============================================================================

TBSP_TO_ML = 14.7868
OZ_TO_G = 28.3495

VOLUME_BASE_UNIT = "tbsp"
WEIGHT_BASE_UNIT = "oz"

# Volume conversions (base unit: tbsp)
VOLUME_TO_TBSP: Mapping[str, float] = MappingProxyType(
    {
        # US customary
        "tsp": 1 / 3,
        "tbsp": 1.0,
        "fl oz": 2.0,
        "cup": 16.0,
        "pint": 32.0,
        "quart": 64.0,
        "gallon": 256.0,
        # Metric
        "ml": 1 / TBSP_TO_ML,
        "l": 1000 / TBSP_TO_ML,
    }
)

# Weight conversions (base unit: oz)
WEIGHT_TO_OZ: Mapping[str, float] = MappingProxyType(
    {
        # US customary
        "oz": 1.0,
        "lb": 16.0,
        # Metric
        "g": 1 / OZ_TO_G,
        "kg": 1000 / OZ_TO_G,
    }
)

# Count-based units (never converted)
COUNT_UNITS: frozenset[str] = frozenset(
    {"whole", "clove", "stalk", "package", "slice", "bunch", "fillet", "pinch"}
)

# Spelled-out and plural spellings mapped to the table keys above
UNIT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "teaspoon": "tsp",
        "teaspoons": "tsp",
        "tablespoon": "tbsp",
        "tablespoons": "tbsp",
        "tbs": "tbsp",
        "fluid ounce": "fl oz",
        "fluid ounces": "fl oz",
        "cups": "cup",
        "pints": "pint",
        "pt": "pint",
        "quarts": "quart",
        "qt": "quart",
        "gallons": "gallon",
        "gal": "gallon",
        "milliliter": "ml",
        "milliliters": "ml",
        "millilitre": "ml",
        "millilitres": "ml",
        "liter": "l",
        "liters": "l",
        "litre": "l",
        "litres": "l",
        "ounce": "oz",
        "ounces": "oz",
        "pound": "lb",
        "pounds": "lb",
        "lbs": "lb",
        "gram": "g",
        "grams": "g",
        "kilogram": "kg",
        "kilograms": "kg",
        "cloves": "clove",
        "stalks": "stalk",
        "packages": "package",
        "slices": "slice",
        "bunches": "bunch",
        "fillets": "fillet",
        "pinches": "pinch",
    }
)


class UnitClass(str, Enum):
    """Measurement class a unit belongs to."""

    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UnitRegistry:
    """Immutable set of conversion tables shared by converters and the aggregator."""

    volume_factors: Mapping[str, float] = field(default_factory=lambda: VOLUME_TO_TBSP)
    weight_factors: Mapping[str, float] = field(default_factory=lambda: WEIGHT_TO_OZ)
    count_units: frozenset[str] = field(default=COUNT_UNITS)
    aliases: Mapping[str, str] = field(default_factory=lambda: UNIT_ALIASES)

    def canonical(self, unit: str | None) -> str:
        """Lower-case, trim and resolve aliases for a unit name."""
        if not unit:
            return ""
        unit_lower = " ".join(unit.lower().split())
        return self.aliases.get(unit_lower, unit_lower)

    def classify(self, unit: str | None) -> UnitClass:
        """
        Classify a unit as volume, weight, count or unknown.

        Lookup is case-insensitive. Units found in no table are UNKNOWN and
        are passed through unconverted by every caller.
        """
        canonical = self.canonical(unit)
        if canonical in self.volume_factors:
            return UnitClass.VOLUME
        if canonical in self.weight_factors:
            return UnitClass.WEIGHT
        if canonical in self.count_units:
            return UnitClass.COUNT
        return UnitClass.UNKNOWN

    def factor(self, unit: str | None, unit_class: UnitClass) -> float | None:
        """Get the base-unit factor for a unit within the given class table."""
        canonical = self.canonical(unit)
        if unit_class is UnitClass.VOLUME:
            return self.volume_factors.get(canonical)
        if unit_class is UnitClass.WEIGHT:
            return self.weight_factors.get(canonical)
        return None


DEFAULT_REGISTRY = UnitRegistry()


def classify(unit: str | None, registry: UnitRegistry = DEFAULT_REGISTRY) -> UnitClass:
    """Classify a unit against the given registry (default tables if omitted)."""
    return registry.classify(unit)


def base_unit(unit_class: UnitClass) -> str | None:
    """Get the canonical base unit for a convertible class."""
    if unit_class is UnitClass.VOLUME:
        return VOLUME_BASE_UNIT
    if unit_class is UnitClass.WEIGHT:
        return WEIGHT_BASE_UNIT
    return None
