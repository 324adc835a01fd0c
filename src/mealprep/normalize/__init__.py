"""Unit classification, conversion and pluralization."""

from mealprep.normalize.convert import (
    ConversionResult,
    Converted,
    DisplayQuantity,
    Unconvertible,
    display_measure,
    format_quantity,
    from_base_volume,
    from_base_weight,
    normalize_measure,
    normalized_fields,
    to_base,
)
from mealprep.normalize.pluralize import pluralize
from mealprep.normalize.units import (
    DEFAULT_REGISTRY,
    UnitClass,
    UnitRegistry,
    base_unit,
    classify,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "ConversionResult",
    "Converted",
    "DisplayQuantity",
    "Unconvertible",
    "UnitClass",
    "UnitRegistry",
    "base_unit",
    "classify",
    "display_measure",
    "format_quantity",
    "from_base_volume",
    "from_base_weight",
    "normalize_measure",
    "normalized_fields",
    "pluralize",
    "to_base",
]
