"""Conversion between user-entered units, base units and display units.

Quantities are normalized once when an ingredient is written (volume to
tablespoons, weight to ounces) and converted back to a readable unit every
time they are displayed, so a user's metric preference can change without
touching stored data.
"""

import math
from dataclasses import dataclass

from mealprep.exceptions import UnsupportedUnitError
from mealprep.logging_config import get_logger
from mealprep.normalize.pluralize import pluralize
from mealprep.normalize.units import (
    DEFAULT_REGISTRY,
    OZ_TO_G,
    TBSP_TO_ML,
    UnitClass,
    UnitRegistry,
    base_unit,
)

logger = get_logger(__name__)

# Imperial display ladders, largest unit first
VOLUME_DISPLAY_LADDER: tuple[str, ...] = ("cup", "tbsp", "tsp")
WEIGHT_DISPLAY_LADDER: tuple[str, ...] = ("lb", "oz")

# Rounding step per imperial volume unit; anything else rounds to 0.01
VOLUME_ROUNDING_STEPS: dict[str, float] = {
    "tbsp": 0.25,
    "tsp": 0.25,
}
DEFAULT_ROUNDING_STEP = 0.01


@dataclass(frozen=True)
class DisplayQuantity:
    """A quantity ready for rendering."""

    amount: float | None
    unit: str | None

    @property
    def formatted(self) -> str | None:
        """Quantity and unit as one string, or None if either is missing."""
        if self.amount is None or not self.unit:
            return None
        return f"{format_quantity(self.amount)} {self.unit}"

    def to_dict(self) -> dict[str, float | str | None]:
        return {
            "displayQuantity": self.amount,
            "displayUnit": self.unit,
            "formattedQuantity": self.formatted,
        }


@dataclass(frozen=True)
class Converted:
    """A quantity expressed in the base unit of its class."""

    quantity: float
    unit: str
    unit_class: UnitClass


@dataclass(frozen=True)
class Unconvertible:
    """A quantity left as entered, with the reason it was not converted."""

    quantity: float | None
    unit: str | None
    unit_class: UnitClass
    reason: str


ConversionResult = Converted | Unconvertible


# =============================================================================
# Rounding and Formatting
# =============================================================================


def round_half_up(value: float, step: float) -> float:
    """
    Round to the nearest multiple of step, with halves rounding up.

    Fractional steps divide by their reciprocal so that results such as
    0.57 come out clean instead of 0.5700000000000001.
    """
    multiple = math.floor(value / step + 0.5)
    if step >= 1:
        return float(multiple * step)
    return multiple / round(1 / step)


def format_quantity(value: float) -> str:
    """Render a quantity without a trailing '.0' on whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.10g}"


# =============================================================================
# Ingestion: raw unit -> base unit
# =============================================================================


def to_base(quantity: float, unit: str, registry: UnitRegistry = DEFAULT_REGISTRY) -> float:
    """
    Convert a volume or weight quantity to its base unit.

    Callers classify first; count and unknown units are never passed here.

    Raises:
        UnsupportedUnitError: If the unit is in neither factor table.
    """
    unit_class = registry.classify(unit)
    factor = registry.factor(unit, unit_class)
    if factor is None:
        raise UnsupportedUnitError(unit)
    return quantity * factor


def normalize_measure(
    quantity: float | None,
    unit: str | None,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> ConversionResult:
    """
    Normalize a user-entered quantity to the base unit of its class.

    Returns Converted for volume and weight units and Unconvertible for
    everything else, so the caller's fallback to raw values is explicit.
    """
    unit_class = registry.classify(unit)

    if quantity is None:
        return Unconvertible(quantity, unit, unit_class, "missing quantity")

    if unit_class in (UnitClass.COUNT, UnitClass.UNKNOWN):
        return Unconvertible(quantity, unit, unit_class, f"{unit_class.value} units are not converted")

    try:
        base_quantity = to_base(quantity, unit, registry)
    except UnsupportedUnitError as e:
        logger.warning(f"Keeping raw quantity for {quantity} {unit!r}: {e}")
        return Unconvertible(quantity, unit, unit_class, str(e))

    if not math.isfinite(base_quantity):
        return Unconvertible(quantity, unit, unit_class, "quantity out of range")

    return Converted(base_quantity, base_unit(unit_class), unit_class)


def normalized_fields(
    quantity: float | None,
    unit: str | None,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> tuple[float | None, str | None]:
    """
    Compute the (normalized_quantity, normalized_unit) pair stored with an ingredient.

    Unconvertible units keep the raw unit verbatim and no normalized quantity.
    """
    result = normalize_measure(quantity, unit, registry)
    if isinstance(result, Converted):
        return result.quantity, result.unit
    return None, unit


# =============================================================================
# Display: base unit -> best unit
# =============================================================================


def from_base_volume(
    base_quantity: float,
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> DisplayQuantity:
    """Convert tablespoons to the best display unit."""
    if prefer_metric:
        ml = base_quantity * TBSP_TO_ML
        if ml < 10:
            ml = round_half_up(ml, 0.1)
        else:
            ml = round_half_up(ml, 10)
        # Never show "0 ml" for a real amount
        if ml == 0 and base_quantity > 0:
            ml = 1.0
        return DisplayQuantity(ml, "ml")

    for unit in VOLUME_DISPLAY_LADDER:
        factor = registry.volume_factors[unit]
        if base_quantity >= factor:
            step = VOLUME_ROUNDING_STEPS.get(unit, DEFAULT_ROUNDING_STEP)
            return DisplayQuantity(round_half_up(base_quantity / factor, step), unit)

    tsp_per_tbsp = 1 / registry.volume_factors["tsp"]
    return DisplayQuantity(round_half_up(base_quantity * tsp_per_tbsp, DEFAULT_ROUNDING_STEP), "tsp")


def from_base_weight(
    base_quantity: float,
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> DisplayQuantity:
    """Convert ounces to the best display unit."""
    if prefer_metric:
        grams = round_half_up(base_quantity * OZ_TO_G, 5)
        if grams >= 1000:
            return DisplayQuantity(round_half_up(grams / 1000, 0.01), "kg")
        return DisplayQuantity(grams, "g")

    for unit in WEIGHT_DISPLAY_LADDER:
        factor = registry.weight_factors[unit]
        if base_quantity >= factor:
            return DisplayQuantity(round_half_up(base_quantity / factor, 0.01), unit)

    return DisplayQuantity(round_half_up(base_quantity, 0.01), "oz")


def display_measure(
    quantity: float | None,
    unit: str | None,
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> DisplayQuantity:
    """
    Convert a stored quantity to a pluralized display quantity.

    Pass the effective values (normalized if present, raw otherwise).
    Volume and weight quantities not already in their base unit are
    normalized first; count and unknown units pass through unchanged.
    Quantities too large to round are shown as stored.
    """
    if quantity is None:
        return DisplayQuantity(None, unit or None)

    result = normalize_measure(quantity, unit, registry)
    display = DisplayQuantity(quantity, unit)
    if isinstance(result, Converted):
        try:
            if result.unit_class is UnitClass.VOLUME:
                display = from_base_volume(result.quantity, prefer_metric, registry)
            else:
                display = from_base_weight(result.quantity, prefer_metric, registry)
        except (ArithmeticError, ValueError) as e:
            logger.warning(f"Cannot convert {quantity} {unit!r} for display, keeping raw value: {e}")

    return DisplayQuantity(display.amount, pluralize(display.unit, display.amount, registry) or None)
