"""Grocery list generation from a set of recipes."""

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from mealprep.logging_config import get_logger
from mealprep.normalize.convert import display_measure
from mealprep.normalize.units import DEFAULT_REGISTRY, UnitRegistry
from mealprep.schemas import AggregatedEntry, IngredientLine, Recipe

logger = get_logger(__name__)

DEFAULT_SECTION = "OTHER"
UNKNOWN_INGREDIENT_ID = "unknown"

SECTION_LABELS: dict[str, str] = {
    "DAIRY": "Dairy Aisle",
    "BEVERAGE": "Beverages",
    "DELI": "Deli Aisle",
    "BREAKFAST": "Breakfast",
    "MEAT_SEAFOOD": "Meat & Seafood Aisle",
    "BAKING": "Bread or Bakery Aisle",
    "CHEESE": "Cheese Aisle",
    "CANNED": "Canned Goods",
    "DRY_GOOD": "Dry Goods",
    "SNACK": "Snack Aisle",
    "PRODUCE": "Produce Section",
    "FROZEN": "Frozen Foods",
    "INTERNATIONAL": "International Foods",
    "SPICES": "Spice Aisle",
    "OTHER": "Other",
}

GroceryList = dict[str, list[AggregatedEntry]]


@dataclass
class _Bucket:
    """Running total for one (ingredient, unit) pair within a section."""

    ingredient_id: int | str
    name: str
    quantity: float
    unit: str
    store_section: str


def section_label(section: str) -> str:
    """Get the human-readable label for a store section key."""
    return SECTION_LABELS.get(section, section)


def last_word(name: str) -> str:
    """Get the case-folded last word of an ingredient name."""
    words = name.strip().casefold().split()
    return words[-1] if words else ""


def _iter_lines(recipes: Iterable[Recipe | Mapping[str, Any]]) -> Iterator[IngredientLine]:
    """Yield every valid ingredient line, skipping lines that fail validation."""
    for recipe in recipes:
        if isinstance(recipe, Mapping):
            lines = recipe.get("ingredients")
        else:
            lines = getattr(recipe, "ingredients", None)

        if not isinstance(lines, (list, tuple)):
            continue

        for raw in lines:
            if isinstance(raw, IngredientLine):
                yield raw
                continue
            try:
                yield IngredientLine.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed ingredient line {raw!r}: {e}")


def aggregate(
    recipes: Iterable[Recipe | Mapping[str, Any]],
    prefer_metric: bool = False,
    *,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> GroceryList:
    """
    Merge the ingredients of several recipes into a grocery list.

    Lines are bucketed by store section, then summed per
    (ingredient id, effective unit). Each sum is converted to a display unit
    for the requested system, pluralized, and each section is sorted by the
    last word of the ingredient name so that e.g. "red bell pepper" and
    "green bell pepper" sit together.

    Args:
        recipes: Recipe models or mappings with an "ingredients" list.
        prefer_metric: Display volumes in ml and weights in g/kg.
        registry: Conversion tables to use.

    Returns:
        Mapping of section label to its sorted entries. Lines with a
        missing, non-numeric or overflowing quantity are logged and skipped.
    """
    grouped: dict[str, dict[tuple[int | str, str], _Bucket]] = {}
    skipped = 0

    for line in _iter_lines(recipes):
        measure = line.measure
        if measure.quantity is None:
            logger.warning(f"Invalid quantity for ingredient {line.name}, skipping")
            skipped += 1
            continue

        section = line.store_section or DEFAULT_SECTION
        ingredient_id = line.ingredient_id if line.ingredient_id is not None else UNKNOWN_INGREDIENT_ID
        unit = measure.unit or ""
        key = (ingredient_id, unit)

        section_map = grouped.setdefault(section, {})
        if key in section_map:
            section_map[key].quantity += measure.quantity
        else:
            section_map[key] = _Bucket(
                ingredient_id=ingredient_id,
                name=line.name,
                quantity=measure.quantity,
                unit=unit,
                store_section=section,
            )

    result: GroceryList = {}
    for section, buckets in grouped.items():
        entries = []
        for bucket in buckets.values():
            if not math.isfinite(bucket.quantity):
                logger.warning(f"Total for ingredient {bucket.name} overflowed, skipping")
                skipped += 1
                continue
            entries.append(_to_entry(bucket, prefer_metric, registry))
        if entries:
            result.setdefault(section_label(section), []).extend(entries)

    for entries in result.values():
        entries.sort(key=lambda entry: last_word(entry.name))

    logger.info(
        f"Aggregated grocery list: {sum(len(e) for e in result.values())} items "
        f"in {len(result)} sections, {skipped} lines skipped"
    )
    return result


def _to_entry(bucket: _Bucket, prefer_metric: bool, registry: UnitRegistry) -> AggregatedEntry:
    display = display_measure(bucket.quantity, bucket.unit or None, prefer_metric, registry)
    return AggregatedEntry(
        id=bucket.ingredient_id,
        name=bucket.name,
        store_section=bucket.store_section,
        quantity=display.amount,
        unit=display.unit or "",
    )


def grocery_list_payload(grocery_list: GroceryList) -> dict[str, Any]:
    """Serialize a grocery list as the camelCase response body."""
    return {
        "groceryList": {
            label: [entry.model_dump(by_alias=True) for entry in entries]
            for label, entries in grocery_list.items()
        }
    }
