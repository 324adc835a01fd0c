"""Backfill normalized quantities on ingredient records saved before normalization existed."""

from collections.abc import Iterable
from typing import Any

from mealprep.logging_config import get_logger
from mealprep.normalize.convert import normalized_fields
from mealprep.normalize.units import DEFAULT_REGISTRY, UnitClass, UnitRegistry
from mealprep.schemas import parse_quantity

logger = get_logger(__name__)


def is_normalized(record: dict[str, Any], registry: UnitRegistry = DEFAULT_REGISTRY) -> bool:
    """
    Check whether a record already carries its normalized fields.

    Volume and weight records need both a normalized unit and quantity;
    count and unknown units only ever store the unit.
    """
    if record.get("normalizedUnit") is None:
        return False
    if registry.classify(record.get("unit")) in (UnitClass.VOLUME, UnitClass.WEIGHT):
        return record.get("normalizedQuantity") is not None
    return True


def backfill_record(
    record: dict[str, Any],
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> bool:
    """
    Fill normalizedQuantity/normalizedUnit on one recipe-ingredient record in place.

    Records without a unit or a usable quantity, and records that are
    already normalized, are left alone. Count and unknown units get their
    raw unit and no normalized quantity.

    Returns:
        True if the record was updated.
    """
    unit = record.get("unit")
    raw_quantity = record.get("quantity")
    quantity = parse_quantity(raw_quantity)

    if not unit or quantity is None:
        if raw_quantity is not None:
            logger.warning(f"Skipping id {record.get('id')}: unusable quantity {raw_quantity!r}")
        return False
    if is_normalized(record, registry):
        return False

    normalized_quantity, normalized_unit = normalized_fields(quantity, unit, registry)
    record["normalizedQuantity"] = normalized_quantity
    record["normalizedUnit"] = normalized_unit
    logger.info(
        f"Updated id {record.get('id')}: {quantity} {unit} -> {normalized_quantity} {normalized_unit}"
    )
    return True


def backfill_records(
    records: Iterable[dict[str, Any]],
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> int:
    """Backfill every record in place and return how many were updated."""
    updated = sum(1 for record in records if backfill_record(record, registry))
    logger.info(f"Normalization complete: {updated} records updated")
    return updated
