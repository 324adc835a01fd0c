#!/usr/bin/env python
"""
Backfill normalized quantities in a JSON export of recipe ingredients.

Reads a JSON array of recipe-ingredient records (each with at least
"quantity" and "unit") and fills "normalizedQuantity" / "normalizedUnit"
for records that do not have them yet: volumes become tablespoons,
weights become ounces, count and unknown units keep their raw unit.

Run with: python scripts/normalize_ingredients.py ingredients.json --in-place
"""

import argparse
import json
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from mealprep.logging_config import configure_logging, get_logger
from mealprep.normalize.backfill import backfill_records

configure_logging(log_level=os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Backfill normalized ingredient quantities")
    parser.add_argument("input", help="JSON file with a list of recipe-ingredient records")
    parser.add_argument("--output", "-o", type=str, help="Write the result to this file")
    parser.add_argument("--in-place", action="store_true", help="Overwrite the input file")

    args = parser.parse_args()
    if not args.in_place and not args.output:
        parser.error("one of --output or --in-place is required")

    with open(args.input, encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        logger.error(f"Expected a JSON array in {args.input}")
        sys.exit(1)

    backfill_records(records)

    output_path = args.input if args.in_place else args.output
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)
    logger.info(f"Wrote {len(records)} records to {output_path}")


if __name__ == "__main__":
    main()
