"""Grocery list aggregation and prep formatting."""

from mealprep.plan.grocery_list import (
    SECTION_LABELS,
    GroceryList,
    aggregate,
    grocery_list_payload,
    section_label,
)
from mealprep.plan.prep import format_ingredient, format_prep, format_recipe

__all__ = [
    "SECTION_LABELS",
    "GroceryList",
    "aggregate",
    "format_ingredient",
    "format_prep",
    "format_recipe",
    "grocery_list_payload",
    "section_label",
]
