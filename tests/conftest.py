"""Pytest configuration and shared fixtures."""

import pytest

# =============================================================================
# Ingredient Line Helpers
# =============================================================================


def make_line(
    ingredient_id,
    name,
    quantity,
    unit,
    normalized_quantity=None,
    normalized_unit=None,
    store_section=None,
):
    """Build a recipe-ingredient row shaped like the storage layer returns it."""
    return {
        "id": f"ri-{ingredient_id}-{name}",
        "ingredient": {"id": ingredient_id, "name": name},
        "quantity": quantity,
        "unit": unit,
        "normalizedQuantity": normalized_quantity,
        "normalizedUnit": normalized_unit,
        "storeSection": store_section,
        "isOptional": False,
        "preparation": None,
    }


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def garlic_recipe():
    """A recipe using one clove of garlic."""
    return {
        "id": 1,
        "title": "Garlic Bread",
        "ingredients": [make_line(10, "garlic", 1, "clove", None, "clove", "PRODUCE")],
    }


@pytest.fixture
def weeknight_recipe():
    """A recipe whose display units stay the same when quantities double."""
    return {
        "id": 2,
        "title": "Chicken Traybake",
        "prepTime": 15,
        "cookTime": 40,
        "servings": 4,
        "ingredients": [
            make_line(10, "garlic", 1, "clove", None, "clove", "PRODUCE"),
            make_line(11, "chicken thigh", 2, "lb", 32.0, "oz", "MEAT_SEAFOOD"),
            make_line(12, "all-purpose flour", 2, "cup", 32.0, "tbsp", "BAKING"),
            make_line(13, "salt", 1, "tsp", 1 / 3, "tbsp", "SPICES"),
            make_line(14, "chickpeas", 1, "can", None, "can", "CANNED"),
            make_line(15, "zucchini", 2, "whole", None, "whole", "PRODUCE"),
            make_line(16, "red bell pepper", 1, "whole", None, "whole", "PRODUCE"),
        ],
    }
