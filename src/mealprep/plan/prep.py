"""Display formatting for single recipes and current or archived preps."""

from collections.abc import Iterable, Mapping
from typing import Any

from mealprep.normalize.convert import display_measure
from mealprep.normalize.units import DEFAULT_REGISTRY, UnitRegistry
from mealprep.schemas import IngredientLine, IngredientView, Recipe, RecipeView


def format_ingredient(
    line: IngredientLine,
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> IngredientView:
    """Convert one stored ingredient line to its display form."""
    measure = line.measure
    display = display_measure(measure.quantity, measure.unit, prefer_metric, registry)
    return IngredientView(
        id=line.ingredient_id,
        recipe_ingredient_id=line.recipe_ingredient_id,
        name=line.name,
        quantity=display.amount,
        unit=display.unit,
        formatted_quantity=display.formatted,
        store_section=line.store_section,
        is_optional=line.is_optional,
        preparation=line.preparation,
    )


def format_recipe(
    recipe: Recipe | Mapping[str, Any],
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> RecipeView:
    """Format a recipe with every ingredient in the viewer's preferred units."""
    if not isinstance(recipe, Recipe):
        recipe = Recipe.model_validate(recipe)

    ingredients = [format_ingredient(line, prefer_metric, registry) for line in recipe.ingredients]
    return RecipeView(
        id=recipe.id,
        title=recipe.title,
        description=recipe.description,
        course=recipe.course,
        servings=recipe.servings,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        total_time=recipe.total_time,
        ingredients=ingredients,
        ingredient_count=len(ingredients),
    )


def format_prep(
    recipes: Iterable[Recipe | Mapping[str, Any]],
    prefer_metric: bool = False,
    registry: UnitRegistry = DEFAULT_REGISTRY,
) -> list[RecipeView]:
    """Format every recipe of a current or past prep."""
    return [format_recipe(recipe, prefer_metric, registry) for recipe in recipes]
