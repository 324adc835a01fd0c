"""Pydantic schemas for recipes, ingredient lines and grocery list entries."""

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from mealprep.logging_config import get_logger

logger = get_logger(__name__)


class CamelModel(BaseModel):
    """Base model accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


@dataclass(frozen=True)
class Normalized:
    """Quantity stored in the base unit of its class at write time."""

    quantity: float
    unit: str | None


@dataclass(frozen=True)
class RawOnly:
    """Quantity as the user entered it; never normalized."""

    quantity: float | None
    unit: str | None


Measure = Normalized | RawOnly


def parse_quantity(v: Any) -> float | None:
    """
    Parse a stored quantity leniently.

    Returns None for missing, boolean, non-numeric, NaN and infinite values.
    Numeric strings such as "1.5" are accepted.
    """
    if v is None or v == "" or isinstance(v, bool):
        return None
    try:
        value = float(v)
    except (ValueError, TypeError):
        logger.warning(f"Discarding non-numeric quantity {v!r}")
        return None
    if not math.isfinite(value):
        logger.warning(f"Discarding non-finite quantity {v!r}")
        return None
    return value


class IngredientLine(CamelModel):
    """One ingredient's usage within one recipe."""

    ingredient_id: int | str | None = None
    recipe_ingredient_id: int | str | None = None
    name: str = "Unknown"
    quantity: float | None = None
    unit: str | None = None
    normalized_quantity: float | None = None
    normalized_unit: str | None = None
    store_section: str | None = None
    is_optional: bool = False
    preparation: str | None = None

    @model_validator(mode="before")
    @classmethod
    def flatten_ingredient(cls, data: Any) -> Any:
        """Accept storage rows that nest the ingredient as {"ingredient": {"id", "name"}}."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        nested = data.pop("ingredient", None)
        if isinstance(nested, dict):
            if "id" in data:
                data.setdefault("recipeIngredientId", data.pop("id"))
            data.setdefault("ingredientId", nested.get("id"))
            if nested.get("name"):
                data.setdefault("name", nested["name"])
        elif "id" in data and "ingredientId" not in data and "ingredient_id" not in data:
            data["ingredientId"] = data.pop("id")
        return data

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> str:
        """Ensure name is never None or empty."""
        if not v:
            return "Unknown"
        return str(v).strip()

    @field_validator("quantity", "normalized_quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> float | None:
        """Turn missing or non-numeric quantities into None instead of failing the line."""
        return parse_quantity(v)

    @property
    def measure(self) -> Measure:
        """The effective quantity and unit: normalized if present, raw otherwise."""
        unit = self.normalized_unit if self.normalized_unit is not None else self.unit
        if self.normalized_quantity is not None:
            return Normalized(self.normalized_quantity, unit)
        return RawOnly(self.quantity, unit)


class Recipe(CamelModel):
    """A recipe as supplied by the storage layer."""

    id: int | str | None = None
    title: str | None = None
    description: str | None = None
    course: str | None = None
    servings: float | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    ingredients: list[IngredientLine] = Field(default_factory=list)

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)


class AggregatedEntry(CamelModel):
    """One merged line of a grocery list."""

    id: int | str
    name: str
    store_section: str
    quantity: float | None
    unit: str


class IngredientView(CamelModel):
    """An ingredient line formatted for a recipe or prep view."""

    id: int | str | None = None
    recipe_ingredient_id: int | str | None = None
    name: str
    quantity: float | None = None
    unit: str | None = None
    formatted_quantity: str | None = None
    store_section: str | None = None
    is_optional: bool = False
    preparation: str | None = None


class RecipeView(CamelModel):
    """A recipe formatted for display with converted ingredient quantities."""

    id: int | str | None = None
    title: str | None = None
    description: str | None = None
    course: str | None = None
    servings: float | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    total_time: int = 0
    ingredients: list[IngredientView] = Field(default_factory=list)
    ingredient_count: int = 0
