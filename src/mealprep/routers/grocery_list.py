"""API routes for grocery list generation and prep formatting."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import Field

from mealprep.config import get_settings
from mealprep.logging_config import get_logger
from mealprep.plan.grocery_list import aggregate, grocery_list_payload
from mealprep.plan.prep import format_prep
from mealprep.schemas import CamelModel, RecipeView

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["grocery-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class GroceryListRequest(CamelModel):
    """Recipes to build a grocery list from."""

    # Lines are validated one at a time during aggregation
    recipes: list[dict[str, Any]] = Field(default_factory=list)
    prefer_metric: bool | None = Field(None, description="Overrides the configured default")


class PrepFormatRequest(CamelModel):
    """Recipes of a current or past prep to format for display."""

    recipes: list[dict[str, Any]] = Field(default_factory=list)
    prefer_metric: bool | None = None


class PrepFormatResponse(CamelModel):
    """Formatted recipes."""

    recipes: list[RecipeView]


def resolve_prefer_metric(override: bool | None) -> bool:
    """Use the request's preference if given, else the configured default."""
    if override is not None:
        return override
    return get_settings().prefer_metric


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/grocery-list")
async def create_grocery_list(request: GroceryListRequest) -> dict[str, Any]:
    """Aggregate the ingredients of the given recipes, grouped by store section."""
    if not request.recipes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="recipes must be a non-empty array",
        )

    prefer_metric = resolve_prefer_metric(request.prefer_metric)
    logger.info(f"Generating grocery list for {len(request.recipes)} recipes (metric={prefer_metric})")

    return grocery_list_payload(aggregate(request.recipes, prefer_metric))


@router.post("/preps/format", response_model=PrepFormatResponse)
async def format_prep_recipes(request: PrepFormatRequest) -> PrepFormatResponse:
    """Format the recipes of a prep with quantities in the viewer's units."""
    prefer_metric = resolve_prefer_metric(request.prefer_metric)
    return PrepFormatResponse(recipes=format_prep(request.recipes, prefer_metric))
