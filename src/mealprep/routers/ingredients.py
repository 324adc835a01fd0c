"""API routes for normalizing and displaying single ingredient quantities."""

from fastapi import APIRouter
from pydantic import Field

from mealprep.normalize.convert import Converted, display_measure, normalize_measure
from mealprep.routers.grocery_list import resolve_prefer_metric
from mealprep.schemas import CamelModel, IngredientLine

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


class NormalizeRequest(CamelModel):
    """A quantity and unit as entered by the user."""

    quantity: float = Field(gt=0, allow_inf_nan=False)
    unit: str | None = None


class NormalizeResponse(CamelModel):
    """Values to persist alongside the raw quantity and unit."""

    quantity: float
    unit: str | None
    unit_class: str
    normalized_quantity: float | None
    normalized_unit: str | None
    converted: bool
    reason: str | None = None


class DisplayRequest(IngredientLine):
    """A stored ingredient line plus an optional display preference."""

    prefer_metric: bool | None = None


class DisplayResponse(CamelModel):
    """Quantity converted for rendering."""

    display_quantity: float | None
    display_unit: str | None
    formatted_quantity: str | None


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_ingredient(request: NormalizeRequest) -> NormalizeResponse:
    """Compute the normalized fields for a quantity at write time."""
    result = normalize_measure(request.quantity, request.unit)
    if isinstance(result, Converted):
        return NormalizeResponse(
            quantity=request.quantity,
            unit=request.unit,
            unit_class=result.unit_class.value,
            normalized_quantity=result.quantity,
            normalized_unit=result.unit,
            converted=True,
        )
    return NormalizeResponse(
        quantity=request.quantity,
        unit=request.unit,
        unit_class=result.unit_class.value,
        normalized_quantity=None,
        normalized_unit=request.unit,
        converted=False,
        reason=result.reason,
    )


@router.post("/display", response_model=DisplayResponse)
async def display_ingredient(request: DisplayRequest) -> DisplayResponse:
    """Convert a stored quantity to the viewer's preferred display unit."""
    measure = request.measure
    display = display_measure(
        measure.quantity,
        measure.unit,
        resolve_prefer_metric(request.prefer_metric),
    )
    return DisplayResponse(
        display_quantity=display.amount,
        display_unit=display.unit,
        formatted_quantity=display.formatted,
    )
