"""API routers for the mealprep service."""

from mealprep.routers.grocery_list import router as grocery_list_router
from mealprep.routers.ingredients import router as ingredients_router

__all__ = [
    "grocery_list_router",
    "ingredients_router",
]
