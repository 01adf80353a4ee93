"""API routers for the grocerylist service."""

from grocerylist.routers.shopping_list import router as shopping_list_router

__all__ = [
    "shopping_list_router",
]
