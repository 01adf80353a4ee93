"""API routes for building shopping lists from meal plans."""

import uuid
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.plan.meal_plan import prune_past_dates
from grocerylist.plan.shopping_list import ShoppingList, ShoppingListGenerator

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ShoppingListRequest(BaseModel):
    """Meal-plan snapshot to build a shopping list for."""

    meal_plan: dict[str, Any] = Field(
        default_factory=dict,
        description="Date key (YYYY-MM-DD) to meal slots: breakfast, lunch, dinner, snacks",
    )
    custom_items: list[str] = Field(default_factory=list, description="Hand-added item names")
    today: date | None = Field(None, description="Drop plan days before this date")
    plan_id: str | None = Field(None, description="Caller's plan identifier, used for logging")


class ShoppingListItemSchema(BaseModel):
    """Single line of the shopping list."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    amount: str


class ShoppingListResponse(BaseModel):
    """Consolidated shopping list."""

    items: list[ShoppingListItemSchema]
    meal_items_count: int
    custom_items_count: int
    total_count: int


class ShoppingListExportResponse(BaseModel):
    """Plain-text rendering of the shopping list."""

    text: str
    total_count: int


# =============================================================================
# Helper Functions
# =============================================================================


def get_generator() -> ShoppingListGenerator:
    """Get shopping list generator instance."""
    return ShoppingListGenerator()


def _generate(request: ShoppingListRequest, generator: ShoppingListGenerator) -> ShoppingList:
    meal_plan: dict[str, Any] = request.meal_plan
    if request.today is not None:
        meal_plan = prune_past_dates(meal_plan, request.today)

    with LoggingContext(request_id=str(uuid.uuid4()), plan_id=request.plan_id):
        logger.info(f"Building shopping list for {len(meal_plan)} planned days")
        return generator.generate(meal_plan, custom_items=request.custom_items)


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/", response_model=ShoppingListResponse)
def create_shopping_list(
    request: ShoppingListRequest,
    generator: ShoppingListGenerator = Depends(get_generator),
) -> ShoppingListResponse:
    """
    Build the consolidated shopping list for a meal plan.

    Ingredients with the same name are merged; amounts are summed when
    their units match and listed side by side when they do not. Custom
    items are appended after the meal ingredients without merging.
    """
    shopping_list = _generate(request, generator)

    return ShoppingListResponse(
        items=[ShoppingListItemSchema.model_validate(item) for item in shopping_list.items],
        meal_items_count=len(shopping_list.meal_items),
        custom_items_count=len(shopping_list.custom_items),
        total_count=shopping_list.total_count,
    )


@router.post("/export", response_model=ShoppingListExportResponse)
def export_shopping_list(
    request: ShoppingListRequest,
    generator: ShoppingListGenerator = Depends(get_generator),
) -> ShoppingListExportResponse:
    """Render the shopping list as plain text for copying or sharing."""
    shopping_list = _generate(request, generator)

    return ShoppingListExportResponse(
        text=shopping_list.to_text(),
        total_count=shopping_list.total_count,
    )
