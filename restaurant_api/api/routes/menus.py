"""Menus Route — GET endpoint for the full menu catalog."""

from fastapi import APIRouter

from restaurant_api.api.dependencies import Restaurant
from restaurant_api.schemas.restaurant import (
    ErrorResponse, MenuItemSchema, MenuItemsResponse,
)

router = APIRouter(prefix="/api/v1/menus", tags=["menus"])


@router.get(
    "", response_model=MenuItemsResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
)
def list_menus(restaurant: Restaurant):
    """List every menu item in catalog order."""
    menus = restaurant.get_all_menus()
    return MenuItemsResponse(data=[MenuItemSchema.from_domain(m) for m in menus])
