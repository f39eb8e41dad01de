"""Tables Routes — table listing and per-table order operations.

Invariants:
    - Path identifiers are validated as unsigned 32-bit ints before reaching the facade
    - Domain errors propagate to api/error_handlers.py (never caught here)

Design Decisions:
    - Sync endpoints: FastAPI runs them in its threadpool, one thread per request,
      matching the facade's synchronous, lock-guarded contract
"""

from fastapi import APIRouter

from restaurant_api.api.dependencies import ItemIdParam, Restaurant, TableIdParam
from restaurant_api.core.domain_types import MenuItemId, TableId
from restaurant_api.schemas.restaurant import (
    ErrorResponse,
    MenuItemResponse,
    MenuItemSchema,
    MenuItemsResponse,
    MessageResponse,
    TablesResponse,
)

router = APIRouter(prefix="/api/v1/tables", tags=["tables"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Malformed identifier"},
    404: {"model": ErrorResponse, "description": "Table, menu item or order not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.get(
    "", response_model=TablesResponse,
    responses={500: _ERRORS[500]},
)
def list_tables(restaurant: Restaurant):
    """List all table ids."""
    return TablesResponse(data=restaurant.get_all_tables())


@router.post(
    "/{table_id}/items/{item_id}", response_model=MessageResponse,
    responses=_ERRORS,
)
def add_item(table_id: TableIdParam, item_id: ItemIdParam, restaurant: Restaurant):
    """Add one occurrence of a menu item to a table's order."""
    restaurant.add_item(TableId(table_id), MenuItemId(item_id))
    return MessageResponse(
        message=(
            f"Menu item with item id: {item_id} added successfully "
            f"for table with table id {table_id}"
        ),
    )


@router.delete(
    "/{table_id}/items/{item_id}", response_model=MessageResponse,
    responses=_ERRORS,
)
def remove_item(table_id: TableIdParam, item_id: ItemIdParam, restaurant: Restaurant):
    """Remove the first occurrence of a menu item from a table's order."""
    restaurant.remove_item(TableId(table_id), MenuItemId(item_id))
    return MessageResponse(
        message=(
            f"Menu item with item id:{item_id} removed from table "
            f"with table id:{table_id} successfully"
        ),
    )


@router.get(
    "/{table_id}/items", response_model=MenuItemsResponse,
    responses=_ERRORS,
)
def get_items(table_id: TableIdParam, restaurant: Restaurant):
    """List the menu items ordered at a table."""
    items = restaurant.get_items(TableId(table_id))
    return MenuItemsResponse(data=[MenuItemSchema.from_domain(i) for i in items])


@router.get(
    "/{table_id}/items/{item_id}", response_model=MenuItemResponse,
    responses=_ERRORS,
)
def get_item(table_id: TableIdParam, item_id: ItemIdParam, restaurant: Restaurant):
    """Get one menu item ordered at a table."""
    item = restaurant.get_item(TableId(table_id), MenuItemId(item_id))
    return MenuItemResponse(data=MenuItemSchema.from_domain(item))
