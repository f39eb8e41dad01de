"""Request dependencies shared by route modules."""

from typing import Annotated

from fastapi import Depends, Path, Request

from restaurant_api.core.domain_types import UINT32_MAX
from restaurant_api.services.restaurant import RestaurantFacade


def get_restaurant(request: Request) -> RestaurantFacade:
    """FastAPI dependency for the facade built in the lifespan."""
    restaurant = getattr(request.app.state, "restaurant", None)
    if restaurant is None:
        raise RuntimeError("Restaurant not initialized")
    return restaurant


Restaurant = Annotated[RestaurantFacade, Depends(get_restaurant)]
TableIdParam = Annotated[int, Path(ge=0, le=UINT32_MAX, description="ID of the table")]
ItemIdParam = Annotated[int, Path(ge=0, le=UINT32_MAX, description="ID of the menu item")]
