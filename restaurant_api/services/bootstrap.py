"""Composition Root — builds the three stores and the facade, once per application.

Invariants:
    - No module-level store instances anywhere; every RestaurantFacade owns its stores
    - Settings decide the seed (table_count, menu_seed_file) and lock timeout
"""

import logging

from restaurant_api.config import Settings
from restaurant_api.infrastructure.menu_store import (
    PREDEFINED_MENU, InMemoryMenuStore, load_menu_seed,
)
from restaurant_api.infrastructure.order_store import InMemoryOrderStore
from restaurant_api.infrastructure.table_store import InMemoryTableStore
from restaurant_api.services.restaurant import RestaurantFacade

logger = logging.getLogger(__name__)


def build_restaurant(settings: Settings) -> RestaurantFacade:
    """Wire in-memory stores into a RestaurantFacade."""
    timeout = settings.lock_timeout_seconds
    if settings.menu_seed_file:
        menus = load_menu_seed(settings.menu_seed_file)
    else:
        menus = list(PREDEFINED_MENU)
    restaurant = RestaurantFacade(
        menu_store=InMemoryMenuStore(menus, lock_timeout=timeout),
        order_store=InMemoryOrderStore(lock_timeout=timeout),
        table_store=InMemoryTableStore.with_table_count(
            settings.table_count, lock_timeout=timeout,
        ),
    )
    logger.info(
        f"Restaurant ready: {settings.table_count} tables, {len(menus)} menu items",
    )
    return restaurant
