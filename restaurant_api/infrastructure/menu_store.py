"""In-Memory Menu Store — seeded, read-only menu catalog.

Invariants:
    - Menu item ids are unique (duplicate ids rejected at seed time)
    - get_all_menus() returns a copy in seed order, never sorted
    - Lock trouble surfaces as MenusRetrieveError
"""

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter

from restaurant_api.core.domain_types import MenuItem, MenuItemId
from restaurant_api.core.errors import ErrorContext, MenusRetrieveError
from restaurant_api.infrastructure.locking import GuardedLock
from restaurant_api.schemas.restaurant import MenuItemSchema

logger = logging.getLogger(__name__)

PREDEFINED_MENU: tuple[MenuItem, ...] = tuple(
    MenuItem(id=MenuItemId(item_id), name=name, cooking_time=minutes)
    for item_id, name, minutes in (
        (1, "Salad", 1),
        (2, "Soup", 5),
        (3, "Sandwich", 7),
        (4, "Pasta", 12),
        (5, "Steak", 15),
        (6, "Burger", 10),
        (7, "Pizza", 14),
        (8, "Tacos", 8),
        (9, "Fries", 3),
        (10, "Stir Fry", 10),
        (11, "Omelette", 4),
        (12, "Pancakes", 6),
        (13, "Sushi", 12),
        (14, "Curry", 15),
        (15, "Fish & Chips", 13),
        (16, "Fried Rice", 9),
        (17, "Ramen", 14),
        (18, "Burrito", 8),
        (19, "Waffles", 5),
        (20, "Salmon", 13),
    )
)

_menu_seed_adapter = TypeAdapter(list[MenuItemSchema])


def _menus_retrieve_error(detail: str) -> MenusRetrieveError:
    return MenusRetrieveError(ErrorContext(debug_info={"detail": detail}))


class InMemoryMenuStore:
    """Menu catalog backed by a lock-guarded list."""

    def __init__(self, menus: Iterable[MenuItem], lock_timeout: float = 5.0):
        items = list(menus)
        seen: set[int] = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"duplicate menu item id: {item.id}")
            seen.add(item.id)
        self._menus = items
        self._lock = GuardedLock("menu", _menus_retrieve_error, lock_timeout)

    def get_all_menus(self) -> list[MenuItem]:
        with self._lock.hold():
            return list(self._menus)


def load_menu_seed(path: str | Path) -> list[MenuItem]:
    """Read a JSON menu seed: [{"id": 1, "name": "Salad", "cooking_time": 1}, ...]."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    items = [schema.to_domain() for schema in _menu_seed_adapter.validate_python(raw)]
    logger.info(f"Loaded {len(items)} menu items from {path}")
    return items
