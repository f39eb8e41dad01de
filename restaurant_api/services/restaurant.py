"""Restaurant Facade — cross-store invariants over the menu, table and order stores.

Invariants:
    - Table existence is checked first on every table-scoped operation
    - add_item checks menu existence after table existence, before touching the ledger
    - remove_item never re-checks the menu: the ledger is authoritative for what was ordered
    - get_items drops ordered ids that are no longer in the catalog
    - get_item distinguishes "not ordered" (NoMatchingItemForTableError) from
      "ordered but no longer on the menu" (MenuNotFoundError)
    - Every check reads a fresh snapshot; nothing is cached between calls

Design Decisions:
    - Stateless: all state lives in the three stores
    - Each store call takes and releases its own lock; there is no cross-store
      transaction. Tables are immutable, so the check-then-write gap cannot
      invalidate a table today. Adding table mutation requires revisiting add_item.
"""

import logging

from restaurant_api.core.domain_types import MenuItem, MenuItemId, TableId
from restaurant_api.core.errors import MenuNotFoundError, TableNotFoundError
from restaurant_api.core.repository_protocols import MenuStore, OrderStore, TableStore

logger = logging.getLogger(__name__)


class RestaurantFacade:
    """Public domain operations consumed by the HTTP adapter."""

    def __init__(
        self,
        menu_store: MenuStore,
        order_store: OrderStore,
        table_store: TableStore,
    ):
        self.menu_store = menu_store
        self.order_store = order_store
        self.table_store = table_store

    def get_all_menus(self) -> list[MenuItem]:
        return self.menu_store.get_all_menus()

    def get_all_tables(self) -> list[TableId]:
        return self.table_store.get_all_tables()

    def add_item(self, table_id: TableId, item_id: MenuItemId) -> None:
        """Place one occurrence of a menu item on a table's order."""
        self._ensure_table(table_id)
        if self._find_menu_item(item_id) is None:
            raise MenuNotFoundError(item_id)
        self.order_store.add_item(table_id, item_id)
        logger.info(
            f"Added item {item_id} to table {table_id}",
            extra={"table_id": table_id, "item_id": item_id},
        )

    def remove_item(self, table_id: TableId, item_id: MenuItemId) -> None:
        """Remove the first occurrence of a menu item from a table's order."""
        self._ensure_table(table_id)
        self.order_store.remove_item(table_id, item_id)
        logger.info(
            f"Removed item {item_id} from table {table_id}",
            extra={"table_id": table_id, "item_id": item_id},
        )

    def get_items(self, table_id: TableId) -> list[MenuItem]:
        """All ordered items for a table, in order, duplicates included."""
        self._ensure_table(table_id)
        item_ids = self.order_store.get_item_ids(table_id)
        menu_by_id = {item.id: item for item in self.get_all_menus()}
        return [menu_by_id[i] for i in item_ids if i in menu_by_id]

    def get_item(self, table_id: TableId, item_id: MenuItemId) -> MenuItem:
        """The menu item for an id currently ordered at a table."""
        self._ensure_table(table_id)
        self.order_store.get_item_id(table_id, item_id)
        item = self._find_menu_item(item_id)
        if item is None:
            raise MenuNotFoundError(item_id)
        return item

    def _ensure_table(self, table_id: TableId) -> None:
        if table_id not in self.get_all_tables():
            raise TableNotFoundError(table_id)

    def _find_menu_item(self, item_id: MenuItemId) -> MenuItem | None:
        return next(
            (item for item in self.get_all_menus() if item.id == item_id), None,
        )
