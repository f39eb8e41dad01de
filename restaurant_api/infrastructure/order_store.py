"""In-Memory Order Store — per-table ledger of ordered menu item ids.

Invariants:
    - One ledger-wide lock; every operation holds it for its whole duration
    - Duplicates allowed: each add appends one occurrence, each remove drops one
    - remove_item drops the FIRST matching occurrence only
    - A table's entry is pruned when its last occurrence is removed, so an emptied
      table reports NoOrderForTableError exactly like a table that never ordered
    - No table/menu existence checks here; the facade owns those invariants

Design Decisions:
    - dict[TableId, list[MenuItemId]]: insertion order kept, list.index gives first match
    - Reads return copies so callers never observe later mutations
"""

import logging

from restaurant_api.core.domain_types import MenuItemId, TableId
from restaurant_api.core.errors import (
    LockFailureError,
    NoMatchingItemForTableError,
    NoOrderForTableError,
)
from restaurant_api.infrastructure.locking import GuardedLock

logger = logging.getLogger(__name__)


class InMemoryOrderStore:
    """Order ledger backed by a lock-guarded dict of lists."""

    def __init__(self, lock_timeout: float = 5.0):
        self._orders: dict[TableId, list[MenuItemId]] = {}
        self._lock = GuardedLock("order", LockFailureError, lock_timeout)

    def add_item(self, table_id: TableId, item_id: MenuItemId) -> None:
        with self._lock.hold():
            self._orders.setdefault(table_id, []).append(item_id)
            count = len(self._orders[table_id])
        logger.debug(
            f"Ledger add: table {table_id} now holds {count} item(s)",
            extra={"table_id": table_id, "item_id": item_id},
        )

    def remove_item(self, table_id: TableId, item_id: MenuItemId) -> None:
        with self._lock.hold():
            items = self._orders.get(table_id)
            if items is None:
                raise NoOrderForTableError(table_id)
            try:
                items.remove(item_id)
            except ValueError:
                raise NoMatchingItemForTableError(table_id, item_id) from None
            if not items:
                del self._orders[table_id]

    def get_item_ids(self, table_id: TableId) -> list[MenuItemId]:
        with self._lock.hold():
            items = self._orders.get(table_id)
            if items is None:
                raise NoOrderForTableError(table_id)
            return list(items)

    def get_item_id(self, table_id: TableId, item_id: MenuItemId) -> MenuItemId:
        with self._lock.hold():
            if item_id not in self._orders.get(table_id, ()):
                raise NoMatchingItemForTableError(table_id, item_id)
            return item_id
