"""Store Protocols — contracts between the restaurant facade and its stores.

Invariants:
    - The facade depends only on these Protocols, never on concrete stores
    - Every method is synchronous; no store spawns work or suspends
    - Each method raises only the error kinds listed in its docstring

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Sync, not async: callers are FastAPI threadpool workers
"""

from typing import Protocol

from restaurant_api.core.domain_types import MenuItem, MenuItemId, TableId


class MenuStore(Protocol):
    """Read-only menu catalog. Raises MenusRetrieveError."""
    def get_all_menus(self) -> list[MenuItem]: ...


class TableStore(Protocol):
    """Read-only table registry. Raises TablesRetrieveError."""
    def get_all_tables(self) -> list[TableId]: ...


class OrderStore(Protocol):
    """Per-table order ledger. No table/menu existence checks.

    Raises LockFailureError, NoOrderForTableError, NoMatchingItemForTableError.
    """
    def add_item(self, table_id: TableId, item_id: MenuItemId) -> None: ...
    def remove_item(self, table_id: TableId, item_id: MenuItemId) -> None: ...
    def get_item_ids(self, table_id: TableId) -> list[MenuItemId]: ...
    def get_item_id(self, table_id: TableId, item_id: MenuItemId) -> MenuItemId: ...
