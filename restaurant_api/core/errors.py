"""Error Hierarchy — closed, typed exceptions for every restaurant failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors are 404; store synchronization failures are 500
    - to_response() produces the REST error envelope {"status": "error", "message": ...}
    - Lock failure detail never reaches the envelope (context.user_message wins)

Design Decisions:
    - Single hierarchy with RestaurantError base: one FastAPI handler catches all
    - Constructor arguments kept as attributes (table_id, item_id) so callers and
      tests can match on payload, not on message text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SYNCHRONIZATION = "synchronization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    table_id: int | None = None
    item_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class RestaurantError(Exception):
    """Base exception for all restaurant domain and store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "status": "error",
            "message": self.context.user_message or self.message,
        }

    @property
    def detail_for_log(self) -> str | None:
        """Internal detail (lock trouble etc.) that stays out of the envelope."""
        return (self.context.debug_info or {}).get("detail")

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "detail": self.detail_for_log,
            "table_id": self.context.table_id,
            "item_id": self.context.item_id,
        }


# ─── Not Found (404) ────────────────────────────────────────────

class TableNotFoundError(RestaurantError):
    """Referenced table is absent from the registry."""
    def __init__(self, table_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.table_id = table_id
        super().__init__(
            f"Table not found for table id:{table_id}",
            "TABLE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.table_id = table_id


class MenuNotFoundError(RestaurantError):
    """Referenced menu item is absent from the catalog."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            f"Menu item not found for menu id: {item_id}",
            "MENU_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.item_id = item_id


class NoOrderForTableError(RestaurantError):
    """Table has no ledger entry (nothing ordered, or everything removed)."""
    def __init__(self, table_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.table_id = table_id
        super().__init__(
            f"No Menu items added for table with table id:{table_id}",
            "NO_ORDER_FOR_TABLE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.table_id = table_id


class NoMatchingItemForTableError(RestaurantError):
    """Table has an order, but not for this item."""
    def __init__(
        self, table_id: int, item_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.table_id = table_id
        ctx.item_id = item_id
        super().__init__(
            f"No Menu item with menu item id:{item_id}, "
            f"is found for Table with table id:{table_id}",
            "NO_MATCHING_ITEM_FOR_TABLE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.table_id = table_id
        self.item_id = item_id


# ─── Store Failures (500) ───────────────────────────────────────

class MenusRetrieveError(RestaurantError):
    """Menu catalog could not be read (lock poisoned or timed out)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Error retrieving menus",
            "MENUS_RETRIEVE_ERROR", ErrorCategory.SYNCHRONIZATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class TablesRetrieveError(RestaurantError):
    """Table registry could not be read (lock poisoned or timed out)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Error retrieving tables",
            "TABLES_RETRIEVE_ERROR", ErrorCategory.SYNCHRONIZATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class LockFailureError(RestaurantError):
    """Order ledger lock could not be acquired."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = "Internal server error"
        ctx.debug_info = {**(ctx.debug_info or {}), "detail": detail}
        super().__init__(
            f"Lock error: {detail}",
            "LOCK_FAILURE", ErrorCategory.SYNCHRONIZATION,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.detail = detail
