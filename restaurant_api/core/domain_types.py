"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TableId and MenuItemId are unsigned 32-bit integers
    - MenuItem is immutable once seeded (frozen dataclass)
    - cooking_time is in whole minutes, never negative

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - MenuItem as a dataclass, not a Pydantic model: core stays free of IO/schema concerns;
      the API layer converts it to schemas.restaurant.MenuItemSchema
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TableId = NewType("TableId", int)
MenuItemId = NewType("MenuItemId", int)

UINT32_MAX = 4_294_967_295
DEFAULT_TABLE_COUNT = 100


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu."""
    id: MenuItemId
    name: str
    cooking_time: int  # minutes

    def __post_init__(self):
        if not 0 <= self.id <= UINT32_MAX:
            raise ValueError(f"menu item id out of range: {self.id}")
        if self.cooking_time < 0:
            raise ValueError(f"cooking_time cannot be negative: {self.cooking_time}")
