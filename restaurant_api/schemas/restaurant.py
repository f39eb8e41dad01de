"""Restaurant Schemas — Pydantic models for the REST envelope and menu seed files.

Invariants:
    - Success envelopes carry status="ok" plus either data or message
    - Error envelope carries status="error" plus message
    - MenuItemSchema ids and cooking_time are unsigned; ids fit in 32 bits

Design Decisions:
    - One response model per payload shape (instead of a generic envelope) so the
      OpenAPI document names each shape explicitly
"""

from typing import Literal

from pydantic import BaseModel, Field

from restaurant_api.core.domain_types import MenuItem, MenuItemId, UINT32_MAX


class MenuItemSchema(BaseModel):
    """A menu item as exposed by the API and read from seed files."""
    id: int = Field(ge=0, le=UINT32_MAX)
    name: str = Field(min_length=1)
    cooking_time: int = Field(ge=0, description="Cooking time in minutes")

    @classmethod
    def from_domain(cls, item: MenuItem) -> "MenuItemSchema":
        return cls(id=item.id, name=item.name, cooking_time=item.cooking_time)

    def to_domain(self) -> MenuItem:
        return MenuItem(
            id=MenuItemId(self.id), name=self.name, cooking_time=self.cooking_time,
        )


class MessageResponse(BaseModel):
    status: Literal["ok"] = "ok"
    message: str


class MenuItemResponse(BaseModel):
    status: Literal["ok"] = "ok"
    data: MenuItemSchema


class MenuItemsResponse(BaseModel):
    status: Literal["ok"] = "ok"
    data: list[MenuItemSchema]


class TablesResponse(BaseModel):
    status: Literal["ok"] = "ok"
    data: list[int]


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
