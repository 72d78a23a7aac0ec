"""Pydantic schemas for food menu operations."""

from pydantic import BaseModel, Field

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_SHORT_TEXT_LENGTH, MAX_URL_LENGTH
from foodstall.core.schemas import CamelModel, DocumentResponse


class MenuCreate(CamelModel):
    """Schema for creating a menu. Every field is required."""

    menu_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    url: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH)
    is_hidden: bool
    created_date: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    route_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class MenuUpdate(MenuCreate):
    """Schema for updating a menu. The full field set is required."""


class MenuResponse(DocumentResponse):
    """Menu as returned to clients."""

    menu_name: str
    url: str
    is_hidden: bool
    created_date: str
    route_name: str


class MenuEnvelope(BaseModel):
    message: str
    menu: MenuResponse


class MenuListEnvelope(BaseModel):
    message: str
    menus: list[MenuResponse]
