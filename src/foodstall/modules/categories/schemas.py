"""Pydantic schemas for food category operations."""

from pydantic import BaseModel, Field

from foodstall.core.constants import MAX_NAME_LENGTH
from foodstall.core.schemas import CamelModel, DocumentResponse


class CategoryCreate(CamelModel):
    """Schema for creating a category. Every field is required."""

    category_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    category_description: str = Field(..., min_length=1)
    is_hidden: bool


class CategoryUpdate(CamelModel):
    """Schema for a partial category update."""

    category_name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    category_description: str | None = Field(None, min_length=1)
    is_hidden: bool | None = None


class CategoryResponse(DocumentResponse):
    """Category as returned to clients."""

    category_name: str
    category_description: str
    is_hidden: bool


class CategoryEnvelope(BaseModel):
    message: str
    category: CategoryResponse


class CategoryListEnvelope(BaseModel):
    message: str
    categories: list[CategoryResponse]
