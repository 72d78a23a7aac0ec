"""Pydantic schemas for food operations."""

from uuid import UUID

from pydantic import BaseModel, Field

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_URL_LENGTH
from foodstall.core.schemas import CamelModel, DocumentResponse


class FoodCreate(CamelModel):
    """Schema for creating a food.

    ``category`` is kept as the raw identifier so that a malformed value
    is reported as an unknown category rather than a validation error.
    """

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    price: float
    img: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH)
    is_hidden: bool
    category: str = Field(..., min_length=1)


class FoodUpdate(FoodCreate):
    """Schema for updating a food. The full field set is required."""


class FoodResponse(DocumentResponse):
    """Food as returned to clients."""

    name: str
    price: float
    img: str
    is_hidden: bool
    category: UUID


class FoodEnvelope(BaseModel):
    message: str
    food: FoodResponse


class FoodListEnvelope(BaseModel):
    message: str
    foods: list[FoodResponse]
