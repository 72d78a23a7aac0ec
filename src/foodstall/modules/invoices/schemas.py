"""Pydantic schemas for invoice operations."""

from uuid import UUID

from pydantic import BaseModel, Field

from foodstall.core.constants import MAX_SHORT_TEXT_LENGTH
from foodstall.core.schemas import CamelModel, DocumentResponse


class InvoiceItem(CamelModel):
    """One invoice line. ``sum`` is supplied by the client."""

    food: UUID
    quantity: int = Field(..., ge=1)
    price: float
    sum: float


class InvoiceCreate(CamelModel):
    """Schema for creating an invoice. Amounts are taken as given."""

    items: list[InvoiceItem] = Field(..., min_length=1)
    date: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    time: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    subtotal: float
    discount: float = 0
    total: float


class InvoiceDateTimeUpdate(CamelModel):
    """The only mutable invoice fields: date and time."""

    date: str | None = Field(None, min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    time: str | None = Field(None, min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)


class InvoiceResponse(DocumentResponse):
    """Invoice as returned to clients."""

    items: list[InvoiceItem]
    date: str
    time: str
    subtotal: float
    discount: float
    total: float


class InvoiceEnvelope(BaseModel):
    message: str
    invoice: InvoiceResponse


class InvoiceListEnvelope(BaseModel):
    message: str
    invoices: list[InvoiceResponse]
