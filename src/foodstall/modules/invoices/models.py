"""Invoice database model."""

from typing import Any

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_SHORT_TEXT_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class Invoice(Base, DocumentMixin):
    """Invoice model.

    Line items are embedded in a JSON column in the order they were
    submitted. Subtotal, discount and total are stored as supplied by
    the client and never recomputed from the items.
    """

    __tablename__ = "invoices"

    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)
    time: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)
    subtotal: Mapped[float] = mapped_column(Float, nullable=False)
    discount: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Invoice(id={self.id}, date={self.date}, total={self.total})>"
