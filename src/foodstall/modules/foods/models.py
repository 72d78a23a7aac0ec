"""Food database model."""

from uuid import UUID

from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_URL_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class Food(Base, DocumentMixin):
    """Food model.

    Attributes:
        name: Display name
        price: Unit price; only presence is enforced
        img: Image reference, usually a URL returned by the upload endpoint
        is_hidden: Whether the food is hidden from menus
        category: Identifier of the food's category, checked on write but
            not enforced as a foreign key
    """

    __tablename__ = "foods"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    img: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    category: Mapped[UUID] = mapped_column(nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Food(id={self.id}, name={self.name})>"
