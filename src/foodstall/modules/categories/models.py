"""Food category database model."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_NAME_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class FoodCategory(Base, DocumentMixin):
    """Food category model.

    Deleting a category leaves foods that reference it untouched.
    """

    __tablename__ = "food_categories"

    category_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    category_description: Mapped[str] = mapped_column(Text, nullable=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<FoodCategory(id={self.id}, name={self.category_name})>"
