"""Food menu database model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_SHORT_TEXT_LENGTH, MAX_URL_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class FoodMenu(Base, DocumentMixin):
    """Food menu model.

    Attributes:
        menu_name: Display name
        url: Menu image or link
        is_hidden: Whether the menu is hidden
        created_date: Client supplied creation date, stored as given
        route_name: Client side route the menu opens
    """

    __tablename__ = "food_menus"

    menu_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_date: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)
    route_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<FoodMenu(id={self.id}, name={self.menu_name})>"
