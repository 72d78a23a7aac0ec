"""Employee database model."""

from uuid import UUID

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_SHORT_TEXT_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class Employee(Base, DocumentMixin):
    """Employee model.

    Attributes:
        name: Full name
        address: Postal address
        phone_number: Contact number, stored as given
        role_id: Identifier of the employee's role; never checked
        date_of_birth: Client supplied date, stored as given
        created_date: Client supplied creation date, stored as given
    """

    __tablename__ = "employees"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)
    role_id: Mapped[UUID] = mapped_column(nullable=False)
    date_of_birth: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)
    created_date: Mapped[str] = mapped_column(String(MAX_SHORT_TEXT_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name={self.name})>"
