"""User database model."""

from uuid import UUID

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_EMAIL_LENGTH
from foodstall.core.database.base import Base, DocumentMixin


class User(Base, DocumentMixin):
    """User model representing a credential holder.

    Attributes:
        email: Unique email address, used as the login name
        password_hash: Salted bcrypt hash of the password
        role: Identifier of the user's role; not enforced as a foreign
            key, so it may dangle after the role is deleted
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[UUID | None] = mapped_column(
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
