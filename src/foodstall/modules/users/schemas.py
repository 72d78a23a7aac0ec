"""Pydantic schemas for user operations."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from foodstall.core.auth.schemas import validate_password_bytes
from foodstall.core.constants import (
    MAX_PASSWORD_LENGTH,
    MAX_ROLE_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from foodstall.core.schemas import CamelModel, DocumentResponse


class UserUpdate(CamelModel):
    """Partial user update: email, role by name, and password."""

    email: EmailStr | None = None
    role_name: str | None = Field(None, min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    new_password: str | None = Field(
        None, min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )

    @field_validator("new_password")
    @classmethod
    def password_bytes(cls, v: str | None) -> str | None:
        return v if v is None else validate_password_bytes(v)


class UserResponse(DocumentResponse):
    """User as returned to clients. The password hash is never included."""

    email: str
    role: UUID | None = None


class UserEnvelope(BaseModel):
    """Single user envelope."""

    message: str
    user: UserResponse


class UserListEnvelope(BaseModel):
    """User list envelope."""

    message: str
    users: list[UserResponse]
