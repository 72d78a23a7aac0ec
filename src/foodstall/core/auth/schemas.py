"""Authentication request and response schemas."""

from pydantic import EmailStr, Field, field_validator

from foodstall.core.constants import (
    MAX_PASSWORD_BYTES,
    MAX_PASSWORD_LENGTH,
    MAX_ROLE_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from foodstall.core.schemas import CamelModel


def validate_password_bytes(password: str) -> str:
    """Reject passwords longer than bcrypt can hash.

    bcrypt only reads the first 72 bytes, so two longer passwords
    sharing that prefix would both verify.

    Raises:
        ValueError: If the UTF-8 encoded password exceeds the limit
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


class RegisterRequest(CamelModel):
    """Registration payload.

    ``roleName`` is optional on the wire; each registration route
    decides what an absent role means.
    """

    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    role_name: str | None = Field(None, min_length=1, max_length=MAX_ROLE_NAME_LENGTH)

    @field_validator("password")
    @classmethod
    def password_bytes(cls, v: str) -> str:
        return validate_password_bytes(v)


class LoginRequest(CamelModel):
    """Login payload."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserDetails(CamelModel):
    """Public identity of a user: email and role name."""

    email: str
    role: str | None = None


class RegisterResponse(CamelModel):
    """Response for a successful registration."""

    message: str
    user_details: UserDetails


class LoginResponse(CamelModel):
    """Response for a successful login."""

    message: str
    user: UserDetails


class LogoutResponse(CamelModel):
    """Response for a logout attempt."""

    status: bool
    message: str
