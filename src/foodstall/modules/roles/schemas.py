"""Pydantic schemas for role operations."""

from pydantic import BaseModel, Field, field_validator

from foodstall.core.constants import MAX_ROLE_NAME_LENGTH
from foodstall.core.permissions.table import normalize_permissions
from foodstall.core.schemas import CamelModel, DocumentResponse


class RoleCreate(CamelModel):
    """Schema for creating a role.

    Permission entries may be action names or full permission tokens.
    """

    name: str = Field(..., min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    permissions: dict[str, list[str]] = Field(default_factory=dict, validate_default=True)

    @field_validator("permissions")
    @classmethod
    def normalize(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Resolve entries to action names and reject unknown ones."""
        return normalize_permissions(v)


class RoleUpdate(CamelModel):
    """Schema for updating a role. A supplied mapping replaces the stored one."""

    name: str | None = Field(None, min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    permissions: dict[str, list[str]] | None = None

    @field_validator("permissions")
    @classmethod
    def normalize(cls, v: dict[str, list[str]] | None) -> dict[str, list[str]] | None:
        """Resolve entries to action names and reject unknown ones."""
        if v is None:
            return None
        return normalize_permissions(v)


class RoleResponse(DocumentResponse):
    """Role as returned to clients."""

    name: str
    permissions: dict[str, list[str]]


class RoleEnvelope(BaseModel):
    """Single role envelope."""

    message: str
    role: RoleResponse


class RoleListEnvelope(BaseModel):
    """Role list envelope."""

    message: str
    roles: list[RoleResponse]
