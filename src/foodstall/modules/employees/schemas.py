"""Pydantic schemas for employee operations."""

from uuid import UUID

from pydantic import BaseModel, Field

from foodstall.core.constants import MAX_NAME_LENGTH, MAX_SHORT_TEXT_LENGTH
from foodstall.core.schemas import CamelModel, DocumentResponse


class EmployeeCreate(CamelModel):
    """Schema for creating an employee.

    ``roleId`` must be a well-formed identifier but is not required to
    resolve to an existing role.
    """

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    address: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    role_id: UUID
    date_of_birth: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    created_date: str = Field(..., min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)


class EmployeeUpdate(CamelModel):
    """Schema for a partial employee update."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    address: str | None = Field(None, min_length=1)
    phone_number: str | None = Field(None, min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    role_id: UUID | None = None
    date_of_birth: str | None = Field(None, min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)
    created_date: str | None = Field(None, min_length=1, max_length=MAX_SHORT_TEXT_LENGTH)


class EmployeeResponse(DocumentResponse):
    """Employee as returned to clients."""

    name: str
    address: str
    phone_number: str
    role_id: UUID
    date_of_birth: str
    created_date: str


class EmployeeEnvelope(BaseModel):
    message: str
    employee: EmployeeResponse


class EmployeeListEnvelope(BaseModel):
    message: str
    employees: list[EmployeeResponse]
