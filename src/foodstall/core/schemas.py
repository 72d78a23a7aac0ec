"""Base schemas shared by every resource."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema exchanged with clients using camelCase field names.

    Python code uses snake_case attribute names; either form is accepted
    on input and camelCase is produced on output.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DocumentResponse(CamelModel):
    """Server-assigned fields present on every stored document."""

    id: UUID
    created_at: datetime
    updated_at: datetime
