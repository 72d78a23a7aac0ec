"""Service base implementing the uniform resource contract.

Every resource exposes list, get, create, update and delete with the
same semantics:

- get/update/delete on an identifier that does not resolve raise NotFound
- create receives an already validated payload; resources with
  references check them in ``before_create``
- update applies only the fields the client supplied and fails with a
  validation error when none were supplied
- delete returns the removed document
"""

from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

import structlog
from pydantic import BaseModel

from foodstall.core.database.base import Base
from foodstall.core.database.repository import Repository
from foodstall.core.errors import NotFoundError, ValidationError


ModelT = TypeVar("ModelT", bound=Base)

logger = structlog.get_logger()


class CrudService(Generic[ModelT]):
    """Business logic shared by the CRUD resources.

    Attributes:
        resource: Permission table key, also used in log events
        label: Human-readable resource name used in messages
    """

    resource: ClassVar[str]
    label: ClassVar[str]

    def __init__(self, repo: Repository[ModelT]) -> None:
        self.repo = repo

    def _event(self, action: str) -> str:
        return f"{self.resource}_{action}"

    def to_fields(self, data: BaseModel, *, partial: bool = False) -> dict[str, Any]:
        """Convert a validated payload into model attributes.

        For partial payloads only fields the client supplied with a
        non-null value are kept.
        """
        if partial:
            return data.model_dump(exclude_unset=True, exclude_none=True)
        return data.model_dump()

    async def before_create(self, fields: dict[str, Any]) -> None:
        """Hook for reference checks before a document is created."""

    async def before_update(self, document: ModelT, changes: dict[str, Any]) -> None:
        """Hook for checks on the supplied changes before they are applied."""

    async def list(self) -> list[ModelT]:
        """Return every document of the resource."""
        return await self.repo.list_all()

    async def get(self, identifier: str | UUID) -> ModelT:
        """Get a document by identifier.

        Raises:
            NotFoundError: If the identifier is absent or malformed
        """
        document = await self.repo.get_by_id(identifier)
        if document is None:
            raise NotFoundError(
                f"{self.label} not found",
                resource=self.resource,
                resource_id=str(identifier),
            )
        return document

    async def create(self, data: BaseModel) -> ModelT:
        """Create a document from a validated payload."""
        fields = self.to_fields(data)
        await self.before_create(fields)

        document = await self.repo.create(self.repo.model(**fields))
        logger.info(self._event("created"), document_id=str(document.id))
        return document

    async def update(self, identifier: str | UUID, data: BaseModel) -> ModelT:
        """Apply the supplied fields to a document.

        Raises:
            ValidationError: If the payload carries no updatable field
            NotFoundError: If the identifier does not resolve
        """
        changes = self.to_fields(data, partial=True)
        if not changes:
            raise ValidationError(
                "Please provide data to update.",
                error_code="empty_update",
            )

        document = await self.get(identifier)
        await self.before_update(document, changes)
        document = await self.repo.update(document, changes)
        logger.info(
            self._event("updated"),
            document_id=str(document.id),
            fields=sorted(changes),
        )
        return document

    async def delete(self, identifier: str | UUID) -> ModelT:
        """Delete a document and return it.

        Raises:
            NotFoundError: If the identifier does not resolve
        """
        document = await self.get(identifier)
        await self.repo.delete(document)
        logger.info(self._event("deleted"), document_id=str(document.id))
        return document
