"""Generic repository over a single document table."""

from typing import Annotated, Any, ClassVar, Generic, TypeVar
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from foodstall.core.database.base import Base
from foodstall.core.database.session import get_db


ModelT = TypeVar("ModelT", bound=Base)


def parse_identifier(identifier: str | UUID) -> UUID | None:
    """Parse an opaque identifier into a UUID.

    Args:
        identifier: Identifier as received from the client

    Returns:
        The UUID, or None if the value is malformed
    """
    if isinstance(identifier, UUID):
        return identifier
    try:
        return UUID(identifier)
    except (TypeError, ValueError):
        return None


class Repository(Generic[ModelT]):
    """Repository for the CRUD operations shared by every resource.

    Each operation is a single statement against one table. Subclasses
    set ``model`` and add resource specific lookups.
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.session = session

    async def list_all(self) -> list[ModelT]:
        """Return every document in storage order."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def get_by_id(self, identifier: str | UUID) -> ModelT | None:
        """Get a document by identifier.

        Args:
            identifier: The document identifier

        Returns:
            The document, or None if absent or the identifier is malformed
        """
        document_id = parse_identifier(identifier)
        if document_id is None:
            return None
        return await self.session.get(self.model, document_id)

    async def exists(self, identifier: str | UUID) -> bool:
        """Check whether a document with this identifier exists."""
        document_id = parse_identifier(identifier)
        if document_id is None:
            return False
        stmt = select(self.model.id).where(self.model.id == document_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, document: ModelT) -> ModelT:
        """Persist a new document.

        Args:
            document: Model instance to insert

        Returns:
            The created document with server-assigned fields populated
        """
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def update(self, document: ModelT, changes: dict[str, Any]) -> ModelT:
        """Apply field changes to a document.

        Args:
            document: The document to modify
            changes: Attribute name to new value

        Returns:
            The document as stored after the change
        """
        for field, value in changes.items():
            setattr(document, field, value)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def delete(self, document: ModelT) -> None:
        """Delete a document."""
        await self.session.delete(document)
        await self.session.flush()
