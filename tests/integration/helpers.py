"""Helpers shared by integration tests."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession


async def count_rows(db: AsyncSession, model: type) -> int:
    """Number of stored documents of a model."""
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()
