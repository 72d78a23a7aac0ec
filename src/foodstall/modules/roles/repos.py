"""Role repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from foodstall.core.database import Repository
from foodstall.core.permissions.models import Role


class RoleRepository(Repository[Role]):
    """Repository for Role database operations."""

    model = Role

    async def get_by_name(self, name: str) -> Role | None:
        """Get a role by its unique name."""
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()


RoleRepo = Annotated[RoleRepository, Depends(RoleRepository)]
