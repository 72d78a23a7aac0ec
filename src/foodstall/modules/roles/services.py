"""Role service for business logic."""

from typing import Annotated, Any

from fastapi import Depends

from foodstall.core.errors import ConflictError, NotFoundError
from foodstall.core.permissions.models import Role
from foodstall.core.services import CrudService
from foodstall.modules.roles.repos import RoleRepo, RoleRepository


class RoleService(CrudService[Role]):
    """Service for role management.

    Deleting a role does not touch the users that reference it; their
    permission checks fail with "role not found" afterwards.
    """

    resource = "role"
    label = "Role"
    repo: RoleRepository

    def __init__(self, repo: RoleRepo) -> None:
        super().__init__(repo)

    async def _ensure_name_available(self, name: str) -> None:
        if await self.repo.get_by_name(name):
            raise ConflictError(
                "Role name already in use.",
                error_code="role_exists",
                details={"name": name},
            )

    async def before_create(self, fields: dict[str, Any]) -> None:
        await self._ensure_name_available(fields["name"])

    async def before_update(self, document: Role, changes: dict[str, Any]) -> None:
        name = changes.get("name")
        if name is not None and name != document.name:
            await self._ensure_name_available(name)

    async def get_by_name(self, name: str) -> Role:
        """Get a role by name.

        Raises:
            NotFoundError: If no role has this name
        """
        role = await self.repo.get_by_name(name)
        if role is None:
            raise NotFoundError(
                "Role not found. Please provide a valid role name.",
                resource=self.resource,
                details={"name": name},
            )
        return role


RoleSvc = Annotated[RoleService, Depends(RoleService)]
