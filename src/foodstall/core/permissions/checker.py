"""Permission checking logic.

The decision itself is a pure function of the role's permission mapping
and the requested (resource, action); the checker only adds the role
lookup for an authenticated user.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from foodstall.core.errors import ForbiddenError
from foodstall.core.permissions.models import Role
from foodstall.core.permissions.table import permission_token


if TYPE_CHECKING:
    from foodstall.modules.users.models import User


logger = structlog.get_logger()


def role_allows(
    permissions: Mapping[str, Iterable[str]] | None,
    resource: str,
    action: str,
) -> bool:
    """Decide whether a permission mapping grants an action on a resource.

    Args:
        permissions: The role's resource to actions mapping
        resource: The resource being accessed (e.g., "food")
        action: The action being performed (e.g., "delete")

    Returns:
        True only if the resource's entry lists the action
    """
    permission_token(resource, action)
    if not permissions:
        return False
    return action in (permissions.get(resource) or ())


class PermissionChecker:
    """Service for checking a user's permissions through their role."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_role(self, user: "User") -> Role | None:
        """Load the role a user references, if it still exists."""
        if user.role is None:
            return None
        return await self.session.get(Role, user.role)

    async def has_permission(self, user: "User", resource: str, action: str) -> bool:
        """Check if a user's role grants the action.

        Returns False when the role does not resolve.
        """
        role = await self.get_role(user)
        return role is not None and role.has_permission(resource, action)

    async def require(self, user: "User", resource: str, action: str) -> Role:
        """Ensure a user's role grants the action.

        Returns:
            The resolved role

        Raises:
            ForbiddenError: If the role does not resolve or lacks the action
        """
        token = permission_token(resource, action)

        role = await self.get_role(user)
        if role is None:
            logger.warning("role_not_found", user_id=str(user.id), role_id=str(user.role))
            raise ForbiddenError(
                "User role not found.",
                error_code="role_not_found",
            )

        if not role.has_permission(resource, action):
            logger.warning(
                "permission_denied",
                user_id=str(user.id),
                role=role.name,
                required_permission=token,
            )
            raise ForbiddenError(
                "Access denied. Insufficient permissions.",
                error_code="permission_denied",
                details={"required_permission": token},
            )

        return role
