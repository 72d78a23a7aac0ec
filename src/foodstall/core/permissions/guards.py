"""Permission guard for route protection.

This module provides a route dependency requiring a specific
permission. Route dependencies are resolved before the request body is
validated, so the session gate and then the permission gate answer
before the handler sees any input.
"""

from fastapi import Depends
from fastapi.params import Depends as DependsParam

from foodstall.api.dependencies import DBSession
from foodstall.core.auth.dependencies import CurrentUser
from foodstall.core.permissions.checker import PermissionChecker
from foodstall.core.permissions.models import Role
from foodstall.core.permissions.table import permission_token


def require_permission(resource: str, action: str) -> DependsParam:
    """Route dependency that requires a specific permission.

    Resolving ``CurrentUser`` is the session gate and rejects
    unauthenticated requests before the permission is checked.

    Usage:
        @router.delete(
            "/deleteFood/{food_id}",
            dependencies=[require_permission("food", "delete")],
        )
        async def delete_food(food_id: str, service: FoodSvc):
            ...

    Args:
        resource: The resource being accessed (e.g., "food")
        action: The action being performed (e.g., "delete")

    Raises:
        UnknownPermissionError: At import time, if the pair is not in
            the permission table
    """
    permission_token(resource, action)

    async def check_permission(current_user: CurrentUser, db: DBSession) -> Role:
        return await PermissionChecker(db).require(current_user, resource, action)

    return Depends(check_permission)
