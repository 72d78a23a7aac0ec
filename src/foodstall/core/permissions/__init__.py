"""Role based permissions: static table, decision function and route guard."""

from foodstall.core.permissions.checker import PermissionChecker, role_allows
from foodstall.core.permissions.guards import require_permission
from foodstall.core.permissions.models import Role
from foodstall.core.permissions.table import (
    ACTIONS,
    PERMISSIONS,
    RESOURCES,
    UnknownPermissionError,
    full_permissions,
    normalize_permissions,
    permission_token,
)


__all__ = [
    "ACTIONS",
    "PERMISSIONS",
    "RESOURCES",
    "PermissionChecker",
    "Role",
    "UnknownPermissionError",
    "full_permissions",
    "normalize_permissions",
    "permission_token",
    "require_permission",
    "role_allows",
]
