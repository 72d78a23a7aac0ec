"""Static permission table.

Maps every protected resource and action to its permission token. The
table is built once at import time and is read-only for the lifetime of
the process.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType


RESOURCES: tuple[str, ...] = (
    "user",
    "food",
    "foodCategory",
    "foodMenu",
    "invoice",
    "employee",
    "role",
)

ACTIONS: tuple[str, ...] = ("create", "read", "update", "delete")


class UnknownPermissionError(ValueError):
    """Raised for a resource or action that is not in the permission table."""


def _token(resource: str, action: str) -> str:
    return f"{action}-{resource}"


PERMISSIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        resource: MappingProxyType({action: _token(resource, action) for action in ACTIONS})
        for resource in RESOURCES
    }
)


def permission_token(resource: str, action: str) -> str:
    """Look up the token for a (resource, action) pair.

    Raises:
        UnknownPermissionError: If the pair is not in the table
    """
    try:
        return PERMISSIONS[resource][action]
    except KeyError:
        raise UnknownPermissionError(f"Unknown permission: {resource}:{action}") from None


def normalize_action(resource: str, entry: str) -> str:
    """Resolve a role permission entry to an action name.

    Entries may be given either as the bare action (``"create"``) or as
    the full token (``"create-food"``).

    Raises:
        UnknownPermissionError: If the entry names no action of the resource
    """
    actions = PERMISSIONS.get(resource)
    if actions is None:
        raise UnknownPermissionError(f"Unknown resource: {resource}")
    if entry in actions:
        return entry
    for action, token in actions.items():
        if entry == token:
            return action
    raise UnknownPermissionError(f"Unknown action for {resource}: {entry}")


def normalize_permissions(
    permissions: Mapping[str, Iterable[str]],
) -> dict[str, list[str]]:
    """Normalize a role's permission mapping.

    Every resource of the table appears in the result; actions are
    deduplicated and listed in table order.

    Raises:
        UnknownPermissionError: On an unknown resource or action
    """
    granted: dict[str, set[str]] = {resource: set() for resource in RESOURCES}
    for resource, entries in permissions.items():
        if resource not in PERMISSIONS:
            raise UnknownPermissionError(f"Unknown resource: {resource}")
        granted[resource].update(normalize_action(resource, entry) for entry in entries)

    return {
        resource: [action for action in ACTIONS if action in granted[resource]]
        for resource in RESOURCES
    }


def full_permissions() -> dict[str, list[str]]:
    """Every action on every resource."""
    return {resource: list(ACTIONS) for resource in RESOURCES}
