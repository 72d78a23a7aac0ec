"""Default roles.

``register-dev`` attaches new users to a role by name, so a fresh
database needs at least one role before anybody can log in.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from foodstall.core.permissions.models import Role
from foodstall.core.permissions.table import full_permissions, normalize_permissions


logger = structlog.get_logger()


DEFAULT_ROLES: dict[str, dict[str, list[str]]] = {
    "admin": full_permissions(),
    "cashier": normalize_permissions(
        {
            "invoice": ["create", "read", "update"],
            "food": ["read"],
            "foodCategory": ["read"],
            "foodMenu": ["read"],
        }
    ),
}


async def seed_roles(session: AsyncSession) -> list[Role]:
    """Create the default roles that do not exist yet.

    Existing roles are left untouched, so running this twice is safe.

    Returns:
        The roles that were created
    """
    result = await session.execute(select(Role.name).where(Role.name.in_(DEFAULT_ROLES)))
    existing = set(result.scalars().all())

    created: list[Role] = []
    for name, permissions in DEFAULT_ROLES.items():
        if name in existing:
            logger.info("role_exists", role=name)
            continue
        role = Role(name=name, permissions=permissions)
        session.add(role)
        created.append(role)
        logger.info("role_seeded", role=name)

    await session.flush()
    return created
