"""Role database model.

A role is a named bundle of granted actions per resource. Users hold a
weak reference to exactly one role.
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from foodstall.core.constants import MAX_ROLE_NAME_LENGTH
from foodstall.core.database.base import Base, DocumentMixin
from foodstall.core.permissions.table import RESOURCES


class Role(Base, DocumentMixin):
    """Role model.

    Attributes:
        name: Unique role name (e.g., "admin", "cashier")
        permissions: Mapping of resource to the list of granted action names
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(MAX_ROLE_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    permissions: Mapped[dict[str, list[str]]] = mapped_column(
        JSON,
        nullable=False,
        default=lambda: {resource: [] for resource in RESOURCES},
    )

    def has_permission(self, resource: str, action: str) -> bool:
        """Check if this role grants an action on a resource."""
        from foodstall.core.permissions.checker import role_allows  # noqa: PLC0415

        return role_allows(self.permissions, resource, action)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
