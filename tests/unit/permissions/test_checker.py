"""Unit tests for the permission decision function and checker."""

from itertools import product

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from foodstall.core.auth import hash_password
from foodstall.core.errors import ForbiddenError
from foodstall.core.permissions.checker import PermissionChecker, role_allows
from foodstall.core.permissions.models import Role
from foodstall.core.permissions.table import (
    ACTIONS,
    RESOURCES,
    UnknownPermissionError,
    normalize_permissions,
)
from foodstall.modules.users.models import User


pytestmark = pytest.mark.unit

ALL_PAIRS = list(product(RESOURCES, ACTIONS))

CASHIER = normalize_permissions(
    {
        "invoice": ["create", "read", "update"],
        "food": ["read"],
        "foodCategory": ["read"],
        "foodMenu": ["read"],
    }
)


class TestRoleAllows:
    """Tests for the pure decision function."""

    @pytest.mark.parametrize(("resource", "action"), ALL_PAIRS)
    def test_grants_exactly_the_listed_pairs(self, resource: str, action: str):
        """A pair is allowed if and only if the role lists it."""
        expected = action in CASHIER[resource]

        assert role_allows(CASHIER, resource, action) is expected

    @pytest.mark.parametrize(("resource", "action"), ALL_PAIRS)
    def test_single_grant_allows_only_itself(self, resource: str, action: str):
        """A role holding one pair should be denied every other pair."""
        permissions = normalize_permissions({resource: [action]})

        for other_resource, other_action in ALL_PAIRS:
            allowed = role_allows(permissions, other_resource, other_action)
            assert allowed is ((other_resource, other_action) == (resource, action))

    @pytest.mark.parametrize("permissions", [None, {}, {"food": []}])
    def test_empty_permissions_deny(self, permissions):
        """Missing or empty mappings deny everything."""
        assert role_allows(permissions, "food", "read") is False

    def test_is_deterministic(self):
        """The same inputs always yield the same verdict."""
        verdicts = {role_allows(CASHIER, "invoice", "delete") for _ in range(10)}

        assert verdicts == {False}

    def test_unknown_pair_raises(self):
        """Asking about a pair outside the table is a programming error."""
        with pytest.raises(UnknownPermissionError):
            role_allows(CASHIER, "invoice", "refund")


class TestPermissionChecker:
    """Tests for PermissionChecker class."""

    @pytest.fixture
    async def role(self, db: AsyncSession) -> Role:
        """Create cashier role."""
        role = Role(name="cashier", permissions=CASHIER)
        db.add(role)
        await db.flush()
        return role

    @pytest.fixture
    async def user(self, db: AsyncSession, role: Role) -> User:
        """Create test user holding the cashier role."""
        user = User(
            email="test@example.com",
            password_hash=hash_password("password123"),
            role=role.id,
        )
        db.add(user)
        await db.flush()
        return user

    async def test_has_permission_granted(self, db: AsyncSession, user: User):
        """User should have a permission their role lists."""
        checker = PermissionChecker(db)

        assert await checker.has_permission(user, "invoice", "create") is True

    async def test_has_permission_denied(self, db: AsyncSession, user: User):
        """User should not have a permission their role omits."""
        checker = PermissionChecker(db)

        assert await checker.has_permission(user, "invoice", "delete") is False

    async def test_require_returns_role(self, db: AsyncSession, user: User, role: Role):
        """require should return the resolved role on success."""
        checker = PermissionChecker(db)

        assert (await checker.require(user, "food", "read")).id == role.id

    async def test_require_denied(self, db: AsyncSession, user: User):
        """require should raise ForbiddenError naming the missing token."""
        checker = PermissionChecker(db)

        with pytest.raises(ForbiddenError) as exc_info:
            await checker.require(user, "food", "delete")

        assert exc_info.value.message == "Access denied. Insufficient permissions."
        assert exc_info.value.details["required_permission"] == "delete-food"

    async def test_require_role_not_found(self, db: AsyncSession, user: User, role: Role):
        """A dangling role reference should fail with role not found."""
        await db.delete(role)
        await db.flush()
        checker = PermissionChecker(db)

        with pytest.raises(ForbiddenError) as exc_info:
            await checker.require(user, "food", "read")

        assert exc_info.value.message == "User role not found."

    async def test_require_without_role(self, db: AsyncSession):
        """A user with no role reference is treated as role not found."""
        user = User(email="norole@example.com", password_hash=hash_password("x" * 8))
        db.add(user)
        await db.flush()

        with pytest.raises(ForbiddenError) as exc_info:
            await PermissionChecker(db).require(user, "food", "read")

        assert exc_info.value.error_code == "role_not_found"
