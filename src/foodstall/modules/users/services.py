"""User service for business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from foodstall.core.auth.backend import hash_password
from foodstall.core.errors import ConflictError, ValidationError
from foodstall.core.permissions.models import Role
from foodstall.core.services import CrudService
from foodstall.modules.roles.services import RoleSvc
from foodstall.modules.users.models import User
from foodstall.modules.users.repos import UserRepo, UserRepository
from foodstall.modules.users.schemas import UserUpdate


logger = structlog.get_logger()


class UserService(CrudService[User]):
    """Service for user management operations.

    Contains business logic for user CRUD operations,
    password management, and user queries.
    """

    resource = "user"
    label = "User"
    repo: UserRepository

    def __init__(self, repo: UserRepo, roles: RoleSvc) -> None:
        super().__init__(repo)
        self.roles = roles

    async def _ensure_email_available(self, email: str) -> None:
        if await self.repo.get_by_email(email):
            raise ConflictError(
                "Email already in use.",
                error_code="email_exists",
                details={"email": email},
            )

    async def create_user(self, email: str, password: str, role: Role) -> User:
        """Create a new user with a hashed password.

        Args:
            email: Login email
            password: Plain text password
            role: The role the user is attached to

        Returns:
            The created user

        Raises:
            ConflictError: If the email is already registered
        """
        await self._ensure_email_available(email)

        user = User(
            email=email,
            password_hash=hash_password(password),
            role=role.id,
        )
        user = await self.repo.create(user)
        logger.info("user_created", user_id=str(user.id), role=role.name)
        return user

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, or None."""
        return await self.repo.get_by_email(email)

    async def role_name(self, user: User) -> str | None:
        """Name of the user's role, or None if it no longer resolves."""
        if user.role is None:
            return None
        role = await self.roles.repo.get_by_id(user.role)
        return role.name if role else None

    async def update_user(self, identifier: str | UUID, data: UserUpdate) -> User:
        """Update a user's email, role and/or password.

        Raises:
            ValidationError: If no field was supplied
            NotFoundError: If the user or the named role does not exist
            ConflictError: If the new email belongs to another user
        """
        if not data.model_dump(exclude_unset=True, exclude_none=True):
            raise ValidationError(
                "Please provide data to update.",
                error_code="empty_update",
            )

        user = await self.get(identifier)
        changes: dict[str, object] = {}

        if data.email and data.email != user.email:
            await self._ensure_email_available(data.email)
            changes["email"] = data.email

        if data.role_name:
            role = await self.roles.get_by_name(data.role_name)
            changes["role"] = role.id

        if data.new_password:
            changes["password_hash"] = hash_password(data.new_password)

        user = await self.repo.update(user, changes)
        logger.info(
            "user_updated",
            user_id=str(user.id),
            fields=sorted(key for key in changes if key != "password_hash"),
            password_changed="password_hash" in changes,
        )
        return user


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
