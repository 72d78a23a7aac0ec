"""Authentication service for registration, login and logout."""

from typing import Annotated

import structlog
from fastapi import Depends

from foodstall.core.auth.backend import pwd_context, verify_password
from foodstall.core.errors import UnauthorizedError
from foodstall.core.permissions.models import Role
from foodstall.core.sessions import SessionIdentity, SessionStoreDep
from foodstall.modules.roles.services import RoleSvc
from foodstall.modules.users.models import User
from foodstall.modules.users.services import UserSvc


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Credential verification is delegated to the password hashing
    context; session identities live in the session store.
    """

    def __init__(
        self,
        users: UserSvc,
        roles: RoleSvc,
        store: SessionStoreDep,
    ) -> None:
        self.users = users
        self.roles = roles
        self.store = store

    async def register(self, email: str, password: str, role_name: str) -> tuple[User, Role]:
        """Register a new user attached to an existing role.

        Args:
            email: User's email address
            password: Plain text password
            role_name: Name of the role to attach

        Returns:
            Tuple of (user, role)

        Raises:
            NotFoundError: If the role does not exist
            ConflictError: If email already exists
        """
        role = await self.roles.get_by_name(role_name)
        user = await self.users.create_user(email, password, role)
        return user, role

    async def authenticate(self, email: str, password: str) -> User:
        """Verify credentials.

        The failure is identical whether the email is unknown or the
        password is wrong.

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        user = await self.users.get_by_email(email)
        if user is None:
            # Spend the same hashing time as a real verification
            pwd_context.dummy_verify()
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )

        if not verify_password(password, user.password_hash):
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )

        return user

    async def login(self, email: str, password: str) -> tuple[User, SessionIdentity]:
        """Authenticate and establish a session.

        Returns:
            Tuple of (user, session identity)
        """
        user = await self.authenticate(email, password)
        identity = await self.store.create(user.id)
        logger.info("user_logged_in", user_id=str(user.id))
        return user, identity

    async def logout(self, session_id: str | None) -> bool:
        """Destroy a session identity.

        Returns:
            True if a session was destroyed
        """
        if not session_id:
            return False
        destroyed = await self.store.destroy(session_id)
        logger.info("user_logged_out", session_destroyed=destroyed)
        return destroyed

    async def role_name(self, user: User) -> str | None:
        """Name of the user's role, or None if it no longer resolves."""
        return await self.users.role_name(user)


AuthSvc = Annotated[AuthService, Depends(AuthService)]
