"""User repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from foodstall.core.database import Repository
from foodstall.modules.users.models import User


class UserRepository(Repository[User]):
    """Repository for User database operations."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address.

        Args:
            email: The user's email

        Returns:
            User if found, None otherwise
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
