"""FastAPI dependencies for authentication.

This module provides the session gate:
- Resolving the session cookie to a session identity
- Rejecting requests without a valid session
- Loading the user the session belongs to
"""

from typing import TYPE_CHECKING, Annotated, Any

import structlog
from fastapi import Depends, Request

from foodstall.api.dependencies import DBSession
from foodstall.config import settings
from foodstall.core.errors import UnauthorizedError
from foodstall.core.sessions import SessionIdentity, SessionStoreDep


if TYPE_CHECKING:
    from foodstall.modules.users.models import User


NOT_LOGGED_IN = "You must be logged in to access this resource."


async def get_session_identity(
    request: Request,
    store: SessionStoreDep,
) -> SessionIdentity | None:
    """Resolve the session cookie to an identity, if any.

    Args:
        request: The incoming request
        store: The session store

    Returns:
        The session identity, or None if the cookie is absent or unknown
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        return None
    return await store.get(session_id)


OptionalSession = Annotated[SessionIdentity | None, Depends(get_session_identity)]


async def require_session(identity: OptionalSession) -> SessionIdentity:
    """Session gate: reject requests that carry no authenticated identity.

    Raises:
        UnauthorizedError: If the request is not authenticated
    """
    if identity is None:
        raise UnauthorizedError(NOT_LOGGED_IN, error_code="auth_required")
    return identity


CurrentSession = Annotated[SessionIdentity, Depends(require_session)]


async def get_current_user(
    request: Request,
    identity: CurrentSession,
    db: DBSession,
) -> "User":
    """Get the user the current session belongs to.

    Raises:
        UnauthorizedError: If the user has been deleted since login
    """
    from foodstall.modules.users.repos import UserRepository  # noqa: PLC0415

    user = await UserRepository(db).get_by_id(identity.user_id)
    if user is None:
        raise UnauthorizedError(NOT_LOGGED_IN, error_code="user_not_found")

    request.state.user_id = user.id
    structlog.contextvars.bind_contextvars(user_id=str(user.id))
    return user


# Use Any for User type to avoid circular imports at runtime
CurrentUser = Annotated[Any, Depends(get_current_user)]
