"""Server-side session store.

The session cookie carries only a random identifier. The identity it
maps to lives in the store, keyed by the SHA-256 hash of the
identifier, so destroying the entry logs the session out everywhere.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from redis.exceptions import RedisError

from foodstall.config import settings
from foodstall.core.auth.backend import generate_session_id, hash_token
from foodstall.core.cache.redis import RedisCache
from foodstall.core.constants import SESSION_KEY_PREFIX
from foodstall.core.errors import ServiceUnavailableError


logger = structlog.get_logger()


class SessionStoreError(ServiceUnavailableError):
    """Raised when the session store cannot be reached."""

    message = "Session store unavailable"
    error_code = "session_store_unavailable"


@dataclass(frozen=True)
class SessionIdentity:
    """Authenticated identity attached to a request.

    Attributes:
        session_id: The opaque identifier from the session cookie
        user_id: The user the session was established for
        created_at: When the session was established
    """

    session_id: str
    user_id: UUID
    created_at: datetime


class SessionStore(ABC):
    """Persistence contract for session identities."""

    @abstractmethod
    async def create(self, user_id: UUID) -> SessionIdentity:
        """Establish a new session for a user."""

    @abstractmethod
    async def get(self, session_id: str) -> SessionIdentity | None:
        """Resolve a session identifier, or None if unknown or expired."""

    @abstractmethod
    async def destroy(self, session_id: str) -> bool:
        """Destroy a session. Returns False if it did not exist."""


class RedisSessionStore(SessionStore):
    """Session store backed by Redis keys with a TTL.

    Redis failures are raised as SessionStoreError.
    """

    def __init__(self, ttl_seconds: int | None = None) -> None:
        self.cache = RedisCache(prefix=SESSION_KEY_PREFIX)
        self.ttl_seconds = ttl_seconds or settings.session_ttl_seconds

    async def create(self, user_id: UUID) -> SessionIdentity:
        identity = SessionIdentity(
            session_id=generate_session_id(),
            user_id=user_id,
            created_at=datetime.now(UTC),
        )
        try:
            await self.cache.set_json(
                hash_token(identity.session_id),
                {
                    "user_id": str(identity.user_id),
                    "created_at": identity.created_at.isoformat(),
                },
                ttl_seconds=self.ttl_seconds,
            )
        except RedisError as e:
            raise SessionStoreError(details={"reason": str(e)}) from e
        return identity

    async def get(self, session_id: str) -> SessionIdentity | None:
        try:
            data = await self.cache.get_json(hash_token(session_id))
        except RedisError as e:
            raise SessionStoreError(details={"reason": str(e)}) from e
        if not data:
            return None

        try:
            return SessionIdentity(
                session_id=session_id,
                user_id=UUID(data["user_id"]),
                created_at=datetime.fromisoformat(data["created_at"]),
            )
        except (KeyError, ValueError):
            logger.warning("session_payload_invalid")
            return None

    async def destroy(self, session_id: str) -> bool:
        try:
            return await self.cache.delete(hash_token(session_id))
        except RedisError as e:
            raise SessionStoreError(details={"reason": str(e)}) from e


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Dependency returning the process-wide session store."""
    global _store
    if _store is None:
        _store = RedisSessionStore()
    return _store


SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
