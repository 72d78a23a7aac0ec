"""Server-side sessions keyed by an opaque cookie identifier."""

from foodstall.core.sessions.store import (
    RedisSessionStore,
    SessionIdentity,
    SessionStore,
    SessionStoreDep,
    SessionStoreError,
    get_session_store,
)


__all__ = [
    "RedisSessionStore",
    "SessionIdentity",
    "SessionStore",
    "SessionStoreDep",
    "SessionStoreError",
    "get_session_store",
]
