"""Database layer - session management, base models and repositories."""

from foodstall.core.database.base import Base, DocumentMixin, TimestampMixin, UUIDMixin
from foodstall.core.database.repository import Repository, parse_identifier
from foodstall.core.database.session import (
    async_engine,
    async_session_factory,
    create_tables,
    get_db,
)


__all__ = [
    "Base",
    "DocumentMixin",
    "Repository",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "create_tables",
    "get_db",
    "parse_identifier",
]
