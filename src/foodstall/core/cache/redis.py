"""Redis client configuration and connection management.

Provides the async Redis client with connection pooling backing the
server-side session store.
"""

import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from foodstall.config import settings


# Connection pool for efficient connection reuse
_pool: ConnectionPool | None = None


def _get_pool() -> ConnectionPool:
    """Get or create the Redis connection pool."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_url(
            str(settings.redis_url),
            max_connections=50,
            decode_responses=True,
        )
    return _pool


@asynccontextmanager
async def redis_client() -> AsyncGenerator[redis.Redis, None]:  # type: ignore[type-arg]
    """Context manager for Redis client.

    Usage:
        async with redis_client() as client:
            await client.set("key", "value")
    """
    client = redis.Redis(connection_pool=_get_pool())
    try:
        yield client
    finally:
        await client.aclose()


async def close_redis_pool() -> None:
    """Close the Redis connection pool.

    Call this during application shutdown.
    """
    global _pool
    if _pool is not None:
        await _pool.disconnect()
        _pool = None


async def ping() -> bool:
    """Check Redis connectivity."""
    async with redis_client() as client:
        return bool(await client.ping())


class RedisCache:
    """High-level Redis key/value interface with an optional key prefix."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def _key(self, key: str) -> str:
        """Generate prefixed key."""
        return f"{self.prefix}{key}" if self.prefix else key

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl_seconds: int | None = None,
    ) -> None:
        """Store a dictionary as JSON.

        Args:
            key: Cache key
            value: Dictionary to store
            ttl_seconds: Optional TTL in seconds
        """
        async with redis_client() as client:
            if ttl_seconds:
                await client.setex(self._key(key), ttl_seconds, json.dumps(value))
            else:
                await client.set(self._key(key), json.dumps(value))

    async def get_json(self, key: str) -> dict[str, Any] | None:
        """Get a JSON value.

        Returns:
            Parsed dictionary or None if not found
        """
        async with redis_client() as client:
            data = await client.get(self._key(key))
        if data:
            return json.loads(data)
        return None

    async def delete(self, key: str) -> bool:
        """Delete a key.

        Returns:
            True if key was deleted, False if it didn't exist
        """
        async with redis_client() as client:
            result = await client.delete(self._key(key))
            return result > 0
