"""Redis connection management."""

from foodstall.core.cache.redis import RedisCache, close_redis_pool, ping, redis_client


__all__ = [
    "RedisCache",
    "close_redis_pool",
    "ping",
    "redis_client",
]
