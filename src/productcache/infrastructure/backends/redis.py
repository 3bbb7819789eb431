"""Redis cache backend implementation."""

from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from productcache.core.errors import CacheBackendError


class RedisCacheBackend:
    """Redis cache backend for distributed deployments.

    Supports per-key TTL and is suitable for multi-process deployments.
    Connection and command failures are raised as CacheBackendError.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        key_prefix: Optional[str] = None,
        default_ttl: Optional[int] = 60,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Optional namespace prepended to every key.
            default_ttl: Default TTL in seconds.
        """
        self._redis: redis.Redis = redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> Optional[bytes]:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        try:
            return await self._redis.get(self._prefixed_key(key))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis GET failed: {e}") from e

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses default.
        """
        prefixed_key = self._prefixed_key(key)

        try:
            if ttl is not None:
                await self._redis.set(prefixed_key, value, px=_milliseconds(ttl))
            elif self._default_ttl is not None:
                await self._redis.setex(prefixed_key, self._default_ttl, value)
            else:
                await self._redis.set(prefixed_key, value)
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis SET failed: {e}") from e

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            result = await self._redis.delete(self._prefixed_key(key))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis DEL failed: {e}") from e
        return result > 0

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        try:
            result = await self._redis.exists(self._prefixed_key(key))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis EXISTS failed: {e}") from e
        return result > 0

    async def clear(self) -> None:
        """Clear all product entries.

        Only keys under our namespace are removed, never the whole DB.
        """
        pattern = f"{self._key_prefix}:*" if self._key_prefix else "product:*"
        try:
            await self._delete_by_pattern(pattern)
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis clear failed: {e}") from e

    async def ping(self) -> bool:
        """Check that the server answers.

        Returns:
            True if the server replied to PING.
        """
        try:
            return bool(await self._redis.ping())
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"Redis PING failed: {e}") from e

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                deleted = await self._redis.delete(*keys)
                count += deleted

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: str) -> str:
        """Add the namespace to key if one is configured.

        Args:
            key: The cache key.

        Returns:
            The key with prefix.
        """
        if not self._key_prefix or key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()


def _milliseconds(ttl: timedelta) -> int:
    return max(1, int(ttl.total_seconds() * 1000))
