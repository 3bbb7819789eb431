"""Product cache - best-effort cache access for single products."""

import logging
from dataclasses import dataclass
from datetime import timedelta

from productcache.core.entities.product import Product
from productcache.core.errors import CacheBackendError, SerializationError
from productcache.core.interfaces.cache_backend import ICacheBackend
from productcache.core.interfaces.key_builder import IKeyBuilder
from productcache.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)

PRODUCT_CACHE_TTL = timedelta(seconds=60)


@dataclass(frozen=True)
class CacheOutcome:
    """Result of a cache call.

    Cache calls never raise. A failure is reported through ``error``
    and must only be used for observability, never for control flow
    towards the caller.
    """

    value: Product | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Check if the call completed without a cache failure."""
        return self.error is None

    @property
    def hit(self) -> bool:
        """Check if a usable product was found."""
        return self.value is not None


class ProductCache:
    """Composes backend, key builder, and serializer for product entries.

    Every failure of the backend or the serializer is logged, counted
    as a degradation, and returned inside a CacheOutcome.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        ttl: timedelta = PRODUCT_CACHE_TTL,
    ) -> None:
        """Initialize the product cache.

        Args:
            backend: The cache backend to use for storage.
            key_builder: The key builder for product keys.
            serializer: The serializer for encoding/decoding products.
            ttl: Time-to-live for every entry written.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._ttl = ttl

        # Statistics
        self._hits = 0
        self._misses = 0
        self._degraded = 0

    @property
    def ttl(self) -> timedelta:
        """Get the entry time-to-live."""
        return self._ttl

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, degraded calls, and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "degraded": self._degraded,
            "total": self._hits + self._misses,
        }

    def key_for(self, product_id: int) -> str:
        """Return the cache key of a product."""
        return self._key_builder.build(product_id)

    async def fetch(self, product_id: int) -> CacheOutcome:
        """Look up a product.

        An absent entry, an unreachable cache, and an undecodable payload
        all count as a miss.

        Args:
            product_id: The product id to look up.

        Returns:
            An outcome holding the product on a hit.
        """
        key = self.key_for(product_id)

        try:
            data = await self._backend.get(key)
        except CacheBackendError as e:
            self._misses += 1
            return self._degrade("get", key, e)

        if data is None:
            self._misses += 1
            logger.debug("Cache miss for product id: %s", product_id)
            return CacheOutcome()

        try:
            product = self._serializer.deserialize(data)
            if product.id != product_id:
                raise SerializationError(
                    f"Cached payload holds product {product.id}"
                )
        except SerializationError as e:
            self._misses += 1
            return self._degrade("decode", key, e)

        self._hits += 1
        logger.debug("Cache hit for product id: %s", product_id)
        return CacheOutcome(value=product)

    async def store(self, product: Product) -> CacheOutcome:
        """Write a product with the configured TTL.

        Args:
            product: The product just read from the store.

        Returns:
            An outcome carrying the error if the write failed.
        """
        key = self.key_for(product.id)

        try:
            payload = self._serializer.serialize(product)
            await self._backend.set(key, payload, self._ttl)
        except (CacheBackendError, SerializationError) as e:
            return self._degrade("set", key, e)

        return CacheOutcome(value=product)

    async def evict(self, product_id: int) -> CacheOutcome:
        """Delete a product's entry.

        Args:
            product_id: The product whose entry is removed.

        Returns:
            An outcome carrying the error if the delete failed.
        """
        key = self.key_for(product_id)

        try:
            await self._backend.delete(key)
        except CacheBackendError as e:
            return self._degrade("delete", key, e)

        logger.debug("Invalidated cache key: %s", key)
        return CacheOutcome()

    async def clear(self) -> None:
        """Clear all cached entries and reset statistics."""
        await self._backend.clear()
        self._hits = 0
        self._misses = 0
        self._degraded = 0

    def _degrade(self, action: str, key: str, error: Exception) -> CacheOutcome:
        self._degraded += 1
        logger.warning("Cache %s failed for key %s: %s", action, key, error)
        return CacheOutcome(error=error)
