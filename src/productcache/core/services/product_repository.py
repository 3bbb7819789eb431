"""Product repository - cache-aside reads and write invalidation."""

import logging
import math

from productcache.core.entities.page import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    Page,
    PageRequest,
)
from productcache.core.entities.product import Product, ProductPatch
from productcache.core.errors import (
    InternalError,
    NotFound,
    StoreError,
    ValidationFailed,
)
from productcache.core.interfaces.product_store import IProductStore
from productcache.core.services.product_cache import ProductCache

logger = logging.getLogger(__name__)


class ProductRepository:
    """Domain service for product CRUD.

    Single-product reads go through the cache and fall back to the
    store on any kind of miss. Updates and deletes remove the cached
    entry after the store write succeeds; the next read repopulates it.
    Lists and counts always hit the store.

    The repository holds no per-request state and no locks, so one
    instance can serve many concurrent tasks. Concurrent writers to the
    same id are not serialized.
    """

    def __init__(self, store: IProductStore, cache: ProductCache) -> None:
        """Initialize the repository.

        Args:
            store: The relational store, source of truth.
            cache: The product cache, best effort only.
        """
        self._store = store
        self._cache = cache

    @property
    def cache(self) -> ProductCache:
        """Get the product cache."""
        return self._cache

    async def get_by_id(self, product_id: int) -> Product:
        """Return the current product.

        A cached copy may be up to the cache TTL older than the store.

        Args:
            product_id: The product id.

        Returns:
            The product.

        Raises:
            NotFound: If no product has the id.
            InternalError: If the store fails.
        """
        cached = await self._cache.fetch(product_id)
        if cached.value is not None:
            return cached.value

        try:
            product = await self._store.get(product_id)
        except StoreError as e:
            logger.exception("Failed to fetch product id: %s", product_id)
            raise InternalError() from e

        if product is None:
            raise NotFound(product_id)

        await self._cache.store(product)
        logger.debug("Data retrieved from store for product id: %s", product_id)
        return product

    async def list(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> Page:
        """Return one page of products ordered by id.

        The count and the rows are read in separate statements, so
        concurrent inserts or deletes can shift page boundaries between
        them.

        Args:
            page: 1-based page number; values below 1 mean 1.
            limit: Page size; values outside [1, 100] mean 10.

        Returns:
            The page with its metadata.

        Raises:
            InternalError: If the store fails.
        """
        request = PageRequest.normalize(page, limit)

        try:
            total = await self._store.count()
        except StoreError as e:
            logger.exception("Failed to count products")
            raise InternalError("Failed to count products") from e

        try:
            rows = await self._store.query_page(request.limit, request.offset)
        except StoreError as e:
            logger.exception("Failed to fetch products page %s", request.page)
            raise InternalError("Failed to fetch products") from e

        return Page(
            page=request.page,
            limit=request.limit,
            total=total,
            items=tuple(rows),
        )

    async def create(self, name: str, price: float) -> Product:
        """Insert a new product.

        Nothing is cached; the first read populates the cache.

        Args:
            name: Non-empty product name.
            price: Price greater than zero.

        Returns:
            The product with its store-assigned id.

        Raises:
            ValidationFailed: If name or price is invalid.
            InternalError: If the store fails.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationFailed("name must be a non-empty string")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationFailed("price must be a number")
        if not math.isfinite(price) or price <= 0:
            raise ValidationFailed("price must be greater than zero")

        try:
            product = await self._store.insert(name, float(price))
        except StoreError as e:
            logger.exception("Failed to create product")
            raise InternalError("Failed to create product") from e

        logger.info("Created product id: %s", product.id)
        return product

    async def update(self, product_id: int, patch: ProductPatch) -> Product:
        """Apply a partial update.

        Unsupplied fields keep their stored values. On success the cache
        entry is deleted, not rewritten.

        Args:
            product_id: The product id.
            patch: Fields to change.

        Returns:
            The updated product as returned by the store.

        Raises:
            ValidationFailed: If the patch supplies no field.
            NotFound: If no product has the id.
            InternalError: If the store fails.
        """
        if patch.is_empty:
            raise ValidationFailed("no valid fields provided for update")

        try:
            product = await self._store.update_fields(product_id, patch)
        except StoreError as e:
            logger.exception("Failed to update product id: %s", product_id)
            raise InternalError("Failed to update product") from e

        if product is None:
            raise NotFound(product_id)

        await self._cache.evict(product_id)
        return product

    async def delete(self, product_id: int) -> None:
        """Delete a product and invalidate its cache entry.

        The store delete happens before the cache delete. A failed cache
        delete is not reported; the stale entry expires with its TTL.

        Args:
            product_id: The product id.

        Raises:
            NotFound: If no product has the id.
            InternalError: If the store fails.
        """
        try:
            affected = await self._store.delete(product_id)
        except StoreError as e:
            logger.exception("Failed to delete product id: %s", product_id)
            raise InternalError("Failed to delete product") from e

        if affected == 0:
            raise NotFound(product_id)

        await self._cache.evict(product_id)
