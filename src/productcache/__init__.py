"""productcache - Product CRUD over a relational store with a cache-aside layer.

Single-product reads are served from a cache and fall back to the
store on a miss; updates and deletes invalidate the cached entry.
Lists are always read live. Cache failures never fail a request.

Example:
    from productcache import (
        DefaultKeyBuilder,
        InMemoryCacheBackend,
        JsonSerializer,
        ProductCache,
        ProductPatch,
        ProductRepository,
        SqliteProductStore,
    )

    store = SqliteProductStore("products.db")
    await store.connect()

    cache = ProductCache(
        backend=InMemoryCacheBackend(),
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
    )
    repository = ProductRepository(store=store, cache=cache)

    product = await repository.create("Widget", 9.5)
    product = await repository.get_by_id(product.id)  # miss, then cached
    await repository.update(product.id, ProductPatch(price=7.25))
    page = await repository.list(page=1, limit=10)

Redis backend:
    from productcache.infrastructure.backends.redis import RedisCacheBackend

    backend = RedisCacheBackend(redis_url="redis://localhost:6379/0")
"""

from productcache.config import ServiceConfig
from productcache.core.entities import Page, PageRequest, Product, ProductPatch
from productcache.core.errors import (
    CacheBackendError,
    InternalError,
    NotFound,
    ProductError,
    SerializationError,
    StoreError,
    ValidationFailed,
)
from productcache.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    IProductStore,
    ISerializer,
)
from productcache.core.services import (
    PRODUCT_CACHE_TTL,
    CacheOutcome,
    ProductCache,
    ProductRepository,
    UpdateStatementBuilder,
)
from productcache.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    JsonSerializer,
    SqliteProductStore,
)
from productcache.infrastructure.key_builders import PRODUCT_KEY_PREFIX

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "ServiceConfig",
    # Entities
    "Product",
    "ProductPatch",
    "Page",
    "PageRequest",
    # Errors
    "ProductError",
    "ValidationFailed",
    "NotFound",
    "InternalError",
    "StoreError",
    "CacheBackendError",
    "SerializationError",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IProductStore",
    "ISerializer",
    # Services
    "ProductRepository",
    "ProductCache",
    "CacheOutcome",
    "UpdateStatementBuilder",
    "PRODUCT_CACHE_TTL",
    "PRODUCT_KEY_PREFIX",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SqliteProductStore",
]
