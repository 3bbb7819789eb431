"""Core domain layer for productcache."""

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
    CacheOutcome,
    ProductCache,
    ProductRepository,
)

__all__ = [
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
    "CacheOutcome",
    "ProductCache",
    "ProductRepository",
]
