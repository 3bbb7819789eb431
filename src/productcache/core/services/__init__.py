"""Domain services for productcache."""

from productcache.core.services.product_cache import (
    PRODUCT_CACHE_TTL,
    CacheOutcome,
    ProductCache,
)
from productcache.core.services.product_repository import ProductRepository
from productcache.core.services.update_builder import (
    NUMERIC_DOLLAR,
    QMARK,
    UpdateStatement,
    UpdateStatementBuilder,
)

__all__ = [
    "ProductRepository",
    "ProductCache",
    "CacheOutcome",
    "PRODUCT_CACHE_TTL",
    # Partial update statements
    "UpdateStatement",
    "UpdateStatementBuilder",
    "QMARK",
    "NUMERIC_DOLLAR",
]
