"""Domain entities for productcache."""

from productcache.core.entities.page import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    Page,
    PageRequest,
)
from productcache.core.entities.product import (
    UPDATABLE_COLUMNS,
    Product,
    ProductPatch,
)

__all__ = [
    "Product",
    "ProductPatch",
    "UPDATABLE_COLUMNS",
    "Page",
    "PageRequest",
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
]
