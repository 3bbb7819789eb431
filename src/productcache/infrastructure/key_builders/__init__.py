"""Key builder implementations."""

from productcache.infrastructure.key_builders.default import (
    PRODUCT_KEY_PREFIX,
    DefaultKeyBuilder,
)

__all__ = ["DefaultKeyBuilder", "PRODUCT_KEY_PREFIX"]
