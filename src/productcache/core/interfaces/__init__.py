"""Core interfaces (Protocol classes) for productcache."""

from productcache.core.interfaces.cache_backend import ICacheBackend
from productcache.core.interfaces.key_builder import IKeyBuilder
from productcache.core.interfaces.product_store import IProductStore
from productcache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IProductStore",
    "ISerializer",
]
