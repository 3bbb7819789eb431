"""Infrastructure layer implementations for productcache."""

from productcache.infrastructure.backends import InMemoryCacheBackend
from productcache.infrastructure.key_builders import DefaultKeyBuilder
from productcache.infrastructure.serializers import JsonSerializer
from productcache.infrastructure.stores import SqliteProductStore

__all__ = [
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SqliteProductStore",
]
