"""Cache backend implementations.

The Redis backend needs the ``redis`` extra and is imported from
``productcache.infrastructure.backends.redis`` directly.
"""

from productcache.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
