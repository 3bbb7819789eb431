"""Serializer interface."""

from typing import Protocol

from productcache.core.entities.product import Product


class ISerializer(Protocol):
    """Contract for encoding products for cache storage.

    The encoding must round-trip ``id``, ``name`` and ``price`` exactly.
    """

    def serialize(self, product: Product) -> bytes:
        """Serialize a product to bytes.

        Raises:
            SerializationError: If the product cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> Product:
        """Deserialize bytes to a product.

        Raises:
            SerializationError: If the data is corrupt or not a product.
        """
        ...
