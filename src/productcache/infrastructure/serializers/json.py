"""JSON serializer implementation."""

import json

from productcache.core.entities.product import Product
from productcache.core.errors import SerializationError


class JsonSerializer:
    """JSON serializer for cached products.

    Encodes a product as ``{"id": ..., "name": ..., "price": ...}``
    and validates the shape on the way back, so a payload written by an
    incompatible version reads as corrupt rather than as a bad product.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, product: Product) -> bytes:
        """Serialize a product to bytes.

        Args:
            product: The product to serialize.

        Returns:
            The serialized product as bytes.

        Raises:
            SerializationError: If the product cannot be serialized.
        """
        try:
            json_str = json.dumps(product.to_dict(), allow_nan=False)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize product: {e}") from e

    def deserialize(self, data: bytes) -> Product:
        """Deserialize bytes to a product.

        Args:
            data: The bytes to deserialize.

        Returns:
            The decoded product.

        Raises:
            SerializationError: If the data is not a valid product payload.
        """
        try:
            json_str = data.decode(self._encoding)
            return Product.from_dict(json.loads(json_str))
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; deep nesting exhausts the stack
            raise SerializationError(f"Failed to deserialize data: {e}") from e
