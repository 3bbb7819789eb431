"""Key builder interface."""

from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys for single products."""

    def build(self, product_id: int) -> str:
        """Build the cache key for a product id.

        Args:
            product_id: The product's primary key.

        Returns:
            A deterministic cache key string.
        """
        ...
