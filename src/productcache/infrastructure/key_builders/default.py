"""Default key builder implementation."""

PRODUCT_KEY_PREFIX = "product"


class DefaultKeyBuilder:
    """Builds ``<prefix>:<id>`` keys, ``product:42`` by default."""

    def __init__(self, prefix: str = PRODUCT_KEY_PREFIX) -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all product keys.
        """
        if not prefix:
            raise ValueError("Key prefix must not be empty")
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Return the key prefix."""
        return self._prefix

    def build(self, product_id: int) -> str:
        """Build the cache key for a product id.

        Args:
            product_id: The product's primary key.

        Returns:
            The cache key.
        """
        return f"{self._prefix}:{product_id}"
