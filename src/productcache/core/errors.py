"""Error types for productcache.

Caller-facing errors derive from ProductError. Adapter-level errors
(StoreError, CacheBackendError, SerializationError) are raised by the
leaf adapters and translated or absorbed by the core services.
"""


class ProductError(Exception):
    """Base class for errors reported to callers of the repository."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailed(ProductError):
    """Raised when caller-supplied input is missing or invalid."""

    pass


class NotFound(ProductError):
    """Raised when no product exists with the requested id."""

    def __init__(self, product_id: int, message: str = "Product not found") -> None:
        self.product_id = product_id
        super().__init__(message)


class InternalError(ProductError):
    """Raised when the relational store fails.

    The message is generic; the underlying cause is chained.
    """

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message)


class StoreError(Exception):
    """Raised by store adapters when a query cannot be executed."""

    pass


class CacheBackendError(Exception):
    """Raised by cache backends when the cache is unreachable or fails."""

    pass


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass
