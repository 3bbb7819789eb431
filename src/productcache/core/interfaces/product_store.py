"""Relational store interface."""

from typing import Protocol

from productcache.core.entities.product import Product, ProductPatch


class IProductStore(Protocol):
    """Contract for the durable product table.

    The store is the source of truth. Every method is a single
    parameterized statement; driver failures must be raised as
    StoreError.
    """

    async def count(self) -> int:
        """Return the number of rows in the table."""
        ...

    async def query_page(self, limit: int, offset: int) -> list[Product]:
        """Return up to ``limit`` rows ordered by ascending id.

        Args:
            limit: Maximum number of rows.
            offset: Number of rows to skip.
        """
        ...

    async def get(self, product_id: int) -> Product | None:
        """Return the row with the given id, or None."""
        ...

    async def insert(self, name: str, price: float) -> Product:
        """Insert a row and return it with its generated id."""
        ...

    async def update_fields(
        self,
        product_id: int,
        patch: ProductPatch,
    ) -> Product | None:
        """Assign the supplied fields and return the updated row.

        The write and the read-back happen in one statement.

        Returns:
            The updated product, or None if no row has the id.
        """
        ...

    async def delete(self, product_id: int) -> int:
        """Delete the row with the given id.

        Returns:
            Number of rows affected (0 or 1).
        """
        ...
