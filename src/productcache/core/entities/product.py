"""Product entities."""

import math
from dataclasses import asdict, dataclass
from typing import Any

# Columns an update may assign, in statement order.
UPDATABLE_COLUMNS: tuple[str, ...] = ("name", "price")


@dataclass(frozen=True)
class Product:
    """Immutable product value object.

    A product's canonical state lives in the relational store; any
    instance built from a cache payload is a possibly-stale copy.
    """

    id: int
    name: str
    price: float

    def to_dict(self) -> dict[str, Any]:
        """Return the product as a JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        """Build a product from a decoded mapping.

        Args:
            data: Mapping with ``id``, ``name`` and ``price`` keys.

        Returns:
            A new Product instance.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")

        try:
            product_id = data["id"]
            name = data["name"]
            price = data["price"]
        except KeyError as e:
            raise ValueError(f"Missing field: {e.args[0]}") from e

        # bool is a subclass of int and must not pass as either
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise ValueError("Field 'id' must be an integer")
        if not isinstance(name, str) or not name:
            raise ValueError("Field 'name' must be a non-empty string")
        if not isinstance(price, (int, float)) or isinstance(price, bool):
            raise ValueError("Field 'price' must be a number")
        if not math.isfinite(price) or price <= 0:
            raise ValueError("Field 'price' must be a finite number greater than zero")

        return cls(id=product_id, name=name, price=float(price))


@dataclass(frozen=True)
class ProductPatch:
    """Partial update for a product.

    A field counts as supplied only when it carries a meaningful value:
    a name that is not blank or a price greater than zero. Anything
    else is treated as "leave unchanged".
    """

    name: str | None = None
    price: float | None = None

    def assignments(self) -> list[tuple[str, Any]]:
        """Return (column, value) pairs for the supplied fields.

        Returns:
            Pairs in the order of UPDATABLE_COLUMNS, possibly empty.
        """
        pairs: list[tuple[str, Any]] = []
        if self.name and self.name.strip():
            pairs.append(("name", self.name))
        if self.price is not None and math.isfinite(self.price) and self.price > 0:
            pairs.append(("price", float(self.price)))
        return pairs

    @property
    def is_empty(self) -> bool:
        """Check if no field was supplied."""
        return not self.assignments()
