"""Parameterized UPDATE statement builder for partial product updates."""

from dataclasses import dataclass
from typing import Any

from productcache.core.entities.product import UPDATABLE_COLUMNS, ProductPatch

PRODUCTS_TABLE = "products"
RETURNING_COLUMNS = ("id", "name", "price")

# DB-API paramstyles the builder can emit
QMARK = "qmark"  # sqlite3 / aiosqlite: ?
NUMERIC_DOLLAR = "numeric_dollar"  # asyncpg / lib/pq: $1, $2, ...


@dataclass(frozen=True)
class UpdateStatement:
    """A SQL statement and its bound parameters."""

    sql: str
    params: tuple[Any, ...]


class UpdateStatementBuilder:
    """Builds ``UPDATE ... RETURNING`` statements for a product patch.

    Only the columns the patch supplies appear in the SET clause, each
    bound through a placeholder. Column names come from the fixed
    UPDATABLE_COLUMNS set and are never taken from input.
    """

    def __init__(
        self,
        table: str = PRODUCTS_TABLE,
        paramstyle: str = QMARK,
    ) -> None:
        """Initialize the builder.

        Args:
            table: Name of the products table.
            paramstyle: Placeholder style, QMARK or NUMERIC_DOLLAR.
        """
        if paramstyle not in (QMARK, NUMERIC_DOLLAR):
            raise ValueError(f"Unsupported paramstyle: {paramstyle}")
        self._table = table
        self._paramstyle = paramstyle

    def build(self, product_id: int, patch: ProductPatch) -> UpdateStatement:
        """Build the statement for one product.

        Args:
            product_id: Id of the row to update.
            patch: The fields to assign.

        Returns:
            The UPDATE statement with its parameters, the id last.

        Raises:
            ValueError: If the patch supplies no fields.
        """
        assignments = patch.assignments()
        if not assignments:
            raise ValueError("Patch supplies no fields")

        set_clauses: list[str] = []
        params: list[Any] = []
        for column, value in assignments:
            if column not in UPDATABLE_COLUMNS:
                raise ValueError(f"Column is not updatable: {column}")
            params.append(value)
            set_clauses.append(f"{column} = {self._placeholder(len(params))}")

        params.append(product_id)
        sql = (
            f"UPDATE {self._table} SET {', '.join(set_clauses)} "
            f"WHERE id = {self._placeholder(len(params))} "
            f"RETURNING {', '.join(RETURNING_COLUMNS)}"
        )
        return UpdateStatement(sql=sql, params=tuple(params))

    def _placeholder(self, position: int) -> str:
        if self._paramstyle == NUMERIC_DOLLAR:
            return f"${position}"
        return "?"
