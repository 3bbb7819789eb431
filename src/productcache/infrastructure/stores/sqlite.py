"""SQLite product store built on aiosqlite."""

import asyncio
import logging
from pathlib import Path

import aiosqlite

from productcache.core.entities.product import Product, ProductPatch
from productcache.core.errors import StoreError
from productcache.core.services.update_builder import (
    PRODUCTS_TABLE,
    QMARK,
    UpdateStatementBuilder,
)

logger = logging.getLogger(__name__)

SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {PRODUCTS_TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL CHECK (name <> ''),
        price REAL NOT NULL CHECK (price > 0)
    )
"""


def _row_to_product(row: aiosqlite.Row) -> Product:
    """Convert a database row to a product."""
    return Product(id=row["id"], name=row["name"], price=row["price"])


class SqliteProductStore:
    """Relational store for products.

    Holds one aiosqlite connection. A write runs its statement and its
    commit or rollback under the store's write lock, so one task's
    rollback never discards another task's uncommitted write. Call
    ``connect`` before use, or use the store as an async context manager.

    Ids outside SQLite's 64-bit INTEGER range cannot name a row, so they
    read as absent rather than as errors.
    """

    def __init__(self, path: str | Path = "products.db") -> None:
        """Initialize the store.

        Args:
            path: Database file, or ``:memory:`` for a private in-memory DB.
        """
        self._path = str(path)
        self._db: aiosqlite.Connection | None = None
        self._write_lock = asyncio.Lock()
        self._update_builder = UpdateStatementBuilder(
            table=PRODUCTS_TABLE, paramstyle=QMARK
        )

    @property
    def is_connected(self) -> bool:
        """Check if a connection is open."""
        return self._db is not None

    async def connect(self) -> None:
        """Open the connection and create the table if missing."""
        if self._db is not None:
            return
        if self._path != ":memory:":
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
        try:
            db = await aiosqlite.connect(self._path)
            db.row_factory = aiosqlite.Row
            await db.execute(SCHEMA)
            await db.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to open database {self._path}: {e}") from e
        self._db = db
        logger.info("Connected to SQLite database at %s", self._path)

    async def close(self) -> None:
        """Close the connection."""
        if self._db is not None:
            await self._db.close()
            self._db = None

    async def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        db = self._connection()
        try:
            async with db.execute("SELECT 1") as cursor:
                return (await cursor.fetchone()) is not None
        except aiosqlite.Error as e:
            raise StoreError(f"Ping failed: {e}") from e

    async def count(self) -> int:
        """Return the number of rows in the table."""
        db = self._connection()
        try:
            async with db.execute(f"SELECT COUNT(*) FROM {PRODUCTS_TABLE}") as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StoreError(f"Count failed: {e}") from e
        return row[0] if row else 0

    async def query_page(self, limit: int, offset: int) -> list[Product]:
        """Return up to ``limit`` rows ordered by ascending id."""
        db = self._connection()
        try:
            async with db.execute(
                f"SELECT id, name, price FROM {PRODUCTS_TABLE} "
                "ORDER BY id LIMIT ? OFFSET ?",
                (limit, offset),
            ) as cursor:
                rows = await cursor.fetchall()
        except OverflowError:
            # No table can hold that many rows
            return []
        except aiosqlite.Error as e:
            raise StoreError(f"Page query failed: {e}") from e
        return [_row_to_product(row) for row in rows]

    async def get(self, product_id: int) -> Product | None:
        """Return the row with the given id, or None."""
        db = self._connection()
        try:
            async with db.execute(
                f"SELECT id, name, price FROM {PRODUCTS_TABLE} WHERE id = ?",
                (product_id,),
            ) as cursor:
                row = await cursor.fetchone()
        except OverflowError:
            return None
        except aiosqlite.Error as e:
            raise StoreError(f"Get failed for id {product_id}: {e}") from e
        return _row_to_product(row) if row else None

    async def insert(self, name: str, price: float) -> Product:
        """Insert a row and return it with its generated id."""
        db = self._connection()
        async with self._write_lock:
            try:
                async with db.execute(
                    f"INSERT INTO {PRODUCTS_TABLE} (name, price) VALUES (?, ?) "
                    "RETURNING id, name, price",
                    (name, price),
                ) as cursor:
                    rows = await cursor.fetchall()
                await db.commit()
            except aiosqlite.Error as e:
                await self._rollback()
                raise StoreError(f"Insert failed: {e}") from e
        return _row_to_product(rows[0])

    async def update_fields(
        self,
        product_id: int,
        patch: ProductPatch,
    ) -> Product | None:
        """Assign the supplied fields and return the updated row, or None."""
        db = self._connection()
        statement = self._update_builder.build(product_id, patch)
        async with self._write_lock:
            try:
                async with db.execute(statement.sql, statement.params) as cursor:
                    rows = await cursor.fetchall()
                await db.commit()
            except OverflowError:
                return None
            except aiosqlite.Error as e:
                await self._rollback()
                raise StoreError(f"Update failed for id {product_id}: {e}") from e
        return _row_to_product(rows[0]) if rows else None

    async def delete(self, product_id: int) -> int:
        """Delete the row with the given id and return rows affected."""
        db = self._connection()
        async with self._write_lock:
            try:
                async with db.execute(
                    f"DELETE FROM {PRODUCTS_TABLE} WHERE id = ?",
                    (product_id,),
                ) as cursor:
                    affected = cursor.rowcount
                await db.commit()
            except OverflowError:
                return 0
            except aiosqlite.Error as e:
                await self._rollback()
                raise StoreError(f"Delete failed for id {product_id}: {e}") from e
        return affected

    def _connection(self) -> aiosqlite.Connection:
        if self._db is None:
            raise StoreError("Store is not connected")
        return self._db

    async def _rollback(self) -> None:
        if self._db is None:
            return
        try:
            await self._db.rollback()
        except aiosqlite.Error:
            logger.exception("Rollback failed")

    async def __aenter__(self) -> "SqliteProductStore":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
