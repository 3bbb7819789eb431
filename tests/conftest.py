"""Pytest configuration for productcache tests."""

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock

import pytest

from productcache import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    JsonSerializer,
    Product,
    ProductCache,
    ProductRepository,
    SqliteProductStore,
)


@pytest.fixture
async def store() -> AsyncIterator[SqliteProductStore]:
    """Create a connected store over a private in-memory database."""
    store = SqliteProductStore(":memory:")
    await store.connect()
    yield store
    await store.close()


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    """Create an in-memory cache backend."""
    return InMemoryCacheBackend(maxsize=100, default_ttl=60.0)


@pytest.fixture
def cache(backend: InMemoryCacheBackend) -> ProductCache:
    """Create a product cache over the in-memory backend."""
    return ProductCache(
        backend=backend,
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
    )


@pytest.fixture
def repository(store: SqliteProductStore, cache: ProductCache) -> ProductRepository:
    """Create a repository wired to the in-memory store and cache."""
    return ProductRepository(store=store, cache=cache)


@pytest.fixture
def spy(monkeypatch: pytest.MonkeyPatch):
    """Wrap an async method in an AsyncMock that records calls.

    Usage: ``get = spy(store, "get")`` then ``get.await_count``.
    """

    def wrap(obj: object, name: str) -> AsyncMock:
        mock = AsyncMock(wraps=getattr(obj, name))
        monkeypatch.setattr(obj, name, mock)
        return mock

    return wrap


@pytest.fixture
def seed(store: SqliteProductStore):
    """Return a coroutine function inserting ``Product 1`` .. ``Product N``."""

    async def insert(count: int) -> list[Product]:
        return [
            await store.insert(f"Product {i}", float(i))
            for i in range(1, count + 1)
        ]

    return insert
