"""Relational store implementations."""

from productcache.infrastructure.stores.sqlite import SqliteProductStore

__all__ = ["SqliteProductStore"]
