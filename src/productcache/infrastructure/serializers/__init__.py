"""Serializer implementations."""

from productcache.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
