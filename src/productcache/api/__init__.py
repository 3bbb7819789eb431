"""HTTP layer for productcache (requires FastAPI)."""

from productcache.api.app import create_app

__all__ = ["create_app"]
