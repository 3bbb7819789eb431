"""Service configuration."""

import os
from dataclasses import dataclass, field
from datetime import timedelta

from productcache.core.services.product_cache import PRODUCT_CACHE_TTL

ENV_PREFIX = "PRODUCTCACHE_"


@dataclass
class ServiceConfig:
    """Service configuration.

    Holds the settings needed to wire the store, the cache backend,
    and the HTTP server. ``from_env`` reads the same fields from
    ``PRODUCTCACHE_*`` environment variables.

    When ``redis_url`` is unset the in-memory backend is used, which
    only keeps a single process coherent.
    """

    database_path: str = "products.db"
    redis_url: str | None = None
    cache_ttl: timedelta = field(default_factory=lambda: PRODUCT_CACHE_TTL)
    cache_max_size: int = 10_000

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    debug: bool = False  # Expose internal error causes in responses

    def __post_init__(self) -> None:
        """Validate ranges."""
        if self.cache_ttl.total_seconds() <= 0:
            raise ValueError("cache_ttl must be positive")
        if self.cache_max_size < 1:
            raise ValueError("cache_max_size must be at least 1")
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Build a configuration from environment variables.

        Returns:
            A new ServiceConfig; unset variables keep their defaults.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        defaults = cls()
        ttl = _env("CACHE_TTL")

        return cls(
            database_path=_env("DB_PATH") or defaults.database_path,
            redis_url=_env("REDIS_URL") or None,
            cache_ttl=timedelta(seconds=float(ttl)) if ttl else defaults.cache_ttl,
            cache_max_size=int(_env("CACHE_MAX_SIZE") or defaults.cache_max_size),
            host=_env("HOST") or defaults.host,
            port=int(_env("PORT") or defaults.port),
            log_level=_env("LOG_LEVEL") or defaults.log_level,
            debug=(_env("DEBUG") or "false").lower() == "true",
        )


def _env(name: str) -> str | None:
    return os.getenv(f"{ENV_PREFIX}{name}")
