"""Tests for ServiceConfig."""

from datetime import timedelta

import pytest

from productcache import PRODUCT_CACHE_TTL, ServiceConfig


class TestServiceConfig:
    """Tests for ServiceConfig."""

    def test_defaults(self) -> None:
        config = ServiceConfig()

        assert config.database_path == "products.db"
        assert config.redis_url is None
        assert config.cache_ttl == timedelta(seconds=60)
        assert config.port == 8000
        assert config.debug is False

    def test_default_ttl_matches_cache_default(self) -> None:
        assert ServiceConfig().cache_ttl == PRODUCT_CACHE_TTL

    def test_log_level_normalized(self) -> None:
        assert ServiceConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cache_ttl": timedelta(0)},
            {"cache_max_size": 0},
            {"port": 0},
            {"port": 70000},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            ServiceConfig(**kwargs)

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRODUCTCACHE_DB_PATH", "/tmp/shop.db")
        monkeypatch.setenv("PRODUCTCACHE_REDIS_URL", "redis://cache:6379/1")
        monkeypatch.setenv("PRODUCTCACHE_CACHE_TTL", "30")
        monkeypatch.setenv("PRODUCTCACHE_PORT", "9000")
        monkeypatch.setenv("PRODUCTCACHE_DEBUG", "TRUE")

        config = ServiceConfig.from_env()

        assert config.database_path == "/tmp/shop.db"
        assert config.redis_url == "redis://cache:6379/1"
        assert config.cache_ttl == timedelta(seconds=30)
        assert config.port == 9000
        assert config.debug is True

    def test_from_env_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "DB_PATH", "REDIS_URL", "CACHE_TTL", "CACHE_MAX_SIZE",
            "HOST", "PORT", "LOG_LEVEL", "DEBUG",
        ):
            monkeypatch.delenv(f"PRODUCTCACHE_{name}", raising=False)

        config = ServiceConfig.from_env()

        assert config == ServiceConfig()

    def test_from_env_bad_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRODUCTCACHE_PORT", "eighty")

        with pytest.raises(ValueError):
            ServiceConfig.from_env()
