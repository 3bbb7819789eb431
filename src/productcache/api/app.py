"""FastAPI application exposing the product repository over HTTP."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from productcache.api.schemas import (
    CreateProductRequest,
    ProductListResponse,
    ProductResponse,
    UpdateProductRequest,
)
from productcache.config import ServiceConfig
from productcache.core.entities.page import DEFAULT_LIMIT, DEFAULT_PAGE
from productcache.core.errors import (
    CacheBackendError,
    InternalError,
    NotFound,
    StoreError,
    ValidationFailed,
)
from productcache.core.interfaces.cache_backend import ICacheBackend
from productcache.core.services.product_cache import ProductCache
from productcache.core.services.product_repository import ProductRepository
from productcache.infrastructure.backends.memory import InMemoryCacheBackend
from productcache.infrastructure.key_builders.default import DefaultKeyBuilder
from productcache.infrastructure.serializers.json import JsonSerializer
from productcache.infrastructure.stores.sqlite import SqliteProductStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_cache_backend(config: ServiceConfig) -> ICacheBackend:
    """Create the cache backend selected by the configuration."""
    if config.redis_url:
        from productcache.infrastructure.backends.redis import RedisCacheBackend

        return RedisCacheBackend(
            redis_url=config.redis_url,
            default_ttl=int(config.cache_ttl.total_seconds()),
        )
    return InMemoryCacheBackend(
        maxsize=config.cache_max_size,
        default_ttl=config.cache_ttl.total_seconds(),
    )


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository


def _parse_int(value: str | None, default: int) -> int:
    """Parse a query parameter, falling back to the default on garbage."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Create the HTTP application.

    The store and the cache backend are opened in the lifespan handler
    and exposed on ``app.state``.

    Args:
        config: Service configuration. Read from the environment if None.

    Returns:
        The FastAPI application.
    """
    config = config or ServiceConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = SqliteProductStore(config.database_path)
        await store.connect()
        backend = build_cache_backend(config)
        cache = ProductCache(
            backend=backend,
            key_builder=DefaultKeyBuilder(),
            serializer=JsonSerializer(),
            ttl=config.cache_ttl,
        )
        app.state.store = store
        app.state.cache_backend = backend
        app.state.repository = ProductRepository(store=store, cache=cache)
        logger.info("Product service started (cache: %s)", type(backend).__name__)
        try:
            yield
        finally:
            close = getattr(backend, "close", None)
            if close is not None:
                await close()
            await store.close()
            logger.info("Product service stopped")

    app = FastAPI(
        title="productcache",
        description="Product CRUD with a cache-aside read path",
        version="0.1.0",
        lifespan=lifespan,
    )
    _register_error_handlers(app, debug=config.debug)
    _register_routes(app)
    return app


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def _register_error_handlers(app: FastAPI, debug: bool) -> None:
    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ValidationFailed)
    async def validation_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request", details=details)

    @app.exception_handler(InternalError)
    async def internal_handler(request: Request, exc: InternalError) -> JSONResponse:
        if debug and exc.__cause__ is not None:
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                exc.message,
                cause=str(exc.__cause__),
            )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def _register_routes(app: FastAPI) -> None:
    @app.get("/products", response_model=ProductListResponse)
    async def list_products(
        page: str | None = None,
        limit: str | None = None,
        repository: ProductRepository = Depends(get_repository),
    ) -> ProductListResponse:
        result = await repository.list(
            page=_parse_int(page, DEFAULT_PAGE),
            limit=_parse_int(limit, DEFAULT_LIMIT),
        )
        return ProductListResponse.from_page(result)

    @app.post(
        "/products",
        response_model=ProductResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_product(
        body: CreateProductRequest,
        repository: ProductRepository = Depends(get_repository),
    ) -> ProductResponse:
        product = await repository.create(body.name, body.price)
        return ProductResponse.from_entity(product)

    @app.get("/products/{product_id}", response_model=ProductResponse)
    async def get_product(
        product_id: int,
        repository: ProductRepository = Depends(get_repository),
    ) -> ProductResponse:
        product = await repository.get_by_id(product_id)
        return ProductResponse.from_entity(product)

    @app.put("/products/{product_id}", response_model=ProductResponse)
    async def update_product(
        product_id: int,
        body: UpdateProductRequest,
        repository: ProductRepository = Depends(get_repository),
    ) -> ProductResponse:
        product = await repository.update(product_id, body.to_patch())
        return ProductResponse.from_entity(product)

    @app.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_product(
        product_id: int,
        repository: ProductRepository = Depends(get_repository),
    ) -> Response:
        await repository.delete(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/health")
    async def health_check(request: Request) -> dict[str, str]:
        try:
            await request.app.state.store.ping()
            database_status = "healthy"
        except StoreError as e:
            database_status = f"unhealthy: {e}"

        cache_status = "healthy"
        ping = getattr(request.app.state.cache_backend, "ping", None)
        if ping is not None:
            try:
                await ping()
            except CacheBackendError as e:
                cache_status = f"unhealthy: {e}"

        return {
            "status": "healthy" if database_status == "healthy" else "degraded",
            "database": database_status,
            "cache": cache_status,
        }

    @app.get("/cache/stats")
    async def cache_stats(
        repository: ProductRepository = Depends(get_repository),
    ) -> dict[str, Any]:
        return {
            "stats": repository.cache.stats,
            "ttl_seconds": repository.cache.ttl.total_seconds(),
        }


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    config = ServiceConfig.from_env()
    configure_logging(config.log_level)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
