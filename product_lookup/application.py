from contextlib import asynccontextmanager
from typing import Callable, Optional
import time

from fastapi import FastAPI, Request

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.adapters.interfaces.catalog import ProductCatalogClient
from product_lookup.api.error_handlers import register_exception_handlers
from product_lookup.core.config import Settings, get_settings
from product_lookup.core.logging import configure_logging, get_logger, set_correlation_id
from product_lookup.infrastructure.amazon import ProductAdvertisingClient
from product_lookup.infrastructure.cache import build_cache_backend

logger = get_logger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    cache: Optional[CacheBackend] = None,
    catalog: Optional[ProductCatalogClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The cache backend and catalog client are built once here and shared by
    every request for the lifetime of the process.

    Args:
        settings: Optional settings, defaults to the environment settings
        cache: Optional cache backend overriding the configured one
        catalog: Optional catalog client overriding the configured one

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.ENABLE_STRUCTURED_LOGGING)

    if cache is None:
        cache = build_cache_backend(settings.cache)
    if catalog is None:
        catalog = ProductAdvertisingClient(
            domain=settings.AMAZON_DOMAIN,
            associate_tag=settings.AMAZON_ASSOCIATE_TAG,
            access_key=settings.AMAZON_ACCESS_KEY,
            secret_key=settings.AMAZON_SECRET_KEY,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting server at {settings.PORT}")
        yield
        logger.info("Shutting down Product Lookup Service")
        await app.state.catalog.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.cache = cache
    app.state.catalog = catalog

    # Register middleware
    configure_middleware(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Register routers
    register_routers(app)

    return app


def configure_middleware(app: FastAPI) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    # Request tracking middleware
    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next: Callable):
        # Extract or generate correlation ID
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))

        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            extra={
                "request_path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2)
            }
        )
        return response


def register_routers(app: FastAPI) -> None:
    """
    Register API routers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from product_lookup.api.routes.health import health_router
    from product_lookup.api.routes.item import item_router

    app.include_router(health_router, tags=["Health"])
    app.include_router(item_router, tags=["Items"])



def run(settings: Settings) -> None:
    """Serve the application with uvicorn using the given settings."""
    import uvicorn

    uvicorn.run(
        create_application(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
