"""FastAPI application — fred-proxy v1."""
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from fred_proxy.api.v1 import cache, series
from fred_proxy.api.v1.errors import (
    client_input_handler,
    configuration_error_handler,
    request_validation_handler,
    transport_error_handler,
    upstream_error_handler,
)
from fred_proxy.api.v1.models import HealthStatus
from fred_proxy.core.config import Settings, settings as default_settings
from fred_proxy.core.data import build_service
from fred_proxy.core.data.cache.memory_cache import SeriesCache
from fred_proxy.core.data.providers.base import SeriesProvider
from fred_proxy.core.errors import (
    ClientInputError,
    ConfigurationError,
    UpstreamServiceError,
    UpstreamTransportError,
)
from fred_proxy.core.logging import configure_logging

VERSION = "1.0.0"

logger = structlog.get_logger()


def create_app(
    settings: Settings | None = None,
    cache_store: SeriesCache | None = None,
    provider: SeriesProvider | None = None,
) -> FastAPI:
    settings = settings or default_settings
    service = build_service(settings, cache=cache_store, provider=provider)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("startup", version=VERSION, cors_origin=settings.frontend_url)
        if not service.credential_configured:
            logger.warning("config.missing_api_key", detail="FRED_API_KEY is not set; FRED calls will fail")
        yield
        logger.info("shutdown")

    app = FastAPI(
        title="FRED API Proxy",
        version=VERSION,
        description="Caching proxy for FRED series observations",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.series_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http.request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response

    app.include_router(series.router)
    app.include_router(cache.router)

    app.add_exception_handler(ClientInputError, client_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(UpstreamServiceError, upstream_error_handler)
    app.add_exception_handler(UpstreamTransportError, transport_error_handler)

    @app.get("/health", response_model=HealthStatus)
    async def health():
        configured = service.credential_configured
        return HealthStatus(
            timestamp=datetime.now(timezone.utc).isoformat(),
            cache_size=service.cache.size,
            credential_configured=configured,
            note="API key is present." if configured else "WARNING: FRED_API_KEY environment variable is not set!",
        )

    @app.get("/")
    async def root():
        return {
            "message": "FRED API Proxy Server is running.",
            "status": "active",
            "version": VERSION,
            "endpoints": {
                "health": "/health",
                "series": "/series/{series_id}?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD&sort_order=desc",
                "series_batch_POST": '/series/batch (body: {"series": ["ID1", "ID2"], "start_date", "end_date"})',
                "cache_clear_POST": "/cache/clear",
            },
        }

    return app


app = create_app()
