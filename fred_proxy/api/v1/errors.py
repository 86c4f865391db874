"""Global error handlers."""
import structlog
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fred_proxy.core.errors import (
    ClientInputError,
    ConfigurationError,
    UpstreamServiceError,
    UpstreamTransportError,
)

logger = structlog.get_logger()


async def client_input_handler(request: Request, exc: ClientInputError):
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request parameters", "details": jsonable_encoder(exc.errors())},
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    # Body never reveals the credential state.
    logger.error("config.error", path=request.url.path, message=exc.message)
    return JSONResponse(status_code=500, content={"error": "Server configuration error"})


async def upstream_error_handler(request: Request, exc: UpstreamServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


async def transport_error_handler(request: Request, exc: UpstreamTransportError):
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error when fetching data", "message": exc.message},
    )
