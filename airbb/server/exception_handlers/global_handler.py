"""
Global Exception Handlers for FastAPI Application.

Booking domain errors are turned into JSON responses carrying their message
and HTTP status. Anything else is logged with an error ID, request context and
full traceback, and answered with a generic 500.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from airbb.core.errors import AirBBError
from airbb.core.logging_config import get_logger

logger = get_logger(__name__)


async def airbb_error_handler(request: Request, exc: AirBBError) -> JSONResponse:
    """
    Map a booking domain error to its HTTP status.

    Args:
        request: The HTTP request that raised the error
        exc: The domain error

    Returns:
        JSONResponse with the error message as ``detail``
    """
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AirBBError, airbb_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
