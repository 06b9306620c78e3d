"""Application-wide exception handlers.

Routes translate client-facing domain errors into HTTPException themselves;
these handlers catch what is left so every error body keeps the
``{"detail": ...}`` shape.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from roster.domain.error import StoreFailureError


async def store_failure_handler(
    request: Request, exc: StoreFailureError
) -> JSONResponse:
    """Report storage failures as 500 without retrying."""
    logfire.error(
        "Store failure on {method} {path}",
        method=request.method,
        path=request.url.path,
        operation=exc.operation,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.detail},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and hide their details from clients."""
    logfire.exception(
        "Unhandled exception on {method} {path}",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StoreFailureError, store_failure_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
