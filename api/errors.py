"""
Global exception handlers: every failure leaves as an ErrorResponse envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sources.dart.base import DartProxyError
from .models import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "The server failed while requesting data from the DART API."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DartProxyError)
    async def dart_proxy_error_handler(request: Request, exc: DartProxyError):
        logger.warning(
            f"{exc.__class__.__name__} on {request.url.path}: "
            f"{exc.status_code} status={exc.status} message={exc.message}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(**exc.to_envelope()).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(status="500", message=GENERIC_MESSAGE).model_dump(),
        )
