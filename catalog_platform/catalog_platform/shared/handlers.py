"""
Exception-to-response mapping and request timeout middleware.
"""
import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .config import settings
from .exceptions import AuthenticationError, ServiceError

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, AuthenticationError):
        # Keep the specific reason in the log only
        logger.info(
            "Authentication failed on %s %s: %s (reason=%s)",
            request.method, request.url.path, exc.message, exc.reason
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("%s on %s %s: %s", exc.__class__.__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"detail": "Internal server error"}
    if settings.is_development:
        content["error"] = exc.__class__.__name__
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def add_request_timeout(app: FastAPI, timeout_seconds: Optional[float] = None) -> None:
    """Answer 504 when a request runs longer than REQUEST_TIMEOUT_SECONDS."""
    limit = timeout_seconds if timeout_seconds is not None else settings.REQUEST_TIMEOUT_SECONDS

    @app.middleware("http")
    async def enforce_request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=limit)
        except asyncio.TimeoutError:
            logger.warning("Request timed out after %ss: %s %s", limit, request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={"detail": "Request timed out"},
            )
