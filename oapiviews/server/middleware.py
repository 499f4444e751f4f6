"""
HTTP middleware for the oapiviews server.

This module provides middleware components for request ids, error
handling, CORS and request logging.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Awaitable, Callable

if TYPE_CHECKING:
    from aiohttp import web

from oapiviews.exceptions import (
    ConfigurationError,
    DocumentProviderError,
    EmptyResultError,
    InvalidAudienceError,
    OapiViewsError,
    UnknownDocumentElementError,
    ValidationError,
)
from oapiviews.models.base import generate_uuid, utc_now

# Type alias for aiohttp middleware handler
Handler = Callable[["web.Request"], Awaitable["web.StreamResponse"]]
Middleware = Callable[["web.Request", Handler], Awaitable["web.StreamResponse"]]


logger = logging.getLogger("oapiviews.server")

# Checked in order; the first matching type wins.
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    InvalidAudienceError: 404,
    EmptyResultError: 404,
    ValidationError: 400,
    DocumentProviderError: 502,
    UnknownDocumentElementError: 500,
    ConfigurationError: 500,
    OapiViewsError: 500,
}


def status_for(error: OapiViewsError) -> int:
    """Return the HTTP status an oapiviews error maps to."""
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(error, exc_type):
            return code
    return 500


@dataclass
class RequestInfo:
    """
    Information about an HTTP request for logging.

    Attributes:
        request_id: Unique identifier for the request.
        method: HTTP method.
        path: Request path.
        remote: Remote address.
        start_time: Request start time.
        status_code: Response status code.
        duration_ms: Request duration in milliseconds.
        error: Error message if request failed.
    """

    request_id: str = field(default_factory=generate_uuid)
    method: str = ""
    path: str = ""
    remote: str = ""
    start_time: datetime = field(default_factory=utc_now)
    status_code: int = 0
    duration_ms: float = 0.0
    error: str | None = None


def create_request_logging_middleware(log_level: int = logging.INFO) -> Middleware:
    """
    Create request logging middleware.

    Logs method, path, status and duration of each request.

    Args:
        log_level: Logging level for request logs.

    Returns:
        Middleware function.
    """
    from aiohttp import web

    @web.middleware
    async def request_logging_middleware(
        request: web.Request,
        handler: Handler,
    ) -> web.StreamResponse:
        """Log request and response information."""
        info = RequestInfo(
            request_id=request.get("request_id") or generate_uuid(),
            method=request.method,
            path=request.path,
            remote=request.remote or "unknown",
        )

        start_time = time.perf_counter()

        try:
            response = await handler(request)
            info.status_code = response.status
            return response

        except web.HTTPException as e:
            info.status_code = e.status
            info.error = str(e)
            raise

        except Exception as e:
            info.status_code = 500
            info.error = str(e)
            raise

        finally:
            info.duration_ms = (time.perf_counter() - start_time) * 1000

            log_message = (
                f"{info.method} {info.path} "
                f"{info.status_code} "
                f"{info.duration_ms:.2f}ms "
                f"[{info.request_id[:8]}]"
            )

            if info.error:
                logger.log(log_level, f"{log_message} error={info.error}")
            else:
                logger.log(log_level, log_message)

    return request_logging_middleware


def create_error_handler_middleware() -> Middleware:
    """
    Create error handling middleware.

    Converts oapiviews exceptions to HTTP responses with JSON error
    bodies. Not-found conditions (unknown audience, empty view) become
    404; an unknown document section is an internal defect and becomes
    500.

    Returns:
        Middleware function.
    """
    from aiohttp import web

    @web.middleware
    async def error_handler_middleware(
        request: web.Request,
        handler: Handler,
    ) -> web.StreamResponse:
        """Handle exceptions and convert to HTTP responses."""
        try:
            return await handler(request)

        except web.HTTPException:
            raise

        except OapiViewsError as e:
            status = status_for(e)
            request_id = request.get("request_id", "unknown")
            error_response = {
                "error": {
                    "type": e.__class__.__name__,
                    "message": e.message,
                    "details": e.details,
                    "request_id": request_id,
                }
            }

            log = logger.error if status >= 500 else logger.warning
            log(
                f"{e.__class__.__name__}: {e.message}",
                extra={"request_id": request_id, "details": e.details},
            )

            return web.json_response(error_response, status=status)

        except asyncio.CancelledError:
            raise

        except Exception as e:
            request_id = request.get("request_id", "unknown")
            logger.exception(
                f"Unhandled exception: {e}",
                extra={"request_id": request_id},
            )

            error_response = {
                "error": {
                    "type": "InternalError",
                    "message": "An internal error occurred",
                    "request_id": request_id,
                }
            }

            return web.json_response(error_response, status=500)

    return error_handler_middleware


def create_cors_middleware(
    allowed_origins: list[str] | None = None,
    allowed_headers: list[str] | None = None,
    max_age: int = 3600,
) -> Middleware:
    """
    Create CORS middleware.

    Views are read-only, so only GET and OPTIONS are advertised.

    Args:
        allowed_origins: List of allowed origins. None or empty disables CORS.
        allowed_headers: Allowed request headers.
        max_age: Preflight cache duration in seconds.

    Returns:
        Middleware function.
    """
    from aiohttp import web

    if not allowed_origins:
        @web.middleware
        async def noop_middleware(
            request: web.Request,
            handler: Handler,
        ) -> web.StreamResponse:
            return await handler(request)

        return noop_middleware

    allowed_methods = ["GET", "OPTIONS"]
    allowed_headers = allowed_headers or ["Content-Type", "X-Request-ID"]

    @web.middleware
    async def cors_middleware(
        request: web.Request,
        handler: Handler,
    ) -> web.StreamResponse:
        """Handle CORS headers."""
        origin = request.headers.get("Origin", "")
        origin_allowed = "*" in allowed_origins or origin in allowed_origins

        if request.method == "OPTIONS" and origin_allowed:
            response = web.Response(status=204)
            response.headers["Access-Control-Allow-Origin"] = origin or "*"
            response.headers["Access-Control-Allow-Methods"] = ", ".join(allowed_methods)
            response.headers["Access-Control-Allow-Headers"] = ", ".join(allowed_headers)
            response.headers["Access-Control-Max-Age"] = str(max_age)
            return response

        response = await handler(request)

        if origin_allowed:
            response.headers["Access-Control-Allow-Origin"] = origin or "*"

        return response

    return cors_middleware


def create_request_id_middleware() -> Middleware:
    """
    Create middleware that ensures every request has a unique ID.

    The request ID is taken from the X-Request-ID header if present,
    otherwise a new UUID is generated.

    Returns:
        Middleware function.
    """
    from aiohttp import web

    @web.middleware
    async def request_id_middleware(
        request: web.Request,
        handler: Handler,
    ) -> web.StreamResponse:
        """Ensure request has a unique ID."""
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = generate_uuid()

        request["request_id"] = request_id

        response = await handler(request)
        response.headers["X-Request-ID"] = request_id

        return response

    return request_id_middleware
