"""
Audience view handlers.

These handlers pass the request through to OpenApiService; errors are
turned into responses by the error handler middleware.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import web

from oapiviews.exceptions import EmptyResultError, InvalidAudienceError
from oapiviews.server.handlers.health_handlers import record_not_found, record_view

logger = logging.getLogger("oapiviews.server.handlers.openapi")


async def get_versioned_view(request: "web.Request") -> "web.Response":
    """
    Serve a versioned view, e.g. ``/api/notifications/v1.0/openapi.json``.
    """
    return await _serve_view(
        request,
        request.match_info["audience"],
        request.match_info["version"],
    )


async def get_unversioned_view(request: "web.Request") -> "web.Response":
    """
    Serve an unversioned view, e.g. ``/internal/openapi.json``.
    """
    return await _serve_view(request, request.match_info["audience"], None)


async def _serve_view(
    request: "web.Request",
    audience: str,
    version: str | None,
) -> "web.Response":
    """Build the view through the application's service."""
    from aiohttp import web

    service = request.app["service"]

    try:
        text = await service.serve(audience, version)
    except (InvalidAudienceError, EmptyResultError):
        record_not_found()
        raise

    record_view(audience)
    return web.Response(text=text, content_type="application/json")
