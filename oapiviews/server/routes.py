"""
API route definitions for the oapiviews server.
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aiohttp import web

logger = logging.getLogger("oapiviews.server.routes")


def setup_routes(app: "web.Application") -> None:
    """
    Set up all routes on the application.

    Args:
        app: The aiohttp application instance.
    """
    from oapiviews.server.handlers import health_handlers, openapi_handlers

    # Health and system routes
    app.router.add_get("/health", health_handlers.health_check, name="health")
    app.router.add_get("/metrics", health_handlers.metrics, name="metrics")

    # Audience views
    app.router.add_get(
        "/api/{audience}/{version}/openapi.json",
        openapi_handlers.get_versioned_view,
        name="view_versioned",
    )
    app.router.add_get(
        "/{audience}/openapi.json",
        openapi_handlers.get_unversioned_view,
        name="view_unversioned",
    )

    logger.info("API routes configured")


def get_route_info() -> list[dict[str, Any]]:
    """
    Get information about all defined routes.

    Returns:
        List of route information dictionaries.
    """
    return [
        {"method": "GET", "path": "/health", "description": "Health check endpoint"},
        {"method": "GET", "path": "/metrics", "description": "Prometheus metrics endpoint"},
        {
            "method": "GET",
            "path": "/api/{audience}/{version}/openapi.json",
            "description": "Versioned audience view",
        },
        {
            "method": "GET",
            "path": "/{audience}/openapi.json",
            "description": "Unversioned audience view",
        },
    ]
