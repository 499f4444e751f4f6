"""
API handlers for the oapiviews server.

Modules:
    health_handlers: Health check and metrics
    openapi_handlers: Audience views
"""

from oapiviews.server.handlers import health_handlers, openapi_handlers

__all__ = [
    "health_handlers",
    "openapi_handlers",
]
