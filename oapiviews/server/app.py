"""
oapiviews HTTP server application.

This module provides the application factory and server runner for the
audience view API.

Example:
    Running the server::

        from oapiviews.server import create_app, run_server
        from oapiviews.config import OapiViewsConfig

        config = OapiViewsConfig()
        app = create_app(config)
        run_server(app)
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import web

from oapiviews.config.schema import OapiViewsConfig
from oapiviews.service import OpenApiService

logger = logging.getLogger("oapiviews.server")


class OapiViewsApplication:
    """
    oapiviews HTTP application.

    Wraps the aiohttp application with service setup and lifecycle
    management.

    Example:
        Creating and running the application::

            app = OapiViewsApplication(OapiViewsConfig())
            app.run()
    """

    def __init__(
        self,
        config: OapiViewsConfig | None = None,
        service: OpenApiService | None = None,
    ) -> None:
        """
        Initialize the application.

        Args:
            config: oapiviews configuration.
            service: Pre-built service. When omitted, one is built
                from the provider and filter configuration.
        """
        self._config = config or OapiViewsConfig()
        self._service = service
        self._app: "web.Application | None" = None

    @property
    def app(self) -> "web.Application":
        """Get the aiohttp application, creating it if needed."""
        if self._app is None:
            self._app = self._create_app()
        return self._app

    def _create_app(self) -> "web.Application":
        """Create and configure the aiohttp application."""
        from aiohttp import web

        from oapiviews.server.middleware import (
            create_cors_middleware,
            create_error_handler_middleware,
            create_request_id_middleware,
            create_request_logging_middleware,
        )
        from oapiviews.server.routes import setup_routes

        middlewares = [
            create_request_id_middleware(),
            create_request_logging_middleware(),
            create_error_handler_middleware(),
        ]

        if self._config.server.cors_origins:
            middlewares.append(
                create_cors_middleware(allowed_origins=self._config.server.cors_origins)
            )

        app = web.Application(middlewares=middlewares)
        app["config"] = self._config
        app["service"] = self._service or self._create_service()

        setup_routes(app)

        app.on_startup.append(self._on_startup)
        app.on_cleanup.append(self._on_cleanup)

        return app

    def _create_service(self) -> OpenApiService:
        """Create the view service from the provider and filter configuration."""
        from oapiviews.engine.filter import AudienceFilter
        from oapiviews.providers import create_provider

        provider = create_provider(self._config.provider)
        return OpenApiService(provider, AudienceFilter(self._config.filter))

    async def _on_startup(self, app: "web.Application") -> None:
        """Log startup information."""
        provider = self._config.provider
        source = provider.url if provider.source.lower() == "http" else provider.path
        logger.info(f"Starting oapiviews server, canonical document from {source}")

    async def _on_cleanup(self, app: "web.Application") -> None:
        """Release the provider on shutdown."""
        logger.info("Shutting down oapiviews server...")

        service = app.get("service")
        if service is not None:
            await service.close()

        logger.info("oapiviews server shut down")

    def run(self) -> None:
        """Run the server (blocking)."""
        from aiohttp import web

        web.run_app(
            self.app,
            host=self._config.server.host,
            port=self._config.server.port,
            print=lambda msg: logger.info(msg),
        )


def create_app(
    config: OapiViewsConfig | None = None,
    service: OpenApiService | None = None,
) -> "web.Application":
    """
    Create an oapiviews HTTP application.

    Args:
        config: oapiviews configuration.
        service: Pre-built service (optional).

    Returns:
        Configured aiohttp Application.

    Example:
        Using with gunicorn::

            # In wsgi.py
            from oapiviews.server import create_app
            app = create_app()

        Then run with::

            gunicorn wsgi:app --worker-class aiohttp.GunicornWebWorker
    """
    return OapiViewsApplication(config, service).app


def run_server(
    app: "web.Application | None" = None,
    config: OapiViewsConfig | None = None,
) -> None:
    """
    Run the oapiviews HTTP server.

    Args:
        app: Pre-created application (optional).
        config: oapiviews configuration (host and port are read from it).
    """
    from aiohttp import web

    config = config or OapiViewsConfig()
    if app is None:
        app = create_app(config)

    host = config.server.host
    port = config.server.port
    logger.info(f"Starting oapiviews server on http://{host}:{port}")

    web.run_app(
        app,
        host=host,
        port=port,
        print=lambda msg: logger.info(msg),
    )
