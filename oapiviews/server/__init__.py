"""
HTTP server module for oapiviews.

Serves audience views of the canonical document over HTTP using aiohttp:

    GET /api/{audience}/{version}/openapi.json
    GET /{audience}/openapi.json

Example:
    Running the server::

        from oapiviews.server import create_app, run_server

        run_server(create_app())

    Or from the command line::

        oapiviews serve --host 0.0.0.0 --port 8086

Components:
    - app: Application factory and runner
    - routes: Route definitions
    - middleware: Request id, logging, error handling and CORS
"""

from oapiviews.server.app import OapiViewsApplication, create_app, run_server

__all__ = [
    "OapiViewsApplication",
    "create_app",
    "run_server",
]
