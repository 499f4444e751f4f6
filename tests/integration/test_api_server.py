"""
End-to-end tests for the view server against a live backend.

A stand-in backend serves the canonical document over HTTP; the view
server fetches it through the configured HTTP provider.
"""

from typing import Any

import pytest
from aiohttp import web

from oapiviews.config.schema import OapiViewsConfig, ProviderConfig
from oapiviews.server import create_app


def _backend(document: dict[str, Any]) -> web.Application:
    """Build a backend that serves the document and counts requests."""

    async def openapi(request: web.Request) -> web.Response:
        request.app["state"]["requests"] += 1
        return web.json_response(request.app["state"]["document"])

    app = web.Application()
    app["state"] = {"document": document, "requests": 0}
    app.router.add_get("/openapi.json", openapi)
    return app


class TestLiveBackend:
    """Views served from a document fetched over HTTP."""

    @pytest.mark.asyncio
    async def test_views_from_backend(
        self, aiohttp_server, aiohttp_client, document: dict[str, Any]
    ) -> None:
        """Test every audience is served from the fetched document."""
        backend = _backend(document)
        server = await aiohttp_server(backend)
        config = OapiViewsConfig(
            provider=ProviderConfig(source="http", url=str(server.make_url("/openapi.json"))),
        )
        client = await aiohttp_client(create_app(config))

        expected = {
            "/api/notifications/v1.0/openapi.json": "Notifications",
            "/api/integrations/v1.0/openapi.json": "Integrations",
            "/api/private/v1.0/openapi.json": "Private",
            "/internal/openapi.json": "Internal",
        }
        for url, title in expected.items():
            resp = await client.get(url)
            assert resp.status == 200, url
            assert (await resp.json())["info"]["title"] == title

        assert backend["state"]["requests"] == len(expected)

    @pytest.mark.asyncio
    async def test_backend_changes_are_picked_up(
        self, aiohttp_server, aiohttp_client, document: dict[str, Any]
    ) -> None:
        """Test each request sees the backend's current document."""
        backend = _backend(document)
        server = await aiohttp_server(backend)
        config = OapiViewsConfig(
            provider=ProviderConfig(source="http", url=str(server.make_url("/openapi.json"))),
        )
        client = await aiohttp_client(create_app(config))

        resp = await client.get("/internal/openapi.json")
        assert list((await resp.json())["paths"]) == ["/status"]

        backend["state"]["document"] = {
            **document,
            "paths": {"/internal/jobs": {"get": {"tags": ["internal"]}}},
        }
        resp = await client.get("/internal/openapi.json")
        assert list((await resp.json())["paths"]) == ["/jobs"]

    @pytest.mark.asyncio
    async def test_unknown_audience_does_not_reach_backend(
        self, aiohttp_server, aiohttp_client, document: dict[str, Any]
    ) -> None:
        """Test unknown audiences are answered without fetching."""
        backend = _backend(document)
        server = await aiohttp_server(backend)
        config = OapiViewsConfig(
            provider=ProviderConfig(source="http", url=str(server.make_url("/openapi.json"))),
        )
        client = await aiohttp_client(create_app(config))

        resp = await client.get("/api/public/v1.0/openapi.json")
        assert resp.status == 404
        assert backend["state"]["requests"] == 0

    @pytest.mark.asyncio
    async def test_backend_down(self, aiohttp_client, unused_tcp_port: int) -> None:
        """Test an unreachable backend gives a bad gateway."""
        config = OapiViewsConfig(
            provider=ProviderConfig(
                source="http",
                url=f"http://127.0.0.1:{unused_tcp_port}/openapi.json",
                timeout_seconds=2.0,
            ),
        )
        client = await aiohttp_client(create_app(config))

        resp = await client.get("/internal/openapi.json")
        assert resp.status == 502
