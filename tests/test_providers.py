"""
Tests for canonical document providers.
"""

import json
from pathlib import Path
from typing import Any

import pytest
from aiohttp import web

from oapiviews.config.schema import ProviderConfig
from oapiviews.exceptions import DocumentProviderError
from oapiviews.providers import (
    FileDocumentProvider,
    HttpDocumentProvider,
    create_provider,
    load_document,
)


# =============================================================================
# File Provider Tests
# =============================================================================


class TestLoadDocument:
    """Tests for load_document."""

    def test_json(self, document_file: Path, document: dict[str, Any]) -> None:
        """Test loading a JSON document."""
        assert load_document(document_file) == document

    def test_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML document."""
        path = tmp_path / "openapi.yaml"
        path.write_text(
            "openapi: 3.0.3\n"
            "paths:\n"
            "  /internal/status:\n"
            "    get:\n"
            "      tags: [internal]\n",
            encoding="utf-8",
        )
        document = load_document(path)
        assert document["openapi"] == "3.0.3"
        assert document["paths"]["/internal/status"]["get"]["tags"] == ["internal"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file is a provider error."""
        with pytest.raises(DocumentProviderError, match="not found"):
            load_document(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON is a provider error."""
        path = tmp_path / "openapi.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentProviderError, match="Invalid document"):
            load_document(path)

    def test_non_object(self, tmp_path: Path) -> None:
        """Test a document must be an object."""
        path = tmp_path / "openapi.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(DocumentProviderError) as exc_info:
            load_document(path)
        assert exc_info.value.details["type"] == "list"


class TestFileDocumentProvider:
    """Tests for FileDocumentProvider."""

    @pytest.mark.asyncio
    async def test_fetch(self, document_file: Path, document: dict[str, Any]) -> None:
        """Test fetching reads the file."""
        provider = FileDocumentProvider(document_file)
        assert await provider.fetch() == document
        await provider.close()

    @pytest.mark.asyncio
    async def test_fetch_rereads(self, document_file: Path) -> None:
        """Test each fetch returns a fresh snapshot."""
        provider = FileDocumentProvider(document_file)
        first = await provider.fetch()
        first["paths"].clear()

        document_file.write_text(json.dumps({"openapi": "3.1.0"}), encoding="utf-8")
        assert await provider.fetch() == {"openapi": "3.1.0"}


# =============================================================================
# HTTP Provider Tests
# =============================================================================


def _document_app(document: dict[str, Any]) -> web.Application:
    """Build a backend stand-in serving the canonical document."""

    async def openapi(request: web.Request) -> web.Response:
        return web.json_response(document)

    async def broken(request: web.Request) -> web.Response:
        return web.Response(status=500, text="boom")

    async def garbage(request: web.Request) -> web.Response:
        return web.Response(text="<html>", content_type="text/html")

    async def array(request: web.Request) -> web.Response:
        return web.json_response([document])

    app = web.Application()
    app.router.add_get("/openapi.json", openapi)
    app.router.add_get("/broken", broken)
    app.router.add_get("/garbage", garbage)
    app.router.add_get("/array", array)
    return app


class TestHttpDocumentProvider:
    """Tests for HttpDocumentProvider."""

    @pytest.mark.asyncio
    async def test_fetch(self, aiohttp_server, document: dict[str, Any]) -> None:
        """Test fetching the document over HTTP."""
        server = await aiohttp_server(_document_app(document))
        provider = HttpDocumentProvider(str(server.make_url("/openapi.json")))
        try:
            assert await provider.fetch() == document
            assert await provider.fetch() == document
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_error_status(self, aiohttp_server, document: dict[str, Any]) -> None:
        """Test an error status is a provider error."""
        server = await aiohttp_server(_document_app(document))
        provider = HttpDocumentProvider(str(server.make_url("/broken")))
        try:
            with pytest.raises(DocumentProviderError) as exc_info:
                await provider.fetch()
            assert exc_info.value.details["status"] == 500
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_not_found(self, aiohttp_server, document: dict[str, Any]) -> None:
        """Test a missing endpoint is a provider error."""
        server = await aiohttp_server(_document_app(document))
        provider = HttpDocumentProvider(str(server.make_url("/nothing")))
        try:
            with pytest.raises(DocumentProviderError, match="404"):
                await provider.fetch()
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_invalid_json(self, aiohttp_server, document: dict[str, Any]) -> None:
        """Test a non-JSON body is a provider error."""
        server = await aiohttp_server(_document_app(document))
        provider = HttpDocumentProvider(str(server.make_url("/garbage")))
        try:
            with pytest.raises(DocumentProviderError, match="not valid JSON"):
                await provider.fetch()
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_non_object(self, aiohttp_server, document: dict[str, Any]) -> None:
        """Test a JSON array is a provider error."""
        server = await aiohttp_server(_document_app(document))
        provider = HttpDocumentProvider(str(server.make_url("/array")))
        try:
            with pytest.raises(DocumentProviderError, match="JSON object"):
                await provider.fetch()
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_connection_refused(self, unused_tcp_port: int) -> None:
        """Test an unreachable backend is a provider error."""
        provider = HttpDocumentProvider(
            f"http://127.0.0.1:{unused_tcp_port}/openapi.json",
            timeout_seconds=2.0,
        )
        try:
            with pytest.raises(DocumentProviderError):
                await provider.fetch()
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_close_keeps_external_session(
        self, aiohttp_server, document: dict[str, Any]
    ) -> None:
        """Test a session passed in is left open on close."""
        import aiohttp

        server = await aiohttp_server(_document_app(document))
        async with aiohttp.ClientSession() as session:
            provider = HttpDocumentProvider(
                str(server.make_url("/openapi.json")), session=session
            )
            assert await provider.fetch() == document
            await provider.close()
            assert not session.closed


# =============================================================================
# Factory Tests
# =============================================================================


class TestCreateProvider:
    """Tests for create_provider."""

    def test_http(self) -> None:
        """Test the http source builds an HTTP provider."""
        provider = create_provider(
            ProviderConfig(source="http", url="http://backend/openapi.json", timeout_seconds=3)
        )
        assert isinstance(provider, HttpDocumentProvider)
        assert provider.url == "http://backend/openapi.json"
        assert provider.timeout_seconds == 3

    def test_file(self, tmp_path: Path) -> None:
        """Test the file source builds a file provider."""
        provider = create_provider(ProviderConfig(source="File", path=str(tmp_path / "a.json")))
        assert isinstance(provider, FileDocumentProvider)
        assert provider.path == tmp_path / "a.json"
