"""
HTTP document provider.

Fetches the canonical document from the backend's introspection
endpoint with aiohttp.
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from oapiviews.exceptions import DocumentProviderError
from oapiviews.providers.base import DocumentProvider

logger = logging.getLogger("oapiviews.providers.http")


class HttpDocumentProvider(DocumentProvider):
    """
    Fetches the canonical document over HTTP.

    The client session is created on first use and reused until close().

    Example:
        Fetching a snapshot::

            provider = HttpDocumentProvider("http://localhost:8085/openapi.json")
            document = await provider.fetch()
            await provider.close()
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            url: URL of the canonical document.
            timeout_seconds: Total timeout for one fetch.
            session: Existing client session to use. A session passed in
                is not closed by close().
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        """Get the client session, creating it if needed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
            )
            self._owns_session = True
        return self._session

    async def fetch(self) -> dict[str, Any]:
        """
        Fetch the canonical document.

        Raises:
            DocumentProviderError: On transport errors, timeouts, non-2xx
                responses or a body that is not a JSON object.
        """
        session = self._get_session()
        try:
            async with session.get(self.url) as response:
                if response.status >= 400:
                    raise DocumentProviderError(
                        f"Canonical document request failed with status {response.status}",
                        details={"url": self.url, "status": response.status},
                    )
                body = await response.text()
        except aiohttp.ClientError as e:
            raise DocumentProviderError(
                f"Failed to fetch canonical document: {e}",
                details={"url": self.url},
            ) from e
        except asyncio.TimeoutError as e:
            raise DocumentProviderError(
                f"Timed out fetching canonical document after {self.timeout_seconds}s",
                details={"url": self.url},
            ) from e

        try:
            document = json.loads(body)
        except json.JSONDecodeError as e:
            raise DocumentProviderError(
                f"Canonical document is not valid JSON: {e}",
                details={"url": self.url},
            ) from e

        logger.debug(f"Fetched canonical document from {self.url}")
        return self._ensure_object(document, self.url)

    async def close(self) -> None:
        """Close the client session if this provider created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
