"""
Serving operation for audience views.

OpenApiService ties a document provider to the audience filter: it
validates the requested audience, fetches a fresh canonical snapshot,
filters it and serializes the view.
"""

import json
import logging
from typing import Any

from oapiviews.engine.filter import AudienceFilter
from oapiviews.models.audience import Audience
from oapiviews.providers.base import DocumentProvider

logger = logging.getLogger("oapiviews.service")


class OpenApiService:
    """
    Serves audience views of the canonical document.

    Example:
        Serving the notifications view::

            service = OpenApiService(HttpDocumentProvider(url))
            text = await service.serve("notifications", "v1.0")
    """

    def __init__(
        self,
        provider: DocumentProvider,
        audience_filter: AudienceFilter | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            provider: Source of the canonical document.
            audience_filter: Filter to apply; a default one is used when omitted.
        """
        self.provider = provider
        self.audience_filter = audience_filter or AudienceFilter()

    async def serve(self, audience_name: str, version: str | None = None) -> str:
        """
        Build and serialize the view for an audience.

        The audience is validated before the document is fetched, so an
        unknown audience costs no request to the provider.

        Args:
            audience_name: Name of the audience.
            version: API version tag, or None for an unversioned view.

        Returns:
            The view as JSON text.

        Raises:
            InvalidAudienceError: If the audience is unknown.
            DocumentProviderError: If the canonical document is unavailable.
            EmptyResultError: If the view would have no paths.
            UnknownDocumentElementError: If the document has an unhandled section.
        """
        audience = Audience.parse(audience_name)
        document = await self.provider.fetch()
        return self.render(document, audience, version)

    def render(
        self,
        document: dict[str, Any],
        audience: Audience | str,
        version: str | None = None,
    ) -> str:
        """Filter a document for an audience and serialize the view as JSON."""
        view = self.audience_filter.filter(document, audience, version)
        return json.dumps(view)

    async def close(self) -> None:
        """Close the underlying provider."""
        await self.provider.close()
