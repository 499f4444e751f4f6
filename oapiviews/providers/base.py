"""
Base class for canonical document providers.
"""

from abc import ABC, abstractmethod
from typing import Any

from oapiviews.exceptions import DocumentProviderError


class DocumentProvider(ABC):
    """
    Source of the canonical document.

    Every call to fetch() returns a fresh snapshot that the caller owns.
    """

    @abstractmethod
    async def fetch(self) -> dict[str, Any]:
        """
        Fetch the complete, unfiltered document.

        Raises:
            DocumentProviderError: If the document cannot be obtained.
        """

    async def close(self) -> None:
        """Release resources held by the provider."""

    @staticmethod
    def _ensure_object(document: Any, source: str) -> dict[str, Any]:
        """Reject documents whose root is not an object."""
        if not isinstance(document, dict):
            raise DocumentProviderError(
                "Canonical document must be a JSON object",
                details={"source": source, "type": type(document).__name__},
            )
        return document
