"""
Canonical document providers.

Providers fetch the complete, unfiltered document the views are built
from. They are the only part of oapiviews that performs I/O on the
document.
"""

from oapiviews.config.schema import ProviderConfig
from oapiviews.providers.base import DocumentProvider
from oapiviews.providers.file import FileDocumentProvider, load_document
from oapiviews.providers.http import HttpDocumentProvider


def create_provider(config: ProviderConfig) -> DocumentProvider:
    """
    Create the provider selected by configuration.

    Args:
        config: Provider configuration.

    Returns:
        An HTTP or file provider.
    """
    if config.source.lower() == "file":
        return FileDocumentProvider(config.path)
    return HttpDocumentProvider(config.url, timeout_seconds=config.timeout_seconds)


__all__ = [
    "DocumentProvider",
    "FileDocumentProvider",
    "HttpDocumentProvider",
    "create_provider",
    "load_document",
]
