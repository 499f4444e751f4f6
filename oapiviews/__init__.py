"""
oapiviews: audience-scoped views of a canonical OpenAPI document.

A backend generates one complete OpenAPI document by introspecting all of
its REST endpoints. oapiviews splits that document, on demand, into
audience-specific views without maintaining separate source documents:

    - notifications: the public Notifications API
    - integrations: the public Integrations API
    - private: operations tagged ``private`` inside the public surfaces
    - internal: service-to-service endpoints

Each view has its paths rewritten relative to the audience prefix, its
operations filtered by the ``private`` tag, its security requirements
sanitized, and freshly synthesized ``info`` and ``servers`` sections.

Example:
    Filtering a document in memory::

        from oapiviews.engine import AudienceFilter
        from oapiviews.models import Audience

        view = AudienceFilter().filter(document, Audience.NOTIFICATIONS, "v1.0")

Public API:
    __version__: The package version string
    OapiViewsError: Base exception for all oapiviews errors
    ConfigurationError: Configuration-related errors
    ValidationError: Input validation errors
    InvalidAudienceError: Unknown audience requested
    EmptyResultError: View would contain no paths
    UnknownDocumentElementError: Canonical document has an unhandled section
    DocumentProviderError: Canonical document could not be fetched
"""

from oapiviews.exceptions import (
    ConfigurationError,
    DocumentProviderError,
    EmptyResultError,
    InvalidAudienceError,
    OapiViewsError,
    UnknownDocumentElementError,
    ValidationError,
)
from oapiviews.version import __version__

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "OapiViewsError",
    "ConfigurationError",
    "ValidationError",
    "InvalidAudienceError",
    "EmptyResultError",
    "UnknownDocumentElementError",
    "DocumentProviderError",
]
