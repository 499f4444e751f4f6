"""
Exception classes for oapiviews.

This module defines the exception hierarchy used throughout oapiviews.
All custom exceptions inherit from OapiViewsError to allow for easy
catching of any oapiviews-specific exception.
"""

from typing import Any


class OapiViewsError(Exception):
    """
    Base exception for all oapiviews errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class ConfigurationError(OapiViewsError):
    """
    Raised when there is an error in oapiviews configuration.

    Examples:
        - Missing configuration file
        - Invalid YAML syntax in configuration
        - Configuration value out of allowed range
        - Unparseable environment variable override
    """

    pass


class ValidationError(OapiViewsError):
    """
    Raised when caller-supplied input fails validation.
    """

    pass


class InvalidAudienceError(ValidationError):
    """
    Raised when the requested audience is not one of the known audiences.

    Surfaced as "not found" at the HTTP boundary, since no view exists
    for the requested name.
    """

    pass


class EmptyResultError(OapiViewsError):
    """
    Raised when filtering leaves no paths for the requested view.

    A view without paths is reported as "nothing to show" instead of
    being returned as an empty document.
    """

    pass


class UnknownDocumentElementError(OapiViewsError):
    """
    Raised when the canonical document has a top-level key the filter
    does not handle.

    This indicates the document producer and the filter have drifted
    apart. It is an internal defect: retrying will not help.
    """

    pass


class DocumentProviderError(OapiViewsError):
    """
    Raised when the canonical document cannot be obtained.

    Examples:
        - Introspection endpoint unreachable or returned an error status
        - Document file missing or not parseable
        - Document is not a JSON object
    """

    pass
