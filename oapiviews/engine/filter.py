"""
Audience filter for the canonical OpenAPI document.

The filter turns the complete document generated by endpoint
introspection into the view of a single audience:

1. Top-level sections are dispatched over a closed set. ``openapi`` and
   ``components`` are copied, ``tags`` loses the private tag, ``paths``
   is filtered, ``info`` and ``servers`` are replaced. Any other section
   is an error, so content added by the document producer can never
   silently vanish from every view.
2. Each path is matched against the audience's candidate prefixes,
   stripped, and reduced to the operations visible to the audience.
3. Security requirements of every kept operation are sanitized.
4. ``info`` and ``servers`` are synthesized for the audience.

The filter is a pure function of its inputs: the source document is
never modified, so one snapshot may be filtered for several audiences.

Example:
    Building the integrations view::

        from oapiviews.engine import AudienceFilter

        view = AudienceFilter().filter(document, "integrations", "v1.0")
"""

import copy
import logging
from enum import Enum
from typing import Any

from oapiviews.config.schema import FilterConfig
from oapiviews.engine.operations import filter_operations
from oapiviews.engine.paths import candidate_prefixes, mangle
from oapiviews.engine.security import sanitize_path_item
from oapiviews.engine.synthesis import build_info, build_servers
from oapiviews.exceptions import EmptyResultError, UnknownDocumentElementError
from oapiviews.models.audience import Audience, AudiencePolicy, build_policies

logger = logging.getLogger("oapiviews.engine.filter")


class DocumentSection(Enum):
    """Top-level sections of the canonical document handled by the filter."""

    OPENAPI = "openapi"
    INFO = "info"
    SERVERS = "servers"
    TAGS = "tags"
    PATHS = "paths"
    COMPONENTS = "components"


class AudienceFilter:
    """
    Builds audience views of the canonical document.

    Attributes:
        config: Filter configuration.
        policies: Policy table, one entry per audience.
    """

    def __init__(self, config: FilterConfig | None = None) -> None:
        """
        Initialize the filter.

        Args:
            config: Filter configuration; defaults are used when omitted.
        """
        self.config = config or FilterConfig()
        self.policies: dict[Audience, AudiencePolicy] = build_policies(self.config)

    def filter(
        self,
        document: dict[str, Any],
        audience: Audience | str,
        version: str | None = None,
    ) -> dict[str, Any]:
        """
        Build the view of the document for an audience.

        Args:
            document: The canonical document. It is not modified.
            audience: The audience, or its name.
            version: API version tag, or None for an unversioned view.

        Returns:
            The view: ``openapi``, ``components``, optional ``tags``, a
            non-empty ``paths``, ``info`` and ``servers``.

        Raises:
            InvalidAudienceError: If an audience name is unknown.
            UnknownDocumentElementError: If the document has a top-level
                section the filter does not handle.
            EmptyResultError: If no path of the document belongs to the view.
        """
        if isinstance(audience, str):
            audience = Audience.parse(audience)
        policy = self.policies[audience]

        view: dict[str, Any] = {}
        for key, value in document.items():
            section = self._section(key)

            if section in (DocumentSection.OPENAPI, DocumentSection.COMPONENTS):
                view[key] = copy.deepcopy(value)
            elif section is DocumentSection.TAGS:
                tags = self._filter_tags(value)
                if tags:
                    view[key] = tags
            elif section is DocumentSection.PATHS:
                view[key] = self._filter_paths(value, policy, version)
            # INFO and SERVERS are synthesized below

        if not view.get(DocumentSection.PATHS.value):
            raise EmptyResultError(
                f"No paths found for the {audience.value} view",
                details={"audience": audience.value, "version": version},
            )

        view[DocumentSection.INFO.value] = build_info(policy, version, self.config)
        view[DocumentSection.SERVERS.value] = build_servers(policy, version, self.config)

        logger.debug(
            f"Built {audience.value} view ({version or 'unversioned'}) "
            f"with {len(view['paths'])} paths"
        )
        return view

    def _section(self, key: str) -> DocumentSection:
        """Map a top-level key to its section, rejecting unknown keys."""
        try:
            return DocumentSection(key)
        except ValueError:
            logger.error(f"Unknown OpenAPI top-level element {key}")
            raise UnknownDocumentElementError(
                f"Unknown OpenAPI top-level element {key}",
                details={"element": key},
            ) from None

    def _filter_tags(self, tags: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Drop the private tag from the tag list."""
        return [
            copy.deepcopy(tag)
            for tag in tags
            if tag.get("name") != self.config.private_tag
        ]

    def _filter_paths(
        self,
        paths: dict[str, Any],
        policy: AudiencePolicy,
        version: str | None,
    ) -> dict[str, Any]:
        """
        Select, rewrite and sanitize the paths belonging to a view.

        Args:
            paths: The canonical ``paths`` mapping.
            policy: Policy of the requested audience.
            version: API version tag, or None.

        Returns:
            The view's ``paths`` mapping, possibly empty.
        """
        prefixes = candidate_prefixes(policy, version)
        result: dict[str, Any] = {}

        for path, path_item in paths.items():
            if path.endswith(self.config.canonical_path_suffix):
                continue

            mangled = mangle(path, prefixes)
            if mangled is None:
                continue
            if policy.required_root is not None and not path.startswith(policy.required_root):
                continue

            sanitized = sanitize_path_item(path_item, self.config.security_scheme_name)
            operations = filter_operations(
                sanitized,
                keep_private=policy.keep_private,
                private_tag=self.config.private_tag,
            )
            if operations is None:
                continue

            result[mangled if policy.rewrite_paths else path] = operations

        return result


def filter_document(
    document: dict[str, Any],
    audience: Audience | str,
    version: str | None = None,
    config: FilterConfig | None = None,
) -> dict[str, Any]:
    """
    Convenience function to build a single view.

    Args:
        document: The canonical document.
        audience: The audience, or its name.
        version: API version tag, or None.
        config: Filter configuration.

    Returns:
        The audience view.
    """
    return AudienceFilter(config).filter(document, audience, version)
