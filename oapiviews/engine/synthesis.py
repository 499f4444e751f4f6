"""
Synthesis of the ``info`` and ``servers`` sections of a view.

The canonical document's own ``info`` and ``servers`` describe the whole
backend, so every view gets new ones describing its audience.
"""

from typing import Any

from oapiviews.config.schema import FilterConfig
from oapiviews.engine.paths import build_prefix
from oapiviews.models.audience import AudiencePolicy


def build_info(
    policy: AudiencePolicy,
    version: str | None,
    config: FilterConfig,
) -> dict[str, Any]:
    """Build the ``info`` section of a view."""
    return {
        "version": config.default_version if version is None else version,
        "title": policy.audience.title,
        "description": policy.info_description,
    }


def build_servers(
    policy: AudiencePolicy,
    version: str | None,
    config: FilterConfig,
) -> list[dict[str, Any]]:
    """
    Build the ``servers`` section of a view.

    Public views list a production and a development server whose
    ``basePath`` variable defaults to the audience prefix. Other views
    list no servers.
    """
    if not policy.publish_servers:
        return []

    base_path = build_prefix(policy.audience, version)
    return [
        {
            "url": config.production_url,
            "description": "Production Server",
            "variables": {
                "basePath": {"default": base_path},
            },
        },
        {
            "url": config.development_url,
            "description": "Development Server",
            "variables": {
                "basePath": {"default": base_path},
                "port": {"default": config.development_port},
            },
        },
    ]
