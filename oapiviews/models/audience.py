"""
Audience model for oapiviews.

An audience selects one view of the canonical document. The set of
audiences is closed, and each one is described by a single
AudiencePolicy record instead of branching on audience names throughout
the filter.
"""

from dataclasses import dataclass
from enum import Enum

from oapiviews.config.schema import FilterConfig
from oapiviews.exceptions import InvalidAudienceError
from oapiviews.models.base import capitalize


class Audience(Enum):
    """The consumer-facing views of the canonical document."""

    NOTIFICATIONS = "notifications"
    INTEGRATIONS = "integrations"
    PRIVATE = "private"
    INTERNAL = "internal"

    @classmethod
    def parse(cls, name: str) -> "Audience":
        """
        Look up an audience by its name.

        Names are matched exactly; ``"Notifications"`` is not an audience.

        Raises:
            InvalidAudienceError: If no audience has this name.
        """
        for audience in cls:
            if audience.value == name:
                return audience
        raise InvalidAudienceError(
            f"No openapi file for [{name}] found.",
            details={"audience": name, "known": [a.value for a in cls]},
        )

    @property
    def title(self) -> str:
        """The capitalized audience name, e.g. ``Integrations``."""
        return capitalize(self.value)


@dataclass(frozen=True)
class AudiencePolicy:
    """
    Filtering policy of a single audience.

    Attributes:
        audience: The audience this policy applies to.
        prefix_sources: Audiences whose path prefixes are candidates for
            stripping, tried in order. A path matching none of them is not
            part of the view.
        keep_private: If True, only operations tagged private are kept;
            otherwise private operations are removed.
        rewrite_paths: If True, surviving operations are emitted under the
            stripped path; otherwise under their original path.
        required_root: Extra root the original path must start with, or
            None when matching a candidate prefix is enough.
        description: Fixed ``info.description``; None falls back to the
            audience title.
        publish_servers: Whether the view lists production and development
            servers.
    """

    audience: Audience
    prefix_sources: tuple[Audience, ...]
    keep_private: bool = False
    rewrite_paths: bool = True
    required_root: str | None = None
    description: str | None = None
    publish_servers: bool = False

    @property
    def info_description(self) -> str:
        """The description written into the view's ``info`` section."""
        return self.description or self.audience.title


def build_policies(config: FilterConfig | None = None) -> dict[Audience, AudiencePolicy]:
    """
    Build the policy table for all audiences.

    The private view covers the private operations of every public
    audience, so its candidate prefixes are those of the public audiences.
    Adding a public audience means adding it here and to that list.

    Args:
        config: Filter configuration; defaults are used when omitted.

    Returns:
        Mapping of every Audience to its policy.
    """
    config = config or FilterConfig()
    descriptions = config.descriptions
    public = (Audience.INTEGRATIONS, Audience.NOTIFICATIONS)

    return {
        Audience.NOTIFICATIONS: AudiencePolicy(
            audience=Audience.NOTIFICATIONS,
            prefix_sources=(Audience.NOTIFICATIONS,),
            description=descriptions.get(Audience.NOTIFICATIONS.value),
            publish_servers=True,
        ),
        Audience.INTEGRATIONS: AudiencePolicy(
            audience=Audience.INTEGRATIONS,
            prefix_sources=(Audience.INTEGRATIONS,),
            description=descriptions.get(Audience.INTEGRATIONS.value),
            publish_servers=True,
        ),
        Audience.PRIVATE: AudiencePolicy(
            audience=Audience.PRIVATE,
            prefix_sources=public,
            keep_private=True,
            rewrite_paths=False,
            description=descriptions.get(Audience.PRIVATE.value),
        ),
        Audience.INTERNAL: AudiencePolicy(
            audience=Audience.INTERNAL,
            prefix_sources=(Audience.INTERNAL,),
            required_root=config.internal_root,
            description=descriptions.get(Audience.INTERNAL.value),
        ),
    }
