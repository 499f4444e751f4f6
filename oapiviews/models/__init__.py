"""
Data models for oapiviews.

Exports:
    Audience: The closed set of document views
    AudiencePolicy: Per-audience filtering policy
    build_policies: Build the policy table from configuration
"""

from oapiviews.models.audience import Audience, AudiencePolicy, build_policies
from oapiviews.models.base import capitalize, generate_uuid, utc_now

__all__ = [
    "Audience",
    "AudiencePolicy",
    "build_policies",
    "capitalize",
    "generate_uuid",
    "utc_now",
]
