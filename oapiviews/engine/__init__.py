"""
Document transformation engine for oapiviews.

Modules:
    filter: The audience filter and top-level section dispatch
    paths: Prefix building and path rewriting
    operations: Private-tag visibility filtering
    security: Security requirement sanitization
    synthesis: ``info`` and ``servers`` synthesis
"""

from oapiviews.engine.filter import AudienceFilter, DocumentSection, filter_document
from oapiviews.engine.paths import build_prefix, candidate_prefixes, mangle

__all__ = [
    "AudienceFilter",
    "DocumentSection",
    "filter_document",
    "build_prefix",
    "candidate_prefixes",
    "mangle",
]
