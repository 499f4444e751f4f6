"""
Path classification and rewriting.

Public APIs live under ``/api/<audience>/<version>``; unversioned APIs
(the internal one) live under ``/<audience>``. A view strips its
audience's prefix from every path it keeps.
"""

from oapiviews.models.audience import Audience, AudiencePolicy


def build_prefix(audience: Audience, version: str | None) -> str:
    """
    Build the path prefix of an audience.

    Args:
        audience: The audience.
        version: API version tag, or None for an unversioned API.

    Returns:
        ``/api/<audience>/<version>``, or ``/<audience>`` without a version.
    """
    if version is None:
        return f"/{audience.value}"
    return f"/api/{audience.value}/{version}"


def candidate_prefixes(policy: AudiencePolicy, version: str | None) -> list[str]:
    """Return the prefixes a path may be stripped of, in match order."""
    return [build_prefix(source, version) for source in policy.prefix_sources]


def mangle(path: str, prefixes: list[str]) -> str | None:
    """
    Strip the first matching prefix from a path.

    Args:
        path: Original path from the canonical document.
        prefixes: Candidate prefixes, tried in order.

    Returns:
        The remainder of the path, ``/`` if the path equals the prefix,
        or None if no prefix matches.
    """
    for prefix in prefixes:
        if path.startswith(prefix):
            return path[len(prefix):] or "/"
    return None
