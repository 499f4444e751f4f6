"""
Operation visibility filtering.

Operations tagged private are hidden from the public and internal views
and are the only operations shown in the private view.
"""

from typing import Any


def is_operation(value: Any) -> bool:
    """Path item entries that are mappings are operations; others are path-level fields."""
    return isinstance(value, dict)


def is_private(operation: dict[str, Any], private_tag: str) -> bool:
    """Check whether an operation carries the private tag."""
    tags = operation.get("tags") or []
    return private_tag in tags


def filter_operations(
    path_item: dict[str, Any],
    keep_private: bool,
    private_tag: str,
) -> dict[str, Any] | None:
    """
    Keep the operations of a path item that match the visibility rule.

    Path-level fields such as ``parameters`` are carried over unchanged
    when at least one operation survives.

    Args:
        path_item: Mapping of HTTP verb to operation.
        keep_private: Keep only private operations if True, only
            non-private ones otherwise.
        private_tag: Name of the private tag.

    Returns:
        The filtered path item, or None if no operation survives.
    """
    filtered: dict[str, Any] = {}
    kept = 0
    for verb, value in path_item.items():
        if not is_operation(value):
            filtered[verb] = value
            continue
        if is_private(value, private_tag) == keep_private:
            filtered[verb] = value
            kept += 1

    if kept == 0:
        return None
    return filtered
