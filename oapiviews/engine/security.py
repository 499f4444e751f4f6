"""
Security metadata sanitization.

The introspection framework generates a role-based security requirement
and a basic-auth security scheme under the same name. Roles on a
basic-auth scheme make the document inconsistent, so the scopes of that
scheme are cleared in every operation's ``security`` list.
"""

import copy
from typing import Any

from oapiviews.engine.operations import is_operation


def sanitize_security(
    security: list[Any],
    scheme_name: str,
) -> list[Any]:
    """
    Return a copy of a security requirement list with the scheme's scopes cleared.

    Example:
        ``[{"SecurityScheme": ["admin"]}]`` becomes ``[{"SecurityScheme": []}]``.
    """
    sanitized: list[Any] = []
    for requirement in security:
        if isinstance(requirement, dict):
            requirement = copy.deepcopy(requirement)
            if scheme_name in requirement:
                requirement[scheme_name] = []
        sanitized.append(requirement)
    return sanitized


def sanitize_path_item(path_item: dict[str, Any], scheme_name: str) -> dict[str, Any]:
    """
    Return a deep copy of a path item with every operation's security sanitized.

    The input path item is not modified.
    """
    sanitized: dict[str, Any] = {}
    for verb, value in path_item.items():
        if is_operation(value) and isinstance(value.get("security"), list):
            operation = copy.deepcopy(value)
            operation["security"] = sanitize_security(value["security"], scheme_name)
            sanitized[verb] = operation
        else:
            sanitized[verb] = copy.deepcopy(value)
    return sanitized
