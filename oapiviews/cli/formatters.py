"""
Output formatters for the oapiviews CLI.

Views are written as JSON or YAML; both encode the same document tree.
"""

import json
from typing import Any

import yaml


def format_output(data: Any, output_format: str = "json") -> str:
    """
    Format data for output in the specified format.

    Args:
        data: Data to format.
        output_format: Output format (json, yaml).

    Returns:
        Formatted string.
    """
    if output_format == "yaml":
        return YamlFormatter.format(data)
    return JsonFormatter.format(data)


class JsonFormatter:
    """Format data as JSON."""

    @staticmethod
    def format(data: Any, indent: int = 2) -> str:
        """Format data as indented JSON, keeping key order."""
        return json.dumps(data, indent=indent, ensure_ascii=False)


class YamlFormatter:
    """Format data as YAML."""

    @staticmethod
    def format(data: Any) -> str:
        """Format data as block-style YAML, keeping key order."""
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
