"""
File document provider.

Reads the canonical document from a JSON or YAML file. Useful for
rendering views offline from an exported document.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from oapiviews.exceptions import DocumentProviderError
from oapiviews.providers.base import DocumentProvider

logger = logging.getLogger("oapiviews.providers.file")

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: str | Path) -> dict[str, Any]:
    """
    Load a document from a JSON or YAML file.

    The format is chosen by file suffix; ``.yaml`` and ``.yml`` are YAML,
    anything else is JSON.

    Raises:
        DocumentProviderError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentProviderError(
            f"Document file not found: {path}",
            details={"path": str(path)},
        ) from e
    except OSError as e:
        raise DocumentProviderError(
            f"Failed to read document file: {e}",
            details={"path": str(path)},
        ) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DocumentProviderError(
            f"Invalid document in {path}: {e}",
            details={"path": str(path)},
        ) from e

    return DocumentProvider._ensure_object(document, str(path))


class FileDocumentProvider(DocumentProvider):
    """Reads the canonical document from disk on every fetch."""

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the provider.

        Args:
            path: Path to the JSON or YAML document.
        """
        self.path = Path(path)

    async def fetch(self) -> dict[str, Any]:
        """Read and parse the document file."""
        document = load_document(self.path)
        logger.debug(f"Loaded canonical document from {self.path}")
        return document
