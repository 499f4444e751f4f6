"""
Pytest configuration and shared fixtures for oapiviews tests.

This module provides:
- Canonical document fixtures (in memory and on disk)
- Filter and configuration fixtures
- Environment isolation for configuration tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from oapiviews.config.schema import FilterConfig
from oapiviews.engine.filter import AudienceFilter
from tests.helpers import canonical_document


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def document() -> dict[str, Any]:
    """Create a canonical document covering every audience."""
    return canonical_document()


@pytest.fixture
def document_file(tmp_path: Path, document: dict[str, Any]) -> Path:
    """Write the canonical document to a JSON file."""
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


# =============================================================================
# Filter Fixtures
# =============================================================================


@pytest.fixture
def filter_config() -> FilterConfig:
    """Create a default filter configuration."""
    return FilterConfig()


@pytest.fixture
def audience_filter(filter_config: FilterConfig) -> AudienceFilter:
    """Create an audience filter with default configuration."""
    return AudienceFilter(filter_config)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove OAPIVIEWS_* variables so configuration tests see defaults."""
    import os

    for name in list(os.environ):
        if name.startswith("OAPIVIEWS_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
