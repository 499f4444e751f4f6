"""
Configuration system for oapiviews.

This module provides configuration loading, validation, and management
for oapiviews. Configuration can be loaded from YAML files with
environment variable overrides.
"""

from oapiviews.config.loader import ConfigLoader, load_config
from oapiviews.config.logging_setup import configure_logging
from oapiviews.config.schema import (
    FilterConfig,
    LoggingConfig,
    OapiViewsConfig,
    ProviderConfig,
    ServerConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "configure_logging",
    "OapiViewsConfig",
    "FilterConfig",
    "ProviderConfig",
    "LoggingConfig",
    "ServerConfig",
]
