"""
Configuration loader for oapiviews.

This module provides the ConfigLoader class for loading configuration
from YAML files with environment variable overrides.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from oapiviews.config.defaults import (
    get_default_config,
    get_development_config,
    get_production_config,
    get_test_config,
)
from oapiviews.config.schema import (
    FilterConfig,
    LoggingConfig,
    OapiViewsConfig,
    ProviderConfig,
    ServerConfig,
)
from oapiviews.exceptions import ConfigurationError


class ConfigLoader:
    """
    Loads and validates oapiviews configuration.

    The ConfigLoader supports loading configuration from:
    1. Default values (per environment profile)
    2. YAML configuration files
    3. Environment variables (OAPIVIEWS_ prefix)

    Configuration sources are applied in order, with later sources
    overriding earlier ones.

    Example:
        Loading configuration::

            loader = ConfigLoader()
            config = loader.load("config/oapiviews.yaml", environment="production")
    """

    ENV_PREFIX = "OAPIVIEWS_"

    def __init__(self) -> None:
        """Initialize the configuration loader."""
        self._config: OapiViewsConfig | None = None

    def load(
        self,
        config_path: str | Path | None = None,
        environment: str | None = None,
    ) -> OapiViewsConfig:
        """
        Load configuration from file and environment.

        Args:
            config_path: Path to a YAML configuration file. If None,
                only defaults and environment variables are used.
            environment: Environment profile to use. Overrides any
                environment setting in the config file.

        Returns:
            A validated OapiViewsConfig object.

        Raises:
            ConfigurationError: If configuration is invalid or file not found.
        """
        if environment:
            config = self._get_environment_defaults(environment)
        else:
            config = get_default_config()

        if config_path:
            file_config = self._load_yaml(config_path)
            config = self._merge_config(config, file_config)

        config = self._apply_env_overrides(config)

        if environment:
            config.environment = environment

        self._validate(config)

        self._config = config
        return config

    def _get_environment_defaults(self, environment: str) -> OapiViewsConfig:
        """Get default configuration for an environment."""
        env_lower = environment.lower()
        if env_lower == "production":
            return get_production_config()
        elif env_lower == "development":
            return get_development_config()
        elif env_lower == "test":
            return get_test_config()
        else:
            config = get_default_config()
            config.environment = environment
            return config

    def _load_yaml(self, path: str | Path) -> dict[str, Any]:
        """
        Load configuration from a YAML file.

        Raises:
            ConfigurationError: If file not found or invalid YAML.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                details={"path": str(path)},
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}",
                details={"path": str(path)},
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                details={"path": str(path)},
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                details={"path": str(path)},
            )
        return data

    def _merge_config(
        self,
        base: OapiViewsConfig,
        override: dict[str, Any],
    ) -> OapiViewsConfig:
        """
        Merge file configuration into base configuration.

        Raises:
            ConfigurationError: If a section fails validation.
        """
        if not override:
            return base

        if "environment" in override:
            base.environment = str(override["environment"])

        try:
            if "filter" in override:
                base.filter = self._merge_filter(base.filter, override["filter"])

            if "provider" in override:
                base.provider = self._merge_provider(base.provider, override["provider"])

            if "logging" in override:
                base.logging = self._merge_logging(base.logging, override["logging"])

            if "server" in override:
                base.server = self._merge_server(base.server, override["server"])
        except (ValueError, TypeError, AttributeError) as e:
            raise ConfigurationError(
                f"Invalid configuration value: {e}",
                details={"error": str(e)},
            ) from e

        return base

    def _merge_filter(
        self,
        base: FilterConfig,
        override: dict[str, Any],
    ) -> FilterConfig:
        """Merge filter configuration."""
        descriptions = dict(base.descriptions)
        descriptions.update(override.get("descriptions") or {})
        return FilterConfig(
            security_scheme_name=override.get(
                "security_scheme_name", base.security_scheme_name
            ),
            private_tag=override.get("private_tag", base.private_tag),
            default_version=str(override.get("default_version", base.default_version)),
            internal_root=override.get("internal_root", base.internal_root),
            canonical_path_suffix=override.get(
                "canonical_path_suffix", base.canonical_path_suffix
            ),
            production_url=override.get("production_url", base.production_url),
            development_url=override.get("development_url", base.development_url),
            development_port=str(override.get("development_port", base.development_port)),
            descriptions=descriptions,
        )

    def _merge_provider(
        self,
        base: ProviderConfig,
        override: dict[str, Any],
    ) -> ProviderConfig:
        """Merge provider configuration."""
        return ProviderConfig(
            source=override.get("source", base.source),
            url=override.get("url", base.url),
            path=override.get("path", base.path),
            timeout_seconds=override.get("timeout_seconds", base.timeout_seconds),
        )

    def _merge_logging(
        self,
        base: LoggingConfig,
        override: dict[str, Any],
    ) -> LoggingConfig:
        """Merge logging configuration."""
        return LoggingConfig(
            level=override.get("level", base.level),
            format=override.get("format", base.format),
            output_path=override.get("output_path", base.output_path),
        )

    def _merge_server(
        self,
        base: ServerConfig,
        override: dict[str, Any],
    ) -> ServerConfig:
        """Merge server configuration."""
        return ServerConfig(
            host=override.get("host", base.host),
            port=override.get("port", base.port),
            cors_origins=override.get("cors_origins", base.cors_origins),
        )

    def _apply_env_overrides(self, config: OapiViewsConfig) -> OapiViewsConfig:
        """
        Apply environment variable overrides to configuration.

        Environment variables use the format OAPIVIEWS_SECTION_OPTION=value,
        for example:
        - OAPIVIEWS_PROVIDER_URL=http://backend:8085/openapi.json
        - OAPIVIEWS_FILTER_SECURITY_SCHEME_NAME=BasicAuth
        - OAPIVIEWS_LOGGING_LEVEL=DEBUG
        """
        env_mapping = {
            # Top-level
            "OAPIVIEWS_ENVIRONMENT": ("environment", str),
            # Filter
            "OAPIVIEWS_FILTER_SECURITY_SCHEME_NAME": ("filter.security_scheme_name", str),
            "OAPIVIEWS_FILTER_PRIVATE_TAG": ("filter.private_tag", str),
            "OAPIVIEWS_FILTER_DEFAULT_VERSION": ("filter.default_version", str),
            "OAPIVIEWS_FILTER_INTERNAL_ROOT": ("filter.internal_root", str),
            "OAPIVIEWS_FILTER_DEVELOPMENT_PORT": ("filter.development_port", str),
            # Provider
            "OAPIVIEWS_PROVIDER_SOURCE": ("provider.source", str),
            "OAPIVIEWS_PROVIDER_URL": ("provider.url", str),
            "OAPIVIEWS_PROVIDER_PATH": ("provider.path", str),
            "OAPIVIEWS_PROVIDER_TIMEOUT_SECONDS": ("provider.timeout_seconds", float),
            # Logging
            "OAPIVIEWS_LOGGING_LEVEL": ("logging.level", str),
            "OAPIVIEWS_LOGGING_OUTPUT_PATH": ("logging.output_path", str),
            # Server
            "OAPIVIEWS_SERVER_HOST": ("server.host", str),
            "OAPIVIEWS_SERVER_PORT": ("server.port", int),
            "OAPIVIEWS_SERVER_CORS_ORIGINS": ("server.cors_origins", self._parse_list),
        }

        for env_var, (path, converter) in env_mapping.items():
            value = os.environ.get(env_var)
            if value is not None:
                try:
                    converted = converter(value)
                    self._set_nested_attr(config, path, converted)
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(
                        f"Invalid value for {env_var}: {e}",
                        details={"env_var": env_var, "value": value},
                    ) from e

        return config

    def _set_nested_attr(self, obj: Any, path: str, value: Any) -> None:
        """Set a nested attribute using dot notation."""
        parts = path.split(".")
        for part in parts[:-1]:
            obj = getattr(obj, part)
        setattr(obj, parts[-1], value)

    def _parse_list(self, value: str) -> list[str]:
        """Parse a comma-separated string to a list."""
        return [item.strip() for item in value.split(",") if item.strip()]

    def _validate(self, config: OapiViewsConfig) -> None:
        """
        Validate the complete configuration.

        Sections are rebuilt so that their __post_init__ checks also
        cover values set through environment overrides.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        errors: list[str] = []

        try:
            OapiViewsConfig(environment=config.environment)
        except ValueError as e:
            errors.append(f"environment: {e}")

        try:
            FilterConfig(
                security_scheme_name=config.filter.security_scheme_name,
                private_tag=config.filter.private_tag,
                default_version=config.filter.default_version,
                internal_root=config.filter.internal_root,
                canonical_path_suffix=config.filter.canonical_path_suffix,
                production_url=config.filter.production_url,
                development_url=config.filter.development_url,
                development_port=config.filter.development_port,
                descriptions=config.filter.descriptions,
            )
        except ValueError as e:
            errors.append(f"filter: {e}")

        try:
            ProviderConfig(
                source=config.provider.source,
                url=config.provider.url,
                path=config.provider.path,
                timeout_seconds=config.provider.timeout_seconds,
            )
        except ValueError as e:
            errors.append(f"provider: {e}")

        try:
            LoggingConfig(
                level=config.logging.level,
                format=config.logging.format,
                output_path=config.logging.output_path,
            )
        except ValueError as e:
            errors.append(f"logging: {e}")

        try:
            ServerConfig(
                host=config.server.host,
                port=config.server.port,
                cors_origins=config.server.cors_origins,
            )
        except ValueError as e:
            errors.append(f"server: {e}")

        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}",
                details={"errors": errors},
            )

    @property
    def config(self) -> OapiViewsConfig:
        """Get the currently loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded. Call load() first.")
        return self._config


def load_config(
    config_path: str | Path | None = None,
    environment: str | None = None,
) -> OapiViewsConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to a YAML configuration file.
        environment: Environment profile to use.

    Returns:
        A validated OapiViewsConfig object.
    """
    loader = ConfigLoader()
    return loader.load(config_path, environment)
