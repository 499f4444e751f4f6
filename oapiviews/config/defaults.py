"""
Default configuration values for oapiviews.

The defaults match the layout of the canonical document produced by the
notifications backend: public APIs under ``/api/<audience>/<version>``,
internal endpoints under ``/internal`` and the canonical document served
at ``/openapi.json`` on port 8085.

These defaults can be overridden by YAML configuration files and/or
environment variables.
"""

from oapiviews.config.schema import (
    FilterConfig,
    LoggingConfig,
    OapiViewsConfig,
    ProviderConfig,
    ServerConfig,
)

# Default filter configuration
DEFAULT_FILTER = FilterConfig()

# Default provider configuration - the backend's own introspection endpoint
DEFAULT_PROVIDER = ProviderConfig(
    source="http",
    url="http://localhost:8085/openapi.json",
    path="openapi.json",
    timeout_seconds=10.0,
)

# Default logging configuration
DEFAULT_LOGGING = LoggingConfig(
    level="INFO",
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    output_path="",  # stderr only
)

# Default server configuration
DEFAULT_SERVER = ServerConfig(
    host="127.0.0.1",  # Localhost only
    port=8086,
    cors_origins=[],
)


def get_default_config() -> OapiViewsConfig:
    """
    Get the default configuration.

    Returns:
        OapiViewsConfig with default values.
    """
    return OapiViewsConfig(
        environment="development",
        filter=FilterConfig(
            security_scheme_name=DEFAULT_FILTER.security_scheme_name,
            private_tag=DEFAULT_FILTER.private_tag,
            default_version=DEFAULT_FILTER.default_version,
            internal_root=DEFAULT_FILTER.internal_root,
            canonical_path_suffix=DEFAULT_FILTER.canonical_path_suffix,
            production_url=DEFAULT_FILTER.production_url,
            development_url=DEFAULT_FILTER.development_url,
            development_port=DEFAULT_FILTER.development_port,
            descriptions=dict(DEFAULT_FILTER.descriptions),
        ),
        provider=ProviderConfig(
            source=DEFAULT_PROVIDER.source,
            url=DEFAULT_PROVIDER.url,
            path=DEFAULT_PROVIDER.path,
            timeout_seconds=DEFAULT_PROVIDER.timeout_seconds,
        ),
        logging=LoggingConfig(
            level=DEFAULT_LOGGING.level,
            format=DEFAULT_LOGGING.format,
            output_path=DEFAULT_LOGGING.output_path,
        ),
        server=ServerConfig(
            host=DEFAULT_SERVER.host,
            port=DEFAULT_SERVER.port,
            cors_origins=DEFAULT_SERVER.cors_origins.copy(),
        ),
    )


def get_production_config() -> OapiViewsConfig:
    """
    Get a production configuration.

    Returns:
        OapiViewsConfig with production settings.
    """
    config = get_default_config()
    config.environment = "production"
    config.logging.level = "WARNING"
    config.server.host = "0.0.0.0"
    return config


def get_development_config() -> OapiViewsConfig:
    """
    Get a development configuration with verbose logging.

    Returns:
        OapiViewsConfig with development settings.
    """
    config = get_default_config()
    config.environment = "development"
    config.logging.level = "DEBUG"
    return config


def get_test_config() -> OapiViewsConfig:
    """
    Get a test configuration.

    Reads the canonical document from a local file so tests need no
    running backend.

    Returns:
        OapiViewsConfig with test settings.
    """
    config = get_default_config()
    config.environment = "test"
    config.provider.source = "file"
    config.logging.level = "DEBUG"
    return config
