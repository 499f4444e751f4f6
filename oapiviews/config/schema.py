"""
Configuration schema definitions for oapiviews.

This module defines the configuration structure using dataclasses.
All configuration options are strongly typed with validation support.
"""

from dataclasses import dataclass, field
from typing import Any

NOTIFICATIONS_DESCRIPTION = (
    "The API for Notifications provides endpoints that you can use to create and "
    "manage event notifications between third-party applications and the Red Hat "
    "Hybrid Cloud Console."
)
INTEGRATIONS_DESCRIPTION = (
    "The API for Integrations provides endpoints that you can use to create and "
    "manage integrations between third-party applications and the Red Hat Hybrid "
    "Cloud Console."
)


@dataclass
class FilterConfig:
    """
    Audience filter configuration options.

    Attributes:
        security_scheme_name: Name of the role-based security scheme whose
            scopes are cleared in every view. The introspection framework
            also generates a basic-auth scheme under this name, and the
            roles make the two inconsistent.
        private_tag: Operation tag marking endpoints hidden from the public
            views and exposed in the private view.
        default_version: Version written to ``info.version`` when the
            request carries no version.
        internal_root: Path root an operation must live under to appear in
            the internal view.
        canonical_path_suffix: Paths ending with this suffix serve the
            canonical document itself and are dropped from every view.
        production_url: URL template of the synthesized production server.
        development_url: URL template of the synthesized development server.
        development_port: Default of the development server ``port`` variable.
        descriptions: Fixed ``info.description`` per audience name. Audiences
            without an entry use their capitalized name.
    """

    security_scheme_name: str = "SecurityScheme"
    private_tag: str = "private"
    default_version: str = "v1.0"
    internal_root: str = "/internal"
    canonical_path_suffix: str = "openapi.json"
    production_url: str = "https://console.redhat.com/{basePath}"
    development_url: str = "http://localhost:{port}/{basePath}"
    development_port: str = "8080"
    descriptions: dict[str, str] = field(
        default_factory=lambda: {
            "notifications": NOTIFICATIONS_DESCRIPTION,
            "integrations": INTEGRATIONS_DESCRIPTION,
        }
    )

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.security_scheme_name:
            raise ValueError("security_scheme_name must not be empty")
        if not self.private_tag:
            raise ValueError("private_tag must not be empty")
        if not self.internal_root.startswith("/"):
            raise ValueError("internal_root must start with '/'")
        if not self.canonical_path_suffix:
            raise ValueError("canonical_path_suffix must not be empty")
        if "{basePath}" not in self.production_url:
            raise ValueError("production_url must contain the {basePath} variable")
        if "{basePath}" not in self.development_url or "{port}" not in self.development_url:
            raise ValueError("development_url must contain {port} and {basePath} variables")
        if not str(self.development_port).isdigit():
            raise ValueError("development_port must be numeric")


@dataclass
class ProviderConfig:
    """
    Canonical document provider configuration options.

    Attributes:
        source: Where the canonical document comes from: "http" fetches it
            from the introspection endpoint, "file" reads it from disk.
        url: URL of the introspection endpoint (http source).
        path: Path of the document file, JSON or YAML (file source).
        timeout_seconds: Timeout for fetching the document over HTTP.
    """

    source: str = "http"
    url: str = "http://localhost:8085/openapi.json"
    path: str = "openapi.json"
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        valid_sources = ["http", "file"]
        if self.source.lower() not in valid_sources:
            raise ValueError(f"source must be one of: {valid_sources}")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")


@dataclass
class LoggingConfig:
    """
    Logging configuration options.

    Attributes:
        level: Minimum log level to output. One of: DEBUG, INFO,
            WARNING, ERROR, CRITICAL.
        format: Log message format string. Supports standard Python
            logging format specifiers.
        output_path: Path to log file. If empty, logs are written to
            stderr only.
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    output_path: str = ""

    def __post_init__(self) -> None:
        """Validate configuration values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {valid_levels}")


@dataclass
class ServerConfig:
    """
    HTTP server configuration options.

    Attributes:
        host: Host address to bind the server to.
        port: Port number to listen on.
        cors_origins: List of allowed CORS origins. Empty list disables CORS.
    """

    host: str = "127.0.0.1"
    port: int = 8086
    cors_origins: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.port < 1 or self.port > 65535:
            raise ValueError("port must be between 1 and 65535")


@dataclass
class OapiViewsConfig:
    """
    Root configuration object for oapiviews.

    Attributes:
        environment: The environment profile name (development, staging,
            production, test).
        filter: Audience filter configuration options.
        provider: Canonical document provider options.
        logging: Logging configuration options.
        server: HTTP server configuration options.
    """

    environment: str = "development"
    filter: FilterConfig = field(default_factory=FilterConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        valid_environments = ["development", "staging", "production", "test"]
        if self.environment.lower() not in valid_environments:
            raise ValueError(f"environment must be one of: {valid_environments}")

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "environment": self.environment,
            "filter": {
                "security_scheme_name": self.filter.security_scheme_name,
                "private_tag": self.filter.private_tag,
                "default_version": self.filter.default_version,
                "internal_root": self.filter.internal_root,
                "canonical_path_suffix": self.filter.canonical_path_suffix,
                "production_url": self.filter.production_url,
                "development_url": self.filter.development_url,
                "development_port": self.filter.development_port,
                "descriptions": dict(self.filter.descriptions),
            },
            "provider": {
                "source": self.provider.source,
                "url": self.provider.url,
                "path": self.provider.path,
                "timeout_seconds": self.provider.timeout_seconds,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "output_path": self.logging.output_path,
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "cors_origins": list(self.server.cors_origins),
            },
        }
