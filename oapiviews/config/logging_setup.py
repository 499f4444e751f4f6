"""
Logging setup for oapiviews.

Applies a LoggingConfig to the ``oapiviews`` logger hierarchy. Library
code only obtains loggers; handlers are attached here by the entry points
(CLI and server runner).
"""

import logging
import sys

from oapiviews.config.schema import LoggingConfig
from oapiviews.exceptions import ConfigurationError


def configure_logging(config: LoggingConfig, level_override: str | None = None) -> logging.Logger:
    """
    Configure the ``oapiviews`` logger from configuration.

    Calling this more than once replaces the handlers installed by the
    previous call.

    Args:
        config: Logging configuration.
        level_override: Level to use instead of ``config.level``.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the log file cannot be opened.
    """
    logger = logging.getLogger("oapiviews")
    level = (level_override or config.level).upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_oapiviews_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if config.output_path:
        try:
            handlers.append(logging.FileHandler(config.output_path, encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(
                f"Cannot open log file: {e}",
                details={"path": config.output_path},
            ) from e

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._oapiviews_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
