"""
Main entry point for the oapiviews CLI.

This module provides the command-line interface for oapiviews using
argparse for argument parsing. It supports global options, subcommands,
and proper exit codes.

Exit Codes:
    0: Success
    1: General error
    2: Not found or validation error (unknown audience, empty view)
    3: Configuration error
"""

import argparse
import logging
import sys
from typing import Any

from oapiviews import __version__
from oapiviews.exceptions import (
    ConfigurationError,
    EmptyResultError,
    OapiViewsError,
    ValidationError,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_CONFIG_ERROR = 3


class CLIContext:
    """
    Context object that holds CLI state and configuration.

    Attributes:
        config_path: Path to the configuration file.
        verbose: Enable verbose output.
        quiet: Suppress non-essential output.
        output_format: Output format (json, yaml).
    """

    def __init__(
        self,
        config_path: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        output_format: str = "json",
    ) -> None:
        """
        Initialize the CLI context.

        Args:
            config_path: Path to configuration file.
            verbose: Enable verbose output.
            quiet: Suppress non-essential output.
            output_format: Output format.
        """
        self.config_path = config_path
        self.verbose = verbose
        self.quiet = quiet
        self.output_format = output_format
        self._config: Any = None
        self._logger: logging.Logger | None = None

    @property
    def config(self) -> Any:
        """
        Load and return configuration.

        Returns:
            OapiViewsConfig object.

        Raises:
            ConfigurationError: If configuration cannot be loaded.
        """
        if self._config is None:
            from oapiviews.config.loader import ConfigLoader

            loader = ConfigLoader()
            self._config = loader.load(self.config_path)

        return self._config

    @property
    def logger(self) -> logging.Logger:
        """Get the package logger, configured from the loaded configuration."""
        if self._logger is None:
            from oapiviews.config.logging_setup import configure_logging

            level = None
            if self.verbose:
                level = "DEBUG"
            elif self.quiet:
                level = "WARNING"
            self._logger = configure_logging(self.config.logging, level_override=level)

        return self._logger

    def print(self, message: str, error: bool = False) -> None:
        """
        Print a message to stdout or stderr.

        Args:
            message: The message to print.
            error: If True, print to stderr.
        """
        if self.quiet and not error:
            return
        output = sys.stderr if error else sys.stdout
        print(message, file=output)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="oapiviews",
        description="oapiviews: audience-scoped views of a canonical OpenAPI document",
        epilog="Use 'oapiviews <command> --help' for more information on a command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global options
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"oapiviews {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        metavar="<command>",
    )

    _register_commands(subparsers)

    return parser


def _register_commands(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register all command modules with the parser.

    Args:
        subparsers: Subparsers action to add commands to.
    """
    from oapiviews.cli.commands import audiences as audiences_cmd
    from oapiviews.cli.commands import config as config_cmd
    from oapiviews.cli.commands import filter as filter_cmd
    from oapiviews.cli.commands import serve as serve_cmd

    filter_cmd.register(subparsers)
    audiences_cmd.register(subparsers)
    serve_cmd.register(subparsers)
    config_cmd.register(subparsers)


def run_command(
    args: argparse.Namespace,
    ctx: CLIContext,
) -> int:
    """
    Execute the selected command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context object.

    Returns:
        Exit code.
    """
    if not hasattr(args, "func"):
        return EXIT_ERROR

    try:
        return args.func(args, ctx)
    except ConfigurationError as e:
        ctx.print_error(str(e))
        return EXIT_CONFIG_ERROR
    except (ValidationError, EmptyResultError) as e:
        ctx.print_error(e.message)
        if ctx.verbose and e.details:
            ctx.print_error(f"Details: {e.details}")
        return EXIT_VALIDATION_ERROR
    except OapiViewsError as e:
        ctx.print_error(e.message)
        if ctx.verbose and e.details:
            ctx.print_error(f"Details: {e.details}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        ctx.print("\nOperation cancelled.", error=True)
        return EXIT_ERROR
    except Exception as e:
        ctx.print_error(f"Unexpected error: {e}")
        if ctx.verbose:
            import traceback

            traceback.print_exc()
        return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_SUCCESS

    ctx = CLIContext(
        config_path=args.config,
        verbose=args.verbose,
        quiet=args.quiet,
        output_format=args.format,
    )

    return run_command(args, ctx)


if __name__ == "__main__":
    sys.exit(main())
