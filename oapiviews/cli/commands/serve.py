"""
Serve command for the oapiviews CLI.

Usage:
    oapiviews serve [--host HOST] [--port PORT]
"""

import argparse
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oapiviews.cli.main import CLIContext


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the serve command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP server",
        description="Serve audience views over HTTP.",
    )
    parser.add_argument(
        "--host",
        metavar="HOST",
        help="Host address to bind to (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        metavar="PORT",
        help="Port to listen on (overrides config)",
    )
    parser.set_defaults(func=run_serve)


def run_serve(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the serve command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from oapiviews.cli.main import EXIT_SUCCESS
    from oapiviews.server import run_server
    from oapiviews.server.routes import get_route_info

    config = ctx.config
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port

    logger = ctx.logger
    for route in get_route_info():
        logger.debug(f"{route['method']} {route['path']}: {route['description']}")

    run_server(config=config)
    return EXIT_SUCCESS
