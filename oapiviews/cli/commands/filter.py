"""
Filter command for the oapiviews CLI.

Renders the view of one audience, reading the canonical document from a
file or from the configured provider.

Usage:
    oapiviews filter notifications --api-version v1.0 --input openapi.json
    oapiviews filter internal --output internal-openapi.json
"""

import argparse
import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from oapiviews.cli.main import CLIContext
    from oapiviews.providers.base import DocumentProvider


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the filter command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "filter",
        help="Render an audience view",
        description=(
            "Render the view of an audience from the canonical document. "
            "Without --api-version the view is unversioned."
        ),
    )
    parser.add_argument(
        "audience",
        metavar="AUDIENCE",
        help="Audience: notifications, integrations, private or internal",
    )
    parser.add_argument(
        "--api-version",
        "-a",
        metavar="VERSION",
        help="API version, e.g. v1.0",
    )
    parser.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help="Canonical document file (JSON or YAML); uses the configured provider if omitted",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Write the view to a file instead of stdout",
    )
    parser.set_defaults(func=run_filter)


async def _fetch(provider: "DocumentProvider") -> dict[str, Any]:
    """Fetch one snapshot and release the provider."""
    try:
        return await provider.fetch()
    finally:
        await provider.close()


def run_filter(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the filter command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from oapiviews.cli.formatters import format_output
    from oapiviews.cli.main import EXIT_ERROR, EXIT_SUCCESS
    from oapiviews.engine.filter import AudienceFilter
    from oapiviews.models.audience import Audience
    from oapiviews.providers import create_provider, load_document

    audience = Audience.parse(args.audience)
    logger = ctx.logger

    if args.input:
        document = load_document(args.input)
    else:
        document = asyncio.run(_fetch(create_provider(ctx.config.provider)))

    view = AudienceFilter(ctx.config.filter).filter(document, audience, args.api_version)
    output = format_output(view, ctx.output_format)

    if args.output:
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            ctx.print_error(f"Failed to write view: {e}")
            return EXIT_ERROR
        logger.info(f"Wrote {audience.value} view with {len(view['paths'])} paths to {args.output}")
    else:
        print(output)

    return EXIT_SUCCESS
