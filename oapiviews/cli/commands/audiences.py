"""
Audiences command for the oapiviews CLI.

Usage:
    oapiviews audiences [--api-version VERSION]
"""

import argparse
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from oapiviews.cli.main import CLIContext


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the audiences command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "audiences",
        help="List audiences and their filtering policies",
        description="List every audience with the path prefixes its view is built from.",
    )
    parser.add_argument(
        "--api-version",
        "-a",
        metavar="VERSION",
        help="API version used to compute prefixes (unversioned if omitted)",
    )
    parser.set_defaults(func=run_audiences)


def describe_audiences(policies: dict[Any, Any], version: str | None) -> list[dict[str, Any]]:
    """Summarize the policy table for display."""
    from oapiviews.engine.paths import candidate_prefixes

    return [
        {
            "audience": audience.value,
            "prefixes": candidate_prefixes(policy, version),
            "operations": "private only" if policy.keep_private else "public only",
            "rewrite_paths": policy.rewrite_paths,
            "required_root": policy.required_root,
            "servers": policy.publish_servers,
        }
        for audience, policy in policies.items()
    ]


def run_audiences(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the audiences command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from oapiviews.cli.formatters import format_output
    from oapiviews.cli.main import EXIT_SUCCESS
    from oapiviews.models.audience import build_policies

    policies = build_policies(ctx.config.filter)
    ctx.print(format_output(describe_audiences(policies, args.api_version), ctx.output_format))
    return EXIT_SUCCESS
