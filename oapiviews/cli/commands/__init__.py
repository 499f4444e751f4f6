"""
CLI command modules for oapiviews.

Modules:
    filter: Render an audience view
    audiences: List audiences and their filtering policies
    serve: Run the HTTP server
    config: Configuration management
"""

from oapiviews.cli.commands import audiences, config, filter, serve

__all__ = ["filter", "audiences", "serve", "config"]
