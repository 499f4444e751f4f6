"""
Command-line interface for oapiviews.

Usage:
    oapiviews filter AUDIENCE [--version V] [--input PATH] [--output PATH]
    oapiviews audiences [--version V]
    oapiviews serve [--host HOST] [--port PORT]
    oapiviews config show|validate
"""

from oapiviews.cli.main import main

__all__ = ["main"]
