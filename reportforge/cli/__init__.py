"""Command-line interface.

Usage:
    from reportforge.cli import app
"""

from reportforge.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
