"""CLI commands for DayBook.

This package provides the command-line interface for DayBook:
journal entry, dashboard, position sizing, settings and export commands.
"""

from daybook.cli.main import cli, main

__all__ = ["cli", "main"]
