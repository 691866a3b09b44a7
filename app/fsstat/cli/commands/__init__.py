"""CLI commands for fsstat.

This package contains all subcommand implementations.
"""

from fsstat.cli.commands import config, show

__all__ = ["config", "show"]
