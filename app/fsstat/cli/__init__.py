"""CLI package for fsstat.

This package contains the Typer application and all subcommands.
"""

from fsstat.cli.main import app

__all__ = ["app"]
