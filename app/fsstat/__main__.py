"""Allow running fsstat as ``python -m fsstat``."""

from fsstat.cli.main import app

app()
