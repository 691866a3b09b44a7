"""Show command for displaying file metadata.

Runs stat (or lstat) on each given path and renders the resulting
Stats as a table or as JSON.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from fsstat.core.config import load_config_or_default
from fsstat.core.errors import ConfigError, FsStatError
from fsstat.metadata.service import lstat_sync, stat_sync
from fsstat.metadata.stats import Stats
from fsstat.metadata.urls import FileURL, PathArg
from fsstat.utils.formatting import (
    console,
    create_stats_table,
    format_kind,
    format_mode,
    format_value,
    print_error,
)


class OutputFormat(str, Enum):
    """Output format options for show."""

    TABLE = "table"
    JSON = "json"


def show(
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths or file: URLs to inspect."),
    ],
    no_follow: Annotated[
        bool,
        typer.Option(
            "--lstat",
            "-L",
            help="Report on symbolic links themselves instead of their targets.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Show filesystem metadata for one or more paths.

    Examples:
        fsstat show /etc/hosts
        fsstat show -L ~/.local/bin/python
        fsstat show --format json file:///tmp
    """
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    follow = not no_follow
    fmt = output_format or OutputFormat(config.output_format)

    results: list[tuple[str, Stats]] = []
    failed = False
    for raw in paths:
        try:
            stats = _query(_to_path_arg(raw), follow=follow)
        except OSError as e:
            print_error(f"{raw}: {e.strerror or e}")
            failed = True
            continue
        except FsStatError as e:
            print_error(f"{raw}: {e}")
            failed = True
            continue
        results.append((raw, stats))

    if fmt == OutputFormat.JSON:
        _print_json(results)
    else:
        for raw, stats in results:
            _print_table(raw, stats)

    if failed:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _to_path_arg(raw: str) -> PathArg:
    """Treat ``file:`` arguments as URLs, everything else as plain paths."""
    if raw.startswith("file:"):
        return FileURL(raw)
    return raw


def _query(path: PathArg, *, follow: bool) -> Stats:
    if follow:
        return stat_sync(path)
    return lstat_sync(path)


def _print_table(path: str, stats: Stats) -> None:
    """Display one Stats value as a Rich table."""
    table = create_stats_table(path)
    table.add_row("kind", format_kind(stats))
    table.add_row("mode", format_mode(stats.mode))
    for key, value in stats.to_dict().items():
        if key == "mode":
            continue
        table.add_row(key, format_value(value))
    console.print(table)


def _print_json(results: list[tuple[str, Stats]]) -> None:
    """Display results as a JSON array."""
    data = [{"path": path, **stats.to_dict()} for path, stats in results]
    console.print_json(json.dumps(data))
