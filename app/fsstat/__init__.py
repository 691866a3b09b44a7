"""fsstat - filesystem metadata queries in the stat convention's shape."""

from fsstat.core.errors import (
    CallbackRequiredError,
    FsStatError,
    InvalidFileURLError,
    NotImplementedFeatureError,
)
from fsstat.metadata import (
    FileKind,
    FileURL,
    StatOptions,
    StatService,
    Stats,
    lstat,
    lstat_async,
    lstat_sync,
    stat,
    stat_async,
    stat_sync,
)

__version__ = "0.1.0"

__all__ = [
    "CallbackRequiredError",
    "FileKind",
    "FileURL",
    "FsStatError",
    "InvalidFileURLError",
    "NotImplementedFeatureError",
    "StatOptions",
    "StatService",
    "Stats",
    "__version__",
    "lstat",
    "lstat_async",
    "lstat_sync",
    "stat",
    "stat_async",
    "stat_sync",
]
