"""Filesystem metadata queries in the stat convention's shape.

This package provides the native metadata primitive, the Stats value
and its adapter, option handling, path resolution and the public
stat/lstat entry points.
"""

from fsstat.metadata.models import FileKind, RawMetadataRecord
from fsstat.metadata.native import MetadataSource, OsMetadataSource, query_metadata
from fsstat.metadata.options import StatOptions
from fsstat.metadata.service import (
    StatService,
    lstat,
    lstat_async,
    lstat_sync,
    stat,
    stat_async,
    stat_sync,
)
from fsstat.metadata.stats import PredicateResult, StatAdapter, Stats
from fsstat.metadata.urls import FileURL, resolve_to_plain_path

__all__ = [
    "FileKind",
    "FileURL",
    "MetadataSource",
    "OsMetadataSource",
    "PredicateResult",
    "RawMetadataRecord",
    "StatAdapter",
    "StatOptions",
    "StatService",
    "Stats",
    "lstat",
    "lstat_async",
    "lstat_sync",
    "query_metadata",
    "resolve_to_plain_path",
    "stat",
    "stat_async",
    "stat_sync",
]
