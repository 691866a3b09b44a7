"""Native metadata primitive built on os.stat.

Queries the host for file metadata and packs whatever it reports into a
RawMetadataRecord. Fields the host does not provide are left as None.
Failures are the OSError subclasses raised by os.stat and propagate
unchanged.
"""

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from stat import S_ISDIR, S_ISLNK, S_ISREG

from fsstat.metadata.models import RawMetadataRecord, timestamp_from_ns

logger = logging.getLogger(__name__)

# Windows reports zero for ownership fields it does not track
_IS_WINDOWS = os.name == "nt"


def query_metadata(path: str, *, follow_symlinks: bool = True) -> RawMetadataRecord:
    """Query metadata for a path.

    Args:
        path: Plain filesystem path.
        follow_symlinks: If False, report on a symbolic link itself
            instead of its target.

    Returns:
        RawMetadataRecord populated with the fields the host reports.

    Raises:
        FileNotFoundError: If the path does not exist.
        PermissionError: If the path cannot be accessed.
        OSError: On any other OS-level failure.
    """
    logger.debug("Querying metadata for %s (follow_symlinks=%s)", path, follow_symlinks)
    result = os.stat(path, follow_symlinks=follow_symlinks)
    return _record_from_stat_result(result)


async def query_metadata_async(path: str, *, follow_symlinks: bool = True) -> RawMetadataRecord:
    """Asynchronous form of query_metadata, run in a worker thread."""
    return await asyncio.to_thread(query_metadata, path, follow_symlinks=follow_symlinks)


def _record_from_stat_result(result: os.stat_result) -> RawMetadataRecord:
    mode = result.st_mode
    uid: int | None = result.st_uid
    gid: int | None = result.st_gid
    if _IS_WINDOWS:
        uid = gid = None

    return RawMetadataRecord(
        is_directory=S_ISDIR(mode),
        is_file=S_ISREG(mode),
        is_symlink=S_ISLNK(mode),
        size=result.st_size,
        dev=result.st_dev,
        ino=result.st_ino,
        mode=mode,
        nlink=result.st_nlink,
        uid=uid,
        gid=gid,
        rdev=getattr(result, "st_rdev", None),
        blksize=getattr(result, "st_blksize", None),
        blocks=getattr(result, "st_blocks", None),
        atime=timestamp_from_ns(result.st_atime_ns),
        mtime=timestamp_from_ns(result.st_mtime_ns),
        birthtime=timestamp_from_ns(_birthtime_ns(result)),
    )


def _birthtime_ns(result: os.stat_result) -> int | None:
    """Extract the creation time in nanoseconds, if the host reports one."""
    ns = getattr(result, "st_birthtime_ns", None)
    if ns is not None:
        return ns
    seconds = getattr(result, "st_birthtime", None)
    if seconds is None:
        return None
    return int(seconds * 1_000_000_000)


class MetadataSource(ABC):
    """Abstract base class for native metadata primitives.

    A metadata source answers one query per call and either returns a
    RawMetadataRecord or raises an OSError.
    """

    @abstractmethod
    def query(self, path: str, *, follow_symlinks: bool) -> RawMetadataRecord:
        """Return the metadata record for a path.

        Raises:
            OSError: If the path cannot be queried.
        """

    async def query_async(self, path: str, *, follow_symlinks: bool) -> RawMetadataRecord:
        """Return the metadata record for a path without blocking the event loop."""
        return await asyncio.to_thread(self.query, path, follow_symlinks=follow_symlinks)


class OsMetadataSource(MetadataSource):
    """Metadata source backed by os.stat."""

    def query(self, path: str, *, follow_symlinks: bool) -> RawMetadataRecord:
        return query_metadata(path, follow_symlinks=follow_symlinks)
