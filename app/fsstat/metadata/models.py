"""Metadata domain models.

This module defines the raw, platform-variable metadata record produced
by the native metadata primitive, the file kinds the Stats predicates
answer for, and the helpers converting between timestamps and epoch
milliseconds.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_ONE_MILLISECOND = timedelta(milliseconds=1)


class FileKind(str, Enum):
    """Kind of filesystem entry a Stats predicate answers for.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        SYMBOLIC_LINK: Symbolic link (only reported when links are not followed).
        BLOCK_DEVICE: Block special device.
        CHARACTER_DEVICE: Character special device.
        FIFO: Named pipe.
        SOCKET: Unix domain socket.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMBOLIC_LINK = "symbolic_link"
    BLOCK_DEVICE = "block_device"
    CHARACTER_DEVICE = "character_device"
    FIFO = "fifo"
    SOCKET = "socket"


@dataclass(frozen=True, slots=True)
class RawMetadataRecord:
    """Best-effort metadata record returned by the native metadata primitive.

    Every numeric field and every timestamp may be None when the host
    platform does not report it. Timestamps are timezone-aware UTC
    datetimes truncated to millisecond precision.

    Attributes:
        is_directory: Entry is a directory.
        is_file: Entry is a regular file.
        is_symlink: Entry is a symbolic link.
        size: Size in bytes.
        dev: Device id.
        ino: Inode number.
        mode: Permission and type bits.
        nlink: Number of hard links.
        uid: Owner user id.
        gid: Owner group id.
        rdev: Device id of a special file.
        blksize: Preferred I/O block size.
        blocks: Number of 512-byte blocks allocated.
        atime: Last access time.
        mtime: Last modification time.
        birthtime: Creation time.
    """

    is_directory: bool
    is_file: bool
    is_symlink: bool
    size: int
    dev: int | None = None
    ino: int | None = None
    mode: int | None = None
    nlink: int | None = None
    uid: int | None = None
    gid: int | None = None
    rdev: int | None = None
    blksize: int | None = None
    blocks: int | None = None
    atime: datetime | None = None
    mtime: datetime | None = None
    birthtime: datetime | None = None


def timestamp_from_ns(ns: int | None) -> datetime | None:
    """Convert nanoseconds since the epoch to a millisecond-precision UTC datetime."""
    if ns is None:
        return None
    return EPOCH + timedelta(milliseconds=ns // 1_000_000)


def epoch_ms(value: datetime | None) -> int | None:
    """Return the numeric value of a timestamp in epoch milliseconds.

    Returns None when the timestamp itself is None, so the two
    representations of a time field are always absent together.
    """
    if value is None:
        return None
    return (value - EPOCH) // _ONE_MILLISECOND
