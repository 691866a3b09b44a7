"""Normalized Stats value and the adapter that builds it.

Stats mirrors the shape of the widely used file-I/O stat convention on
top of the loosely-typed RawMetadataRecord: every field the host may
omit is nullable, ``size`` is always present, and change time is never
reported because the native primitive does not supply one.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from fsstat.core.errors import NotImplementedFeatureError
from fsstat.metadata.models import FileKind, RawMetadataRecord, epoch_ms

# Predicate labels as named by the stat convention
_PREDICATE_LABELS: dict[FileKind, str] = {
    FileKind.DIRECTORY: "stats.isDirectory()",
    FileKind.FILE: "stats.isFile()",
    FileKind.SYMBOLIC_LINK: "stats.isSymbolicLink()",
    FileKind.BLOCK_DEVICE: "stats.isBlockDevice()",
    FileKind.CHARACTER_DEVICE: "stats.isCharacterDevice()",
    FileKind.FIFO: "stats.isFIFO()",
    FileKind.SOCKET: "stats.isSocket()",
}

UNSUPPORTED_KINDS: frozenset[FileKind] = frozenset(
    {
        FileKind.BLOCK_DEVICE,
        FileKind.CHARACTER_DEVICE,
        FileKind.FIFO,
        FileKind.SOCKET,
    }
)


@dataclass(frozen=True, slots=True)
class PredicateResult:
    """Outcome of asking a Stats value whether it is of a given kind.

    Attributes:
        kind: The kind that was asked about.
        supported: False when the answer cannot be derived from the record.
        value: The answer, or None when unsupported.
    """

    kind: FileKind
    supported: bool
    value: bool | None = None

    @property
    def label(self) -> str:
        return _PREDICATE_LABELS[self.kind]


@dataclass(frozen=True, slots=True)
class Stats:
    """File metadata in the stat convention's shape.

    Created fresh per query by StatAdapter and never mutated. Each
    nullable field is None exactly when the source record lacked it.
    ``ctime`` and ``ctime_ms`` are always None.
    """

    dev: int | None
    ino: int | None
    mode: int | None
    nlink: int | None
    uid: int | None
    gid: int | None
    rdev: int | None
    size: int
    blksize: int | None
    blocks: int | None
    atime_ms: int | None
    mtime_ms: int | None
    birthtime_ms: int | None
    atime: datetime | None
    mtime: datetime | None
    birthtime: datetime | None
    _record: RawMetadataRecord = field(repr=False)
    ctime_ms: None = field(default=None, init=False)
    ctime: None = field(default=None, init=False)

    def check(self, kind: FileKind) -> PredicateResult:
        """Ask whether this entry is of the given kind, without raising.

        Block devices, character devices, FIFOs and sockets are never
        reported by the native record, so those kinds come back with
        ``supported=False``.
        """
        if kind in UNSUPPORTED_KINDS:
            return PredicateResult(kind=kind, supported=False)
        if kind == FileKind.DIRECTORY:
            value = self._record.is_directory
        elif kind == FileKind.FILE:
            value = self._record.is_file
        else:
            value = self._record.is_symlink
        return PredicateResult(kind=kind, supported=True, value=value)

    def _predicate(self, kind: FileKind) -> bool:
        result = self.check(kind)
        if not result.supported or result.value is None:
            raise NotImplementedFeatureError(result.label)
        return result.value

    def is_directory(self) -> bool:
        return self._predicate(FileKind.DIRECTORY)

    def is_file(self) -> bool:
        return self._predicate(FileKind.FILE)

    def is_symbolic_link(self) -> bool:
        return self._predicate(FileKind.SYMBOLIC_LINK)

    def is_block_device(self) -> bool:
        """Always raises NotImplementedFeatureError."""
        return self._predicate(FileKind.BLOCK_DEVICE)

    def is_character_device(self) -> bool:
        """Always raises NotImplementedFeatureError."""
        return self._predicate(FileKind.CHARACTER_DEVICE)

    def is_fifo(self) -> bool:
        """Always raises NotImplementedFeatureError."""
        return self._predicate(FileKind.FIFO)

    def is_socket(self) -> bool:
        """Always raises NotImplementedFeatureError."""
        return self._predicate(FileKind.SOCKET)

    def to_dict(self) -> dict[str, Any]:
        """Render the fields under the stat convention's key names.

        Timestamps are rendered as ISO 8601 strings.

        Returns:
            JSON-serializable dictionary.
        """
        return {
            "dev": self.dev,
            "ino": self.ino,
            "mode": self.mode,
            "nlink": self.nlink,
            "uid": self.uid,
            "gid": self.gid,
            "rdev": self.rdev,
            "size": self.size,
            "blksize": self.blksize,
            "blocks": self.blocks,
            "atimeMs": self.atime_ms,
            "mtimeMs": self.mtime_ms,
            "ctimeMs": self.ctime_ms,
            "birthtimeMs": self.birthtime_ms,
            "atime": _isoformat(self.atime),
            "mtime": _isoformat(self.mtime),
            "ctime": None,
            "birthtime": _isoformat(self.birthtime),
        }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class StatAdapter:
    """Builds Stats values from native metadata records.

    Adaptation is total: a record with every optional field absent still
    yields a valid, mostly-null Stats.
    """

    def adapt(self, record: RawMetadataRecord) -> Stats:
        """Wrap a RawMetadataRecord into a Stats value.

        The ``*_ms`` fields are derived from the structured timestamps,
        never read independently, so each pair is null together.

        Args:
            record: Record returned by the native metadata primitive.

        Returns:
            A new Stats value owned by the caller.
        """
        return Stats(
            dev=record.dev,
            ino=record.ino,
            mode=record.mode,
            nlink=record.nlink,
            uid=record.uid,
            gid=record.gid,
            rdev=record.rdev,
            size=record.size,
            blksize=record.blksize,
            blocks=record.blocks,
            atime_ms=epoch_ms(record.atime),
            mtime_ms=epoch_ms(record.mtime),
            birthtime_ms=epoch_ms(record.birthtime),
            atime=record.atime,
            mtime=record.mtime,
            birthtime=record.birthtime,
            _record=record,
        )
