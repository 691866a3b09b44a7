"""Tests for metadata domain models."""

from datetime import UTC, datetime

import pytest
from fsstat.metadata.models import EPOCH, FileKind, RawMetadataRecord, epoch_ms, timestamp_from_ns


class TestFileKind:
    """Tests for FileKind enum."""

    def test_file_kind_values(self) -> None:
        """Verify all 7 FileKind values exist with correct string values."""
        assert FileKind.DIRECTORY == "directory"
        assert FileKind.FILE == "file"
        assert FileKind.SYMBOLIC_LINK == "symbolic_link"
        assert FileKind.BLOCK_DEVICE == "block_device"
        assert FileKind.CHARACTER_DEVICE == "character_device"
        assert FileKind.FIFO == "fifo"
        assert FileKind.SOCKET == "socket"
        assert len(FileKind) == 7


class TestRawMetadataRecord:
    """Tests for RawMetadataRecord frozen dataclass."""

    def test_optional_fields_default_to_none(self, bare_record: RawMetadataRecord) -> None:
        """Only flags and size are required; everything else is absent by default."""
        assert bare_record.dev is None
        assert bare_record.ino is None
        assert bare_record.mode is None
        assert bare_record.blksize is None
        assert bare_record.atime is None
        assert bare_record.birthtime is None

    def test_record_frozen(self, bare_record: RawMetadataRecord) -> None:
        """Records cannot be modified after creation."""
        with pytest.raises(AttributeError):
            bare_record.size = 10  # type: ignore[misc]


class TestTimestampConversion:
    """Tests for timestamp_from_ns and epoch_ms."""

    def test_timestamp_truncated_to_milliseconds(self) -> None:
        """Sub-millisecond precision is dropped."""
        ts = timestamp_from_ns(1_705_312_800_123_456_789)
        assert ts == datetime(2024, 1, 15, 10, 0, 0, 123000, tzinfo=UTC)

    def test_timestamp_none(self) -> None:
        """Absent input stays absent."""
        assert timestamp_from_ns(None) is None

    def test_epoch_ms(self) -> None:
        """Epoch milliseconds are exact integers."""
        assert epoch_ms(datetime(2024, 1, 15, 10, 0, tzinfo=UTC)) == 1_705_312_800_000
        assert epoch_ms(datetime(2024, 1, 15, 10, 0, 0, 123000, tzinfo=UTC)) == 1_705_312_800_123

    def test_epoch_ms_of_epoch_is_zero(self) -> None:
        """The epoch itself is 0, not None."""
        assert epoch_ms(EPOCH) == 0

    def test_epoch_ms_none(self) -> None:
        """A missing timestamp has no numeric value."""
        assert epoch_ms(None) is None

    def test_round_trip_from_ns(self) -> None:
        """epoch_ms recovers the millisecond count of timestamp_from_ns."""
        assert epoch_ms(timestamp_from_ns(1_705_312_800_999_999_999)) == 1_705_312_800_999

    def test_pre_epoch_timestamp(self) -> None:
        """Negative nanoseconds map to timestamps before 1970."""
        ts = timestamp_from_ns(-1_500_000_000)
        assert ts == datetime(1969, 12, 31, 23, 59, 58, 500000, tzinfo=UTC)
        assert epoch_ms(ts) == -1500
