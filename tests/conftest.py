"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fsstat.metadata.models import RawMetadataRecord
from fsstat.metadata.service import StatService


@pytest.fixture
def dir_with_link(tmp_path: Path) -> tuple[Path, Path]:
    """A directory containing a symbolic link that points back at it."""
    link = tmp_path / "link"
    try:
        link.symlink_to(tmp_path, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("Symbolic links are not supported on this platform")
    return tmp_path, link


@pytest.fixture
def full_record() -> RawMetadataRecord:
    """A record with every optional field populated."""
    return RawMetadataRecord(
        is_directory=False,
        is_file=True,
        is_symlink=False,
        size=4096,
        dev=2049,
        ino=131074,
        mode=0o100644,
        nlink=1,
        uid=1000,
        gid=1000,
        rdev=0,
        blksize=4096,
        blocks=8,
        atime=datetime(2024, 1, 15, 10, 0, 0, 123000, tzinfo=UTC),
        mtime=datetime(2024, 1, 14, 9, 30, tzinfo=UTC),
        birthtime=datetime(2023, 12, 1, tzinfo=UTC),
    )


@pytest.fixture
def bare_record() -> RawMetadataRecord:
    """A record with every optional field absent."""
    return RawMetadataRecord(is_directory=True, is_file=False, is_symlink=False, size=0)


@pytest.fixture
def service() -> Iterator[StatService]:
    """A StatService backed by the real filesystem."""
    with StatService(max_workers=2) as svc:
        yield svc


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
