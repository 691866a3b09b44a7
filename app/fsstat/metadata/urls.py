"""Path resolution for stat entry points.

Converts the accepted path forms (plain strings, os.PathLike objects and
``file:`` URLs) into the plain path string handed to the native
metadata primitive.
"""

import os
import re
from dataclasses import dataclass
from urllib.parse import ParseResult, SplitResult, unquote, urlsplit

from fsstat.core.errors import InvalidArgumentTypeError, InvalidFileURLError

_ENCODED_SLASH = re.compile(r"%2f", re.IGNORECASE)
_ENCODED_SEPARATOR_WIN = re.compile(r"%2f|%5c", re.IGNORECASE)
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


@dataclass(frozen=True, slots=True)
class FileURL:
    """A URL-form path, e.g. ``FileURL("file:///tmp/data")``.

    Attributes:
        href: The full URL string.
    """

    href: str

    @property
    def parts(self) -> SplitResult:
        """The URL split into its components."""
        return urlsplit(self.href)

    def __str__(self) -> str:
        return self.href


PathArg = str | os.PathLike[str] | FileURL | SplitResult | ParseResult


def is_url_form(path: object) -> bool:
    """Check whether a path argument is a URL-form value."""
    return isinstance(path, FileURL | SplitResult | ParseResult)


def resolve_to_plain_path(path: PathArg) -> str:
    """Resolve a path argument to a plain path string.

    Args:
        path: Plain string, os.PathLike, or a ``file:`` URL.

    Returns:
        Plain filesystem path.

    Raises:
        InvalidFileURLError: If a URL is not a usable ``file:`` URL.
        InvalidArgumentTypeError: If the argument is of an unsupported type.
    """
    if isinstance(path, str):
        return path

    if is_url_form(path):
        parts = path.parts if isinstance(path, FileURL) else path
        return file_url_to_path(parts)

    if isinstance(path, os.PathLike):
        resolved = os.fspath(path)
        if isinstance(resolved, str):
            return resolved

    raise InvalidArgumentTypeError("path", "of type str, os.PathLike or a file URL", path)


def file_url_to_path(parts: SplitResult | ParseResult, *, windows: bool | None = None) -> str:
    """Convert a parsed ``file:`` URL to a path for the host (or given) platform."""
    if parts.scheme != "file":
        raise InvalidFileURLError("Must be a file URL.")

    if windows is None:
        windows = os.name == "nt"
    if windows:
        return _windows_path(parts)
    return _posix_path(parts)


def _posix_path(parts: SplitResult | ParseResult) -> str:
    if parts.hostname not in (None, "", "localhost"):
        msg = f'File URL host must be "localhost" or empty on this platform: {parts.hostname}'
        raise InvalidFileURLError(msg)
    if _ENCODED_SLASH.search(parts.path):
        raise InvalidFileURLError("File URL path must not include encoded / characters")
    return _decode_path(parts.path) or "/"


def _windows_path(parts: SplitResult | ParseResult) -> str:
    if _ENCODED_SEPARATOR_WIN.search(parts.path):
        raise InvalidFileURLError("File URL path must not include encoded \\ or / characters")

    decoded = _decode_path(parts.path)
    pathname = decoded.replace("/", "\\")
    hostname = parts.hostname
    if hostname and hostname != "localhost":
        # UNC path: \\server\share\...
        return f"\\\\{hostname}{pathname}"

    if not _DRIVE_PATH.match(decoded):
        raise InvalidFileURLError("File URL path must be absolute")
    return pathname[1:]


def _decode_path(path: str) -> str:
    try:
        return unquote(path, errors="strict")
    except UnicodeDecodeError as e:
        raise InvalidFileURLError("File URL path must be valid percent-encoded UTF-8") from e
