"""Bounded reads from the start of a file (``head -c``)."""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO

from fs_utils.errors import ErrorKind, FsUtilsError, classify_os_error
from fs_utils.filesystem import RealFileSystem
from fs_utils.protocols import FileSystem
from fs_utils.types import HeadResult, TextResult

logger = logging.getLogger(__name__)


def decode_lossy(data: bytes) -> str:
    """Decode UTF-8, replacing invalid sequences with U+FFFD.

    Each maximal invalid subpart becomes a single replacement character,
    including an incomplete sequence at the end of ``data``.
    """
    return data.decode("utf-8", errors="replace")


class HeadReader:
    """Reads at most N bytes from the start of a file.

    Follows Separate Use from Creation: use `create()` for production.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize reader with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> HeadReader:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured HeadReader instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def head(self, path: str | os.PathLike[str], limit: int) -> HeadResult:
        """Read the first ``limit`` bytes of a file.

        Args:
            path: File to read.
            limit: Maximum number of bytes to return.

        Returns:
            HeadResult with the bytes read, or the error.
        """
        file_path = Path(path)
        try:
            data, _ = self._read(file_path, limit)
        except FsUtilsError as e:
            logger.debug("Head of %s failed: %s", file_path, e)
            return HeadResult.from_error(file_path, e)
        return HeadResult(success=True, path=file_path, data=data)

    def head_to_string(self, path: str | os.PathLike[str], limit: int) -> TextResult:
        """Read the first ``limit`` bytes of a file as text.

        The bytes are decoded as UTF-8. Invalid sequences, including a
        code point cut in half by the limit, become U+FFFD.

        Args:
            path: File to read.
            limit: Maximum number of bytes to decode.

        Returns:
            TextResult with the decoded text, or the error.
        """
        file_path = Path(path)
        try:
            data, truncated = self._read(file_path, limit)
        except FsUtilsError as e:
            logger.debug("Head of %s failed: %s", file_path, e)
            return TextResult.from_error(file_path, e)
        return TextResult(success=True, path=file_path, text=decode_lossy(data), truncated=truncated)

    def head_to_string_with_message(
        self,
        path: str | os.PathLike[str],
        limit: int,
        truncation_message: str,
    ) -> TextResult:
        """Read the first ``limit`` bytes of a file as text, marking truncation.

        Same as `head_to_string`, but when the file holds more than
        ``limit`` bytes the truncation message is appended to the text.
        Files that fit within the limit are returned unmodified.

        Args:
            path: File to read.
            limit: Maximum number of bytes to decode.
            truncation_message: Text appended when the file was cut.

        Returns:
            TextResult with the decoded text, or the error.
        """
        result = self.head_to_string(path, limit)
        if result.success and result.truncated:
            result.text = f"{result.text}{truncation_message}"
        return result

    def _read(self, path: Path, limit: int) -> tuple[bytes, bool]:
        """Read up to ``limit`` bytes and probe for one more.

        Returns:
            Tuple of (bytes read, whether the file is longer than ``limit``).

        Raises:
            FsUtilsError: If the limit is negative or the file can't be read.
        """
        if limit < 0:
            raise FsUtilsError(
                f"Limit must be non-negative, got {limit}",
                kind=ErrorKind.INVALID_ARGUMENT,
                path=path,
            )
        try:
            with self.fs.open_binary(path) as handle:
                data = _read_up_to(handle, limit + 1)
        except OSError as e:
            raise FsUtilsError(
                f"Failed to read '{path}': {e}",
                kind=classify_os_error(e),
                path=path,
            ) from e

        truncated = len(data) > limit
        if truncated:
            logger.debug("%s is longer than %d bytes", path, limit)
        return data[:limit], truncated


def _read_up_to(handle: BinaryIO, size: int) -> bytes:
    """Read until ``size`` bytes are collected or the file ends.

    Reads in buffer-sized chunks so a huge ``size`` never becomes one
    allocation.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = handle.read(min(remaining, io.DEFAULT_BUFFER_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def head(path: str | os.PathLike[str], limit: int) -> HeadResult:
    """Read the first ``limit`` bytes of a file, like ``head -c``.

    Example:
        >>> result = head("path", 10)
        >>> result.length <= 10
        True
    """
    return HeadReader.create().head(path, limit)


def head_to_string(path: str | os.PathLike[str], limit: int) -> TextResult:
    """Read the first ``limit`` bytes of a file as UTF-8 text."""
    return HeadReader.create().head_to_string(path, limit)


def head_to_string_with_message(
    path: str | os.PathLike[str],
    limit: int,
    truncation_message: str,
) -> TextResult:
    """Read the first ``limit`` bytes of a file as text, appending a message if cut."""
    return HeadReader.create().head_to_string_with_message(path, limit, truncation_message)
