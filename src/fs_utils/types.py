"""Result types returned by filesystem operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fs_utils.errors import ErrorKind, FsUtilsError

__all__ = ["CheckResult", "CleanupResult", "CopyResult", "HeadResult", "TextResult"]


def _validate_outcome(
    success: bool,
    has_payload: bool,
    error: str | None,
    error_kind: ErrorKind | None,
) -> None:
    """Ensure a result carries either a payload or an error, never both."""
    if success:
        if error is not None or error_kind is not None:
            raise ValueError("success=True but error is set")
        if not has_payload:
            raise ValueError("success=True requires a value")
    else:
        if error is None or error_kind is None:
            raise ValueError("success=False requires error message and kind")
        if has_payload:
            raise ValueError("success=False but a value is set")


@dataclass
class CopyResult:
    """Result of a directory copy.

    Attributes:
        success: True if the whole tree was copied.
        source: Source directory as given by the caller.
        destination: Composed destination directory (None on failure).
        error: Human-readable error message (None on success).
        error_kind: Error category (None on success).
        entries_copied: Files, links and directories created below the
            destination. On failure, the number created before the walk stopped.
    """

    success: bool
    source: Path
    destination: Path | None
    error: str | None = None
    error_kind: ErrorKind | None = None
    entries_copied: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_outcome(
            self.success, self.destination is not None, self.error, self.error_kind
        )

    @classmethod
    def from_error(
        cls, source: Path, error: FsUtilsError, entries_copied: int = 0
    ) -> CopyResult:
        """Build a failed result from an FsUtilsError."""
        return cls(
            success=False,
            source=source,
            destination=None,
            error=str(error),
            error_kind=error.kind,
            entries_copied=entries_copied,
        )


@dataclass
class HeadResult:
    """Raw bytes read from the start of a file.

    Attributes:
        success: True if the file could be read.
        path: File that was read.
        data: Bytes read, at most the requested limit (None on failure).
        error: Error message (None on success).
        error_kind: Error category (None on success).
    """

    success: bool
    path: Path
    data: bytes | None
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_outcome(self.success, self.data is not None, self.error, self.error_kind)

    @property
    def length(self) -> int:
        """Number of bytes read."""
        return len(self.data) if self.data is not None else 0

    @classmethod
    def from_error(cls, path: Path, error: FsUtilsError) -> HeadResult:
        """Build a failed result from an FsUtilsError."""
        return cls(success=False, path=path, data=None, error=str(error), error_kind=error.kind)


@dataclass
class TextResult:
    """Decoded text read from the start of a file.

    Attributes:
        success: True if the file could be read.
        path: File that was read.
        text: Decoded text, invalid UTF-8 replaced with U+FFFD (None on failure).
        truncated: True if the file holds more bytes than the limit.
        error: Error message (None on success).
        error_kind: Error category (None on success).
    """

    success: bool
    path: Path
    text: str | None
    truncated: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_outcome(self.success, self.text is not None, self.error, self.error_kind)

    @classmethod
    def from_error(cls, path: Path, error: FsUtilsError) -> TextResult:
        """Build a failed result from an FsUtilsError."""
        return cls(success=False, path=path, text=None, error=str(error), error_kind=error.kind)


@dataclass
class CheckResult:
    """Result of an emptiness check."""

    success: bool
    path: Path
    is_empty: bool | None
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_outcome(self.success, self.is_empty is not None, self.error, self.error_kind)

    @classmethod
    def from_error(cls, path: Path, error: FsUtilsError) -> CheckResult:
        """Build a failed result from an FsUtilsError."""
        return cls(
            success=False, path=path, is_empty=None, error=str(error), error_kind=error.kind
        )


@dataclass
class CleanupResult:
    """Result of a folder cleanup.

    ``removed`` counts the direct children deleted, including those
    deleted before a failure stopped the cleanup.
    """

    success: bool
    path: Path
    removed: int = 0
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_outcome(self.success, self.success, self.error, self.error_kind)

    @classmethod
    def from_error(cls, path: Path, error: FsUtilsError, removed: int = 0) -> CleanupResult:
        """Build a failed result from an FsUtilsError."""
        return cls(
            success=False,
            path=path,
            removed=removed,
            error=str(error),
            error_kind=error.kind,
        )
