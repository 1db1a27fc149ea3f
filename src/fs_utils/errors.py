"""Error taxonomy shared by all filesystem operations."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

__all__ = ["ErrorKind", "FsUtilsError", "classify_os_error"]


class ErrorKind(str, Enum):
    """Category of a failed operation.

    Invalid UTF-8 never produces an error: it is replaced with U+FFFD
    while decoding, so there is no member for it.
    """

    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"


class FsUtilsError(Exception):
    """Error raised by internal helpers and converted into failed results."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.IO_ERROR,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path


def classify_os_error(error: OSError) -> ErrorKind:
    """Map an OSError subclass to an ErrorKind."""
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, FileExistsError):
        return ErrorKind.ALREADY_EXISTS
    if isinstance(error, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    if isinstance(error, (NotADirectoryError, IsADirectoryError)):
        return ErrorKind.INVALID_ARGUMENT
    return ErrorKind.IO_ERROR
