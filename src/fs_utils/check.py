"""Folder emptiness check."""

from __future__ import annotations

import os
from pathlib import Path

from fs_utils.errors import FsUtilsError, classify_os_error
from fs_utils.filesystem import RealFileSystem
from fs_utils.protocols import FileSystem
from fs_utils.types import CheckResult


class FolderInspector:
    """Answers whether a folder has any entries."""

    def __init__(self, filesystem: FileSystem) -> None:
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> FolderInspector:
        """Factory method for production instantiation."""
        return cls(filesystem=filesystem or RealFileSystem())

    def is_folder_empty(self, path: str | os.PathLike[str]) -> CheckResult:
        """Check if the given folder is empty.

        Only the first entry is looked at, so large folders are cheap.

        Args:
            path: Folder to inspect.

        Returns:
            CheckResult with ``is_empty`` set, or the error when the path is
            missing, not a directory, or unreadable.
        """
        folder = Path(path)
        try:
            is_empty = next(iter(self.fs.iterdir(folder)), None) is None
        except OSError as e:
            error = FsUtilsError(
                f"Cannot inspect '{folder}': {e}",
                kind=classify_os_error(e),
                path=folder,
            )
            return CheckResult.from_error(folder, error)
        return CheckResult(success=True, path=folder, is_empty=is_empty)


def is_folder_empty(path: str | os.PathLike[str]) -> CheckResult:
    """Check if the given folder is empty."""
    return FolderInspector.create().is_folder_empty(path)
