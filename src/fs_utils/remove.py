"""Cleanup of a folder's contents."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fs_utils.errors import FsUtilsError, classify_os_error
from fs_utils.filesystem import RealFileSystem
from fs_utils.protocols import FileSystem
from fs_utils.types import CleanupResult

logger = logging.getLogger(__name__)


class FolderCleaner:
    """Deletes everything inside a folder while keeping the folder itself.

    Useful when the folder carries permissions worth keeping, or when the
    caller may only manipulate its contents.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> FolderCleaner:
        """Factory method for production instantiation."""
        return cls(filesystem=filesystem or RealFileSystem())

    def cleanup_folder(self, folder_path: str | os.PathLike[str]) -> CleanupResult:
        """Remove all files and folders inside ``folder_path``.

        The first entry that can't be removed stops the cleanup. Entries not
        reached yet are left untouched.

        Args:
            folder_path: Folder to empty.

        Returns:
            CleanupResult with the number of entries removed, or the error.
        """
        folder = Path(folder_path)
        try:
            entries = list(self.fs.iterdir(folder))
        except OSError as e:
            error = FsUtilsError(
                f"Cannot list '{folder}': {e}",
                kind=classify_os_error(e),
                path=folder,
            )
            return CleanupResult.from_error(folder, error)

        removed = 0
        for entry in entries:
            try:
                # Links are removed, never followed
                if self.fs.is_symlink(entry) or not self.fs.is_dir(entry):
                    self.fs.unlink(entry)
                else:
                    self.fs.rmtree(entry)
            except OSError as e:
                logger.exception("Cleanup of %s stopped at %s", folder, entry)
                error = FsUtilsError(
                    f"Failed to remove '{entry}': {e}",
                    kind=classify_os_error(e),
                    path=entry,
                )
                return CleanupResult.from_error(folder, error, removed=removed)
            removed += 1

        logger.debug("Removed %d entries from %s", removed, folder)
        return CleanupResult(success=True, path=folder, removed=removed)


def cleanup_folder(folder_path: str | os.PathLike[str]) -> CleanupResult:
    """Remove the contents of a folder, keeping the folder itself."""
    return FolderCleaner.create().cleanup_folder(folder_path)
