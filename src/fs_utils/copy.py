"""Recursive directory copy into a composed destination."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from fs_utils.errors import ErrorKind, FsUtilsError, classify_os_error
from fs_utils.filesystem import RealFileSystem
from fs_utils.paths import destination_directory
from fs_utils.protocols import FileSystem
from fs_utils.types import CopyResult

logger = logging.getLogger(__name__)


@dataclass
class _CopyProgress:
    """Per-call counter of entries created below the destination."""

    copied: int = 0


class TreeCopier:
    """Copies a directory tree into a new directory named after the source.

    Copying ``src`` into ``dest`` creates ``dest/<basename of src>`` and
    refuses to run when that directory already exists.

    The copy is best-effort and non-atomic. The first entry that fails
    stops the walk; entries copied before it are left in place.

    Symlinks are recreated as links by default. With ``follow_symlinks``
    enabled, link targets are copied as regular files and directories and
    link cycles are not detected.

    Follows Separate Use from Creation: use `create()` for production.
    """

    def __init__(self, filesystem: FileSystem, follow_symlinks: bool = False) -> None:
        """Initialize copier with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            follow_symlinks: Copy link targets instead of the links themselves.
        """
        self.fs = filesystem
        self.follow_symlinks = follow_symlinks

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        follow_symlinks: bool = False,
    ) -> TreeCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            follow_symlinks: Copy link targets instead of the links themselves.

        Returns:
            Configured TreeCopier instance.
        """
        return cls(filesystem=filesystem or RealFileSystem(), follow_symlinks=follow_symlinks)

    def copy_directory(
        self,
        source_dir: str | os.PathLike[str],
        destination_dir: str | os.PathLike[str],
    ) -> CopyResult:
        """Copy a directory tree into ``destination_dir/<basename of source_dir>``.

        Args:
            source_dir: Directory to copy.
            destination_dir: Directory that receives the copy. Missing parents
                are created.

        Returns:
            CopyResult holding the composed destination on success, or the
            error and its kind on failure.
        """
        source = Path(source_dir)
        progress = _CopyProgress()

        try:
            destination = destination_directory(source, destination_dir)
            self._check_preconditions(source, destination)
            self._make_root(destination)
            self._copy_tree(source, destination, progress)
        except FsUtilsError as e:
            logger.debug("Copy of %s failed: %s", source, e)
            return CopyResult.from_error(source, e, entries_copied=progress.copied)

        logger.debug("Copied %d entries from %s to %s", progress.copied, source, destination)
        return CopyResult(
            success=True,
            source=source,
            destination=destination,
            entries_copied=progress.copied,
        )

    def _check_preconditions(self, source: Path, destination: Path) -> None:
        """Validate the copy before any write happens.

        Raises:
            FsUtilsError: If the destination exists, the source is missing or
                not a directory, or the destination lies inside the source.
        """
        if self.fs.exists(destination):
            raise FsUtilsError(
                f"Destination already exists: '{destination}'",
                kind=ErrorKind.ALREADY_EXISTS,
                path=destination,
            )
        if not self.fs.exists(source):
            raise FsUtilsError(
                f"Source directory does not exist: '{source}'",
                kind=ErrorKind.NOT_FOUND,
                path=source,
            )
        if not self.fs.is_dir(source):
            raise FsUtilsError(
                f"Source is not a directory: '{source}'",
                kind=ErrorKind.INVALID_ARGUMENT,
                path=source,
            )
        try:
            nested = destination.resolve().is_relative_to(source.resolve())
        except (OSError, RuntimeError) as e:
            # RuntimeError is how Python before 3.13 reports a symlink loop
            raise FsUtilsError(
                f"Failed to resolve '{destination}': {e}",
                kind=classify_os_error(e) if isinstance(e, OSError) else ErrorKind.IO_ERROR,
                path=destination,
            ) from e
        # The walk would pick up its own output and never terminate
        if nested:
            raise FsUtilsError(
                f"Cannot copy '{source}' into its own subtree '{destination}'",
                kind=ErrorKind.INVALID_ARGUMENT,
                path=destination,
            )

    def _make_root(self, destination: Path) -> None:
        """Create the top-level destination directory."""
        try:
            self.fs.mkdir(destination, parents=True)
        except OSError as e:
            raise FsUtilsError(
                f"Failed to create '{destination}': {e}",
                kind=classify_os_error(e),
                path=destination,
            ) from e

    def _copy_tree(self, source: Path, destination: Path, progress: _CopyProgress) -> None:
        """Copy the entries of ``source`` into the existing ``destination``."""
        try:
            entries = list(self.fs.iterdir(source))
        except OSError as e:
            logger.exception("Copy stopped reading %s", source)
            raise FsUtilsError(
                f"Failed to read directory '{source}': {e}",
                kind=classify_os_error(e),
                path=source,
            ) from e

        for entry in entries:
            target = destination / entry.name
            try:
                descend = self._copy_entry(entry, target)
            except OSError as e:
                logger.exception("Copy stopped at %s", entry)
                raise FsUtilsError(
                    f"Failed to copy '{entry}' to '{target}': {e}",
                    kind=classify_os_error(e),
                    path=entry,
                ) from e
            progress.copied += 1
            if descend:
                self._copy_tree(entry, target, progress)

    def _copy_entry(self, entry: Path, target: Path) -> bool:
        """Copy a single entry.

        Returns:
            True if a directory was created and its contents still need copying.
        """
        if not self.follow_symlinks and self.fs.is_symlink(entry):
            self.fs.symlink(
                self.fs.readlink(entry),
                target,
                target_is_directory=self.fs.is_dir(entry),
            )
            return False
        if self.fs.is_dir(entry):
            self.fs.mkdir(target)
            return True
        self.fs.copy_file(entry, target)
        return False


def copy_directory(
    source_dir: str | os.PathLike[str],
    destination_dir: str | os.PathLike[str],
    follow_symlinks: bool = False,
) -> CopyResult:
    """Copy a directory tree into ``destination_dir/<basename of source_dir>``.

    Best-effort and non-atomic: see `TreeCopier`.

    Args:
        source_dir: Directory to copy.
        destination_dir: Directory that receives the copy.
        follow_symlinks: Copy link targets instead of the links themselves.

    Returns:
        CopyResult with the composed destination or the error.

    Example:
        >>> result = copy_directory("src", "dest")
        >>> result.destination
        PosixPath('dest/src')
    """
    copier = TreeCopier.create(follow_symlinks=follow_symlinks)
    return copier.copy_directory(source_dir, destination_dir)
