"""Protocol definitions for core abstractions.

The operations in this package never touch ``os``/``shutil`` directly.
They go through a ``FileSystem`` so tests can substitute doubles and
observe exactly which I/O calls were made.

Concrete implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations handle reading, copying, and directory operations.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Dangling symlinks count as existing.

        Args:
            path: Path to check.

        Returns:
            True if something is present at path, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory, following symlinks.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if path is a symlink, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def iterdir(self, path: Path) -> Iterator[Path]:
        """Iterate over the entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Iterator of child paths, in no particular order.

        Raises:
            FileNotFoundError: If path does not exist.
            NotADirectoryError: If path is not a directory.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and permission bits, following symlinks.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def readlink(self, path: Path) -> Path:
        """Return the target a symbolic link points to.

        Args:
            path: Symlink to read.

        Returns:
            Link target, unresolved.
        """
        ...

    def symlink(self, target: Path, link: Path, target_is_directory: bool = False) -> None:
        """Create a symbolic link.

        Args:
            target: Path the link points to.
            link: Path of the link to create.
            target_is_directory: Hint required on Windows for directory links.
        """
        ...

    def open_binary(self, path: Path) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            path: File to open.

        Returns:
            Binary file object. Callers close it.

        Raises:
            FileNotFoundError: If file does not exist.
            IsADirectoryError: If path is a directory.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file or symlink.

        Args:
            path: Path to remove.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...
