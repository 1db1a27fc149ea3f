"""Filesystem abstraction for testability.

This module provides the production filesystem used by every operation.
The RealFileSystem implementation wraps standard library operations.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import BinaryIO, Iterator


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists, counting dangling symlinks."""
        return path.exists() or path.is_symlink()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def iterdir(self, path: Path) -> Iterator[Path]:
        """Iterate over directory entries."""
        return path.iterdir()

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and permission bits."""
        shutil.copy(src, dst)

    def readlink(self, path: Path) -> Path:
        """Return the target of a symbolic link."""
        return Path(os.readlink(path))

    def symlink(self, target: Path, link: Path, target_is_directory: bool = False) -> None:
        """Create a symbolic link."""
        os.symlink(target, link, target_is_directory=target_is_directory)

    def open_binary(self, path: Path) -> BinaryIO:
        """Open a file for binary reading."""
        return path.open("rb")

    def unlink(self, path: Path) -> None:
        """Remove a file or symlink."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)
