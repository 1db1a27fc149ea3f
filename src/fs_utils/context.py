"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fs_utils.check import FolderInspector
from fs_utils.config import ConfigManager
from fs_utils.copy import TreeCopier
from fs_utils.protocols import FileSystem
from fs_utils.read import HeadReader
from fs_utils.remove import FolderCleaner


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fs_utils.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    The copier is built per call because symlink handling is chosen per
    command invocation.
    """

    config: ConfigManager
    reader: HeadReader
    inspector: FolderInspector
    cleaner: FolderCleaner
    filesystem: FileSystem = field(default_factory=_default_filesystem)

    def make_copier(self, follow_symlinks: bool = False) -> TreeCopier:
        """Build a TreeCopier sharing this context's filesystem."""
        return TreeCopier(self.filesystem, follow_symlinks=follow_symlinks)


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override configuration directory (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from fs_utils.filesystem import RealFileSystem

    config = (
        ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    )
    filesystem = RealFileSystem()

    return AppContext(
        config=config,
        reader=HeadReader(filesystem),
        inspector=FolderInspector(filesystem),
        cleaner=FolderCleaner(filesystem),
        filesystem=filesystem,
    )
