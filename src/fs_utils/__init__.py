"""Filesystem convenience library: tree copy, head reads, folder checks and cleanup."""

__version__ = "0.1.0"

from fs_utils.check import FolderInspector, is_folder_empty
from fs_utils.copy import TreeCopier, copy_directory
from fs_utils.errors import ErrorKind, FsUtilsError
from fs_utils.paths import destination_directory
from fs_utils.protocols import FileSystem
from fs_utils.read import HeadReader, head, head_to_string, head_to_string_with_message
from fs_utils.remove import FolderCleaner, cleanup_folder
from fs_utils.types import CheckResult, CleanupResult, CopyResult, HeadResult, TextResult

__all__ = [
    "__version__",
    "CheckResult",
    "CleanupResult",
    "CopyResult",
    "ErrorKind",
    "FileSystem",
    "FolderCleaner",
    "FolderInspector",
    "FsUtilsError",
    "HeadReader",
    "HeadResult",
    "TextResult",
    "TreeCopier",
    "cleanup_folder",
    "copy_directory",
    "destination_directory",
    "head",
    "head_to_string",
    "head_to_string_with_message",
    "is_folder_empty",
]
