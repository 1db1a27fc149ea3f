"""Destination path composition for directory copies."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fs_utils.errors import ErrorKind, FsUtilsError

logger = logging.getLogger(__name__)

# Final segments that name no directory of their own
_NO_BASENAME = {"", ".", ".."}


def destination_directory(
    source_dir: str | os.PathLike[str],
    destination_dir: str | os.PathLike[str],
) -> Path:
    """Compute the effective destination of a directory copy.

    The destination root is joined with the base name of the source, so
    copying ``/a/b/src`` into ``/dst`` targets ``/dst/src``. No I/O is done.

    Args:
        source_dir: Directory that would be copied.
        destination_dir: Directory the copy would be placed in.

    Returns:
        The composed destination directory.

    Raises:
        FsUtilsError: If the source has no base name (``/``, ``.``, ``..``
            or an empty path).

    Example:
        >>> destination_directory("/a/b/src", "/dst")
        PosixPath('/dst/src')
    """
    source = Path(source_dir)
    name = source.name
    if name in _NO_BASENAME:
        raise FsUtilsError(
            f"Source directory has no base name: '{source_dir}'",
            kind=ErrorKind.INVALID_ARGUMENT,
            path=source,
        )
    destination = Path(destination_dir) / name
    logger.debug("Composed destination %s from %s", destination, source)
    return destination
