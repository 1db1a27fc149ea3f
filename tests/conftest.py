"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary configuration directory."""
    config_dir = tmp_path / ".fs-utils"
    config_dir.mkdir(parents=True)
    return config_dir


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small tree: src/a.txt and src/sub/b.txt."""
    src = tmp_path / "a" / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_text("hi")
    (src / "sub" / "b.txt").write_text("bye")
    return src


@pytest.fixture
def dest_root(tmp_path: Path) -> Path:
    """Create an empty destination root."""
    dest = tmp_path / "dst"
    dest.mkdir()
    return dest


def _snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map relative paths to file bytes (None for directories)."""
    return {
        str(path.relative_to(root)): None if path.is_dir() else path.read_bytes()
        for path in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot_tree():
    """Return a helper that captures a tree as {relative path: bytes}."""
    return _snapshot_tree


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_symlink.return_value = False
    fs.iterdir.return_value = iter([])
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context(temp_config_dir: Path):
    """Create a real AppContext rooted in a temporary config directory."""
    from fs_utils.context import create_context

    return create_context(config_dir=temp_config_dir)
