"""Tests for folder emptiness checks."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from fs_utils.check import FolderInspector, is_folder_empty
from fs_utils.errors import ErrorKind


class TestIsFolderEmpty:
    """Tests for is_folder_empty."""

    def test_empty_folder(self, tmp_path: Path) -> None:
        """Test an empty folder reports empty."""
        result = is_folder_empty(tmp_path)

        assert result.success is True
        assert result.is_empty is True

    def test_folder_with_file(self, tmp_path: Path) -> None:
        """Test a folder with a file is not empty."""
        (tmp_path / "file.txt").touch()

        assert is_folder_empty(tmp_path).is_empty is False

    def test_folder_with_hidden_entry(self, tmp_path: Path) -> None:
        """Test dotfiles count as entries."""
        (tmp_path / ".hidden").mkdir()

        assert is_folder_empty(tmp_path).is_empty is False

    def test_missing_folder(self, tmp_path: Path) -> None:
        """Test a missing folder fails with not_found."""
        result = is_folder_empty(tmp_path / "missing")

        assert result.success is False
        assert result.is_empty is None
        assert result.error_kind == ErrorKind.NOT_FOUND

    def test_file_path(self, tmp_path: Path) -> None:
        """Test a file path fails with invalid_argument."""
        path = tmp_path / "file.txt"
        path.touch()

        result = is_folder_empty(path)

        assert result.success is False
        assert result.error_kind == ErrorKind.INVALID_ARGUMENT

    def test_stops_at_first_entry(self, mock_filesystem: MagicMock) -> None:
        """Test only the first entry is consumed."""
        entries = MagicMock()
        entries.__iter__.return_value = iter([Path("/x/a"), Path("/x/b")])
        mock_filesystem.iterdir.return_value = entries

        result = FolderInspector(mock_filesystem).is_folder_empty("/x")

        assert result.is_empty is False

    def test_permission_denied(self, mock_filesystem: MagicMock) -> None:
        """Test an unreadable folder maps to permission_denied."""
        mock_filesystem.iterdir.side_effect = PermissionError(13, "Permission denied")

        result = FolderInspector(mock_filesystem).is_folder_empty("/x")

        assert result.error_kind == ErrorKind.PERMISSION_DENIED
