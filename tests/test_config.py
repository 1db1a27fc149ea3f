"""Tests for configuration loading and saving."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from fs_utils.config import CONFIG_DIR, DEFAULT_TRUNCATION_MESSAGE, ConfigManager, Settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()

        assert settings.head_limit == 1024
        assert settings.truncation_message == DEFAULT_TRUNCATION_MESSAGE
        assert settings.follow_symlinks is False

    def test_accepts_aliases(self) -> None:
        """Test camelCase keys populate fields."""
        settings = Settings.model_validate({"headLimit": 10, "followSymlinks": True})

        assert settings.head_limit == 10
        assert settings.follow_symlinks is True

    def test_negative_limit_rejected(self) -> None:
        """Test head_limit must be non-negative."""
        with pytest.raises(ValidationError):
            Settings(head_limit=-1)

    def test_assignment_validated(self) -> None:
        """Test assigned values are coerced and validated."""
        settings = Settings()

        settings.head_limit = "42"  # type: ignore[assignment]

        assert settings.head_limit == 42
        with pytest.raises(ValidationError):
            settings.head_limit = "many"  # type: ignore[assignment]


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_load_missing_returns_defaults(self, temp_config_dir: Path) -> None:
        """Test loading without a config file."""
        manager = ConfigManager.create(temp_config_dir)

        assert manager.load() == Settings()

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test settings round-trip through disk, creating the directory."""
        manager = ConfigManager.create(tmp_path / "new-dir")
        settings = Settings(head_limit=5, truncation_message="~", follow_symlinks=True)

        manager.save(settings)

        assert manager.load() == settings

    def test_saved_with_aliases(self, temp_config_dir: Path) -> None:
        """Test the file uses camelCase keys."""
        manager = ConfigManager.create(temp_config_dir)

        manager.save(Settings(head_limit=7))

        data = json.loads(manager.config_file.read_text())
        assert data["headLimit"] == 7
        assert "truncationMessage" in data

    def test_invalid_json(self, temp_config_dir: Path) -> None:
        """Test malformed JSON raises ValueError."""
        manager = ConfigManager.create(temp_config_dir)
        manager.config_file.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid configuration"):
            manager.load()

    def test_invalid_values(self, temp_config_dir: Path) -> None:
        """Test schema violations raise ValueError."""
        manager = ConfigManager.create(temp_config_dir)
        manager.config_file.write_text(json.dumps({"headLimit": -3}))

        with pytest.raises(ValueError, match="Invalid configuration"):
            manager.load()

    def test_create_default_uses_config_dir(self) -> None:
        """Test the default directory is ~/.fs-utils."""
        manager = ConfigManager.create_default()

        assert manager.config_dir == CONFIG_DIR
        assert manager.config_dir.name == ".fs-utils"
        assert manager.config_file == CONFIG_DIR / "config.json"
