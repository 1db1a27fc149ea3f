"""User configuration for the fs-utils command line."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Default configuration location
CONFIG_DIR = Path.home() / ".fs-utils"

DEFAULT_TRUNCATION_MESSAGE = "\n... [truncated]"


class Settings(BaseModel):
    """Defaults applied by CLI commands."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    head_limit: int = Field(default=1024, ge=0, alias="headLimit")
    truncation_message: str = Field(
        default=DEFAULT_TRUNCATION_MESSAGE, alias="truncationMessage"
    )
    follow_symlinks: bool = Field(default=False, alias="followSymlinks")


class ConfigManager:
    """Loads and saves settings as JSON."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory for the config file. Defaults to ~/.fs-utils.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory."""
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager using ~/.fs-utils."""
        return cls()

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored settings, or defaults if no config file exists.

        Raises:
            ValueError: If the file is not valid JSON or holds invalid values.
        """
        if not self.config_file.exists():
            return Settings()

        try:
            data = json.loads(self.config_file.read_text())
            return Settings.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"Invalid configuration in {self.config_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save.
        """
        self.ensure_config_dir()
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))
