"""Configuration manager for awsprof."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..aws.exceptions import ConfigError
from ..models.config import Config


class ConfigManager:
    """Manage awsprof configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Custom config directory (defaults to ~/.config/awsprof)
        """
        if config_dir is None:
            config_dir = Path.home() / ".config" / "awsprof"
        self.config_dir = config_dir
        self.config_file = self.config_dir / "config.yaml"
        self._config: Config | None = None

    def _ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        os.chmod(self.config_dir, 0o700)

    def exists(self) -> bool:
        """Check if config file exists.

        Returns:
            True if config file exists
        """
        return self.config_file.exists()

    def load(self) -> Config:
        """Load configuration from file, falling back to defaults.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If config file is invalid
        """
        if not self.exists():
            self._config = Config()
            return self._config

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read config: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.config_file} must contain a mapping")

        try:
            self._config = Config(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {self.config_file}: {e}")
        return self._config

    def save(self, config: Config) -> None:
        """Save configuration to file.

        Args:
            config: Configuration to save

        Raises:
            ConfigError: If save fails
        """
        self._ensure_config_dir()
        try:
            data = config.model_dump(exclude_none=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(data, f, default_flow_style=False)
            os.chmod(self.config_file, 0o600)
            self._config = config
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}")

    def get(self) -> Config:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration
        """
        if self._config is None:
            self._config = self.load()
        return self._config

    def set_value(self, key: str, value: Any) -> Config:
        """Validate and persist a single setting.

        Args:
            key: Setting name (dashes are accepted in place of underscores)
            value: Raw value, coerced by the model

        Returns:
            Updated configuration

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        field = key.replace("-", "_")
        if field not in Config.model_fields:
            raise ConfigError(
                f"Unknown setting '{key}'. Available settings: "
                f"{', '.join(Config.model_fields)}"
            )

        data = self.get().model_dump()
        data[field] = None if value in ("", "none", "null") else value
        try:
            config = Config(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {e.errors()[0]['msg']}")

        self.save(config)
        return config
