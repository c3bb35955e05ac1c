"""Configuration loader for YAML files.

This module provides configuration loading with nested dot-notation access
and section lookup. It backs the display unit preferences.

Typical usage example:
    from weatherkit.core.config import ConfigLoader

    config = ConfigLoader.load("config/settings.yaml")
    pressure_unit = config.get("units.pressure", default="hectopascals")
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Examples:
        >>> config = ConfigLoader({"units": {"speed": "knots"}})
        >>> config.get("units.speed")
        'knots'
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary (empty when omitted).
        """
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or its top level
                is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key such as "units.pressure".
            default: Value returned when the key is missing.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value
