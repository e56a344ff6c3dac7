"""Configuration loading for airports.

Provides a YAML configuration loader with dot-notation access and the
``AirportSettings`` value built from it.

Typical usage example:
    from skyport.core.config import AirportSettings, ConfigLoader

    config = ConfigLoader.load("config/airport.yaml")
    settings = AirportSettings.from_config(config)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from skyport.core.logging_system import get_logger

logger = get_logger(__name__)

DEFAULT_CAPACITY = 20
DEFAULT_STORM_PROBABILITY = 0.1


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Examples:
        >>> config = ConfigLoader.load("config/airport.yaml")
        >>> capacity = config.get("airport.capacity", default=20)
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data or {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except Exception as e:
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
            key: Configuration key, e.g. ``"weather.storm_probability"``.
            default: Value returned when the key is absent.

        Returns:
            Configuration value or default.
        """
        value = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If the section is missing or is not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one; ``other`` wins."""
        self._data = _merge_dicts(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()


def _merge_dicts(base: dict, override: dict) -> dict:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


@dataclass(frozen=True)
class AirportSettings:
    """Settings used to build an airport.

    Attributes:
        capacity: Maximum number of grounded planes.
        storm_probability: Chance that the random weather reports a storm.
        seed: Seed for the random weather, or None for an unseeded generator.
    """

    capacity: int = DEFAULT_CAPACITY
    storm_probability: float = DEFAULT_STORM_PROBABILITY
    seed: int | None = None

    def __post_init__(self):
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise ConfigError(f"airport.capacity must be an integer, got: {self.capacity!r}")
        if self.capacity < 0:
            raise ConfigError(f"airport.capacity must be >= 0, got: {self.capacity}")
        if isinstance(self.storm_probability, bool) or not isinstance(
            self.storm_probability, int | float
        ):
            raise ConfigError(
                f"weather.storm_probability must be a number, got: {self.storm_probability!r}"
            )
        if not 0.0 <= self.storm_probability <= 1.0:
            raise ConfigError(
                f"weather.storm_probability must be between 0 and 1, got: {self.storm_probability}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"weather.seed must be an integer or null, got: {self.seed!r}")

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "AirportSettings":
        """Build settings from a loaded configuration.

        Missing keys fall back to the defaults.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        return cls(
            capacity=config.get("airport.capacity", DEFAULT_CAPACITY),
            storm_probability=config.get("weather.storm_probability", DEFAULT_STORM_PROBABILITY),
            seed=config.get("weather.seed"),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "AirportSettings":
        """Load settings straight from a YAML file."""
        return cls.from_config(ConfigLoader.load(path))
