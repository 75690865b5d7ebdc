"""
Configuration management for rawcsv.

This module provides centralized configuration with support for environment
variables, JSON configuration files and runtime updates.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from rawcsv.core.constants import Defaults, OutputFormats
from rawcsv.exceptions import ConfigurationError, InvalidConfigurationError


def _env_bool(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


@dataclass
class RawCsvConfig:
    """Main configuration class for rawcsv."""

    # Encoding of raw files, None to detect it
    default_encoding: Optional[str] = None
    log_level: str = Defaults.LOG_LEVEL

    # Parsing
    quadrant_aware_phase: bool = False

    # Output
    output_format: str = Defaults.OUTPUT_FORMAT

    def validate(self) -> None:
        """
        Check that the option values are usable.

        Raises:
            InvalidConfigurationError: If an option has an unknown value
        """
        if self.output_format not in OutputFormats.ALL:
            raise InvalidConfigurationError(
                f"Unknown output format: {self.output_format}", OutputFormats.ALL
            )
        if self.log_level.upper() not in Defaults.LOG_LEVELS:
            raise InvalidConfigurationError(
                f"Unknown log level: {self.log_level}", Defaults.LOG_LEVELS
            )

    def update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration from a dictionary.

        Unknown keys are ignored.

        Args:
            config_dict: Dictionary with configuration values
        """
        for key, value in config_dict.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "RawCsvConfig":
        """
        Load configuration from a JSON file.

        Args:
            filepath: Path to configuration file

        Returns:
            RawCsvConfig instance

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise ConfigurationError(f"Configuration file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(
                f"Invalid JSON in configuration file: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}") from e

        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(
                f"Configuration file must hold a JSON object: {filepath}"
            )

        config = cls()
        config.update_from_dict(config_dict)
        return config

    def save_to_file(self, filepath: Union[str, Path]) -> None:
        """
        Save configuration to a JSON file.

        Args:
            filepath: Path to save configuration
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_environment(cls) -> "RawCsvConfig":
        """
        Create configuration from environment variables.

        Environment variables are prefixed with RAWCSV_, e.g.:
        - RAWCSV_DEFAULT_ENCODING=utf-16
        - RAWCSV_LOG_LEVEL=DEBUG
        - RAWCSV_QUADRANT_AWARE_PHASE=true

        Returns:
            RawCsvConfig instance
        """
        config = cls()

        env_mapping: Dict[str, tuple[str, Callable[[str], Any]]] = {
            "RAWCSV_DEFAULT_ENCODING": ("default_encoding", str),
            "RAWCSV_LOG_LEVEL": ("log_level", str),
            "RAWCSV_QUADRANT_AWARE_PHASE": ("quadrant_aware_phase", _env_bool),
            "RAWCSV_OUTPUT_FORMAT": ("output_format", str),
        }

        for env_var, (attr, converter) in env_mapping.items():
            value = os.environ.get(env_var)
            if value is not None:
                try:
                    setattr(config, attr, converter(value))
                except ValueError as e:
                    logging.warning(f"Failed to set {attr} from {env_var}: {e}")

        return config


# Global configuration instance
_global_config: Optional[RawCsvConfig] = None


def get_config() -> RawCsvConfig:
    """
    Get the global configuration instance.

    Returns:
        Global RawCsvConfig instance
    """
    global _global_config
    if _global_config is None:
        _global_config = RawCsvConfig.from_environment()
    return _global_config


def set_config(config: Optional[RawCsvConfig]) -> None:
    """
    Set the global configuration instance.

    Args:
        config: RawCsvConfig instance to use globally, None to reset
    """
    global _global_config
    _global_config = config


def load_config(filepath: Optional[Union[str, Path]] = None) -> RawCsvConfig:
    """
    Load configuration from file or environment.

    Without a path the default locations are tried in order, falling back to
    the environment when none holds a readable configuration.

    Args:
        filepath: Optional path to configuration file

    Returns:
        Loaded configuration
    """
    if filepath:
        config = RawCsvConfig.from_file(filepath)
    else:
        config_locations = [
            Path.home() / ".rawcsv" / "config.json",
            Path.cwd() / "rawcsv.json",
            Path.cwd() / ".rawcsv.json",
        ]

        loaded_config: Optional[RawCsvConfig] = None
        for location in config_locations:
            if location.exists():
                try:
                    loaded_config = RawCsvConfig.from_file(location)
                    break
                except ConfigurationError:
                    continue

        config = loaded_config or RawCsvConfig.from_environment()

    set_config(config)
    return config
