from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .logger import log


class ConfigError(Exception):
    """Configuration validation error."""

    pass


@dataclass(frozen=True)
class DiffPaths:
    """The two files being compared: left (first argument) and right (second)."""

    left_path: str
    right_path: str

    @classmethod
    def from_args(cls, args) -> DiffPaths:
        """Create DiffPaths from parsed command line arguments."""
        return cls(left_path=args.files[0], right_path=args.files[1])


class Config:
    """atlas.diff configuration with environment variable support and validation."""

    # Default values
    _DEFAULT_TAB_WIDTH: Final[int] = 4
    _DEFAULT_MIN_WIDTH: Final[int] = 30
    _DEFAULT_DIFF_TIMEOUT: Final[float] = 1.0
    _DEFAULT_MAX_FILE_BYTES: Final[int] = 50 * 1024 * 1024

    # Validation bounds
    _MIN_TAB_WIDTH: Final[int] = 1
    _MAX_TAB_WIDTH: Final[int] = 16
    _MIN_MIN_WIDTH: Final[int] = 30
    _MAX_MIN_WIDTH: Final[int] = 500
    _MIN_DIFF_TIMEOUT: Final[float] = 0.0
    _MAX_DIFF_TIMEOUT: Final[float] = 60.0
    _MIN_MAX_FILE_BYTES: Final[int] = 1024
    _MAX_MAX_FILE_BYTES: Final[int] = 1024 * 1024 * 1024

    def __init__(self):
        """Initialize configuration with environment variable overrides."""
        self.tab_width = self._get_int_env("ATLAS_TAB_WIDTH", self._DEFAULT_TAB_WIDTH)
        self.min_width = self._get_int_env("ATLAS_MIN_WIDTH", self._DEFAULT_MIN_WIDTH)
        self.diff_timeout = self._get_float_env("ATLAS_DIFF_TIMEOUT", self._DEFAULT_DIFF_TIMEOUT)
        self.max_file_bytes = self._get_int_env("ATLAS_MAX_FILE_BYTES", self._DEFAULT_MAX_FILE_BYTES)

        self._validate_all()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError as e:
            log.warning(f"Invalid integer value for {key}='{value}', using default {default}: {e}")
            return default

    def _get_float_env(self, key: str, default: float) -> float:
        """Get float environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError as e:
            log.warning(f"Invalid float value for {key}='{value}', using default {default}: {e}")
            return default

    def _validate_all(self) -> None:
        """Validate all configuration values."""
        self._validate_int("tab_width", self.tab_width, self._MIN_TAB_WIDTH, self._MAX_TAB_WIDTH)
        self._validate_int("min_width", self.min_width, self._MIN_MIN_WIDTH, self._MAX_MIN_WIDTH)
        self._validate_float("diff_timeout", self.diff_timeout, self._MIN_DIFF_TIMEOUT, self._MAX_DIFF_TIMEOUT)
        self._validate_int(
            "max_file_bytes", self.max_file_bytes, self._MIN_MAX_FILE_BYTES, self._MAX_MAX_FILE_BYTES
        )

    def _validate_int(self, name: str, value: int, min_val: int, max_val: int) -> None:
        """Validate integer configuration value."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def _validate_float(self, name: str, value: float, min_val: float, max_val: float) -> None:
        """Validate float configuration value."""
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def __repr__(self) -> str:
        return (
            f"Config(tab_width={self.tab_width}, "
            f"min_width={self.min_width}, "
            f"diff_timeout={self.diff_timeout}, "
            f"max_file_bytes={self.max_file_bytes})"
        )


_config: Config | None = None


def get_config() -> Config:
    """Return the process configuration, reading the environment on first use.

    Raises:
        ConfigError: If an environment override is out of range
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
