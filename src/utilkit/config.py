# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Configuration loading and validation for utilkit."""

import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".utilkit.yml"

# Sanity cap for the simulated fetch latency
MAX_FETCH_DELAY_SECONDS = 60


class ConfigurationError(Exception):
    """Raised when configuration validation fails critically."""

    pass


class Config:
    """Configuration for utilkit helpers.

    Loads configuration from .utilkit.yml with validation and defaults.
    In strict mode, problems that would otherwise be logged and replaced
    by defaults raise ConfigurationError instead.
    """

    DEFAULTS: Dict[str, Any] = {
        "username_min_length": 5,
        "username_max_length": 15,
        "opening_hour": 8,
        "closing_hour": 20,
        "legal_driving_ages": {"US": 16, "UK": 17},
        "coupons": {"SAVE20WOW": 0.2, "SAVE10": 0.1, "SAVE20": 0.2},
        "fetch_delay_seconds": 0.01,
    }

    def __init__(self, config_path: Optional[Path] = None, strict: bool = False):
        """Initialize configuration.

        Args:
            config_path: Path to configuration file. If None, uses .utilkit.yml
                in the current working directory.
            strict: Raise ConfigurationError on malformed files, unknown keys
                and invalid values instead of falling back to defaults.

        Raises:
            ConfigurationError: In strict mode, if the file cannot be used as is.
        """
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self.config_path = config_path
        self.strict = strict
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _reject(self, message: str) -> None:
        if self.strict:
            raise ConfigurationError(message)
        logger.warning(message)

    def _defaults(self) -> Dict[str, Any]:
        # Nested dicts are copied so instances never share mutable defaults
        return {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in self.DEFAULTS.items()
        }

    def _load_config(self) -> None:
        """Load and validate configuration from file."""
        self._config = self._defaults()

        if not self.config_path.exists():
            logger.info(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self._reject(
                f"Error parsing configuration file {self.config_path}: {e}, using defaults"
            )
            return
        except UnicodeDecodeError as e:
            self._reject(
                f"Configuration file {self.config_path} is not valid UTF-8: {e}, using defaults"
            )
            return
        except OSError as e:
            self._reject(
                f"Could not read configuration file {self.config_path}: {e}, using defaults"
            )
            return

        if loaded_config is None:
            logger.warning("Configuration file is empty, using defaults")
            return

        if not isinstance(loaded_config, dict):
            self._reject(
                f"Configuration file must contain a YAML dictionary, "
                f"got {type(loaded_config)}, using defaults"
            )
            return

        self._validate_and_merge(loaded_config)

    def _validate_and_merge(self, loaded_config: Dict[str, Any]) -> None:
        """Validate loaded configuration and merge with defaults.

        Invalid parameters are logged as warnings and defaults are used.
        """
        for key, value in loaded_config.items():
            if key not in self.DEFAULTS:
                self._reject(f"Unknown configuration parameter '{key}', ignoring")
                continue

            if not self._validate_parameter(key, value):
                self._reject(
                    f"Invalid value for '{key}': {value}, using default {self.DEFAULTS[key]}"
                )
                continue

            self._config[key] = value

        # Cross-field checks fall back to both defaults
        if self._config["username_min_length"] > self._config["username_max_length"]:
            self._reject("username_min_length exceeds username_max_length, using defaults")
            self._config["username_min_length"] = self.DEFAULTS["username_min_length"]
            self._config["username_max_length"] = self.DEFAULTS["username_max_length"]

        if self._config["opening_hour"] >= self._config["closing_hour"]:
            self._reject("opening_hour must be before closing_hour, using defaults")
            self._config["opening_hour"] = self.DEFAULTS["opening_hour"]
            self._config["closing_hour"] = self.DEFAULTS["closing_hour"]

    def _validate_parameter(self, key: str, value: Any) -> bool:
        """Validate a configuration parameter.

        Returns:
            True if valid, False if invalid
        """
        # bool is an int subclass; never accept it for numeric settings
        if isinstance(value, bool):
            return False

        if key in ("username_min_length", "username_max_length"):
            return isinstance(value, int) and value > 0
        elif key in ("opening_hour", "closing_hour"):
            return isinstance(value, int) and 0 <= value <= 24
        elif key == "fetch_delay_seconds":
            return (
                isinstance(value, (int, float))
                and math.isfinite(value)
                and 0 <= value <= MAX_FETCH_DELAY_SECONDS
            )
        elif key == "legal_driving_ages":
            # Must be a non-empty dict of country code -> positive int
            if not isinstance(value, dict) or not value:
                return False
            return all(
                isinstance(code, str) and isinstance(age, int) and not isinstance(age, bool)
                and age > 0
                for code, age in value.items()
            )
        elif key == "coupons":
            # Must be a non-empty dict of code -> discount in (0, 1)
            if not isinstance(value, dict) or not value:
                return False
            return all(
                isinstance(code, str) and code
                and isinstance(discount, (int, float)) and not isinstance(discount, bool)
                and 0 < discount < 1
                for code, discount in value.items()
            )

        return True

    @property
    def username_min_length(self) -> int:
        """Minimum accepted username length (inclusive)."""
        value = self._config["username_min_length"]
        assert isinstance(value, int)
        return value

    @property
    def username_max_length(self) -> int:
        """Maximum accepted username length (inclusive)."""
        value = self._config["username_max_length"]
        assert isinstance(value, int)
        return value

    @property
    def opening_hour(self) -> int:
        """First hour of the day the store is online."""
        value = self._config["opening_hour"]
        assert isinstance(value, int)
        return value

    @property
    def closing_hour(self) -> int:
        """Hour at which the store goes offline (exclusive)."""
        value = self._config["closing_hour"]
        assert isinstance(value, int)
        return value

    @property
    def legal_driving_ages(self) -> Dict[str, int]:
        """Minimum driving age by country code.

        Example: {"US": 16, "UK": 17}
        """
        value = self._config["legal_driving_ages"]
        assert isinstance(value, dict)
        return value

    @property
    def coupons(self) -> Dict[str, float]:
        """Coupon code to discount fraction."""
        value = self._config["coupons"]
        assert isinstance(value, dict)
        return value

    @property
    def fetch_delay_seconds(self) -> float:
        """Simulated latency of fetch_data."""
        value = self._config["fetch_delay_seconds"]
        assert isinstance(value, (int, float))
        return float(value)


_default_config: Optional[Config] = None


def get_default_config() -> Config:
    """Return the lazily-loaded process-wide configuration."""
    global _default_config
    if _default_config is None:
        _default_config = Config()
    return _default_config


def reset_default_config() -> None:
    """Drop the cached default configuration so the next access reloads it."""
    global _default_config
    _default_config = None
