"""Configuration management for Handle Agent.

This module provides centralized configuration loading from multiple sources:
- YAML/TOML configuration files
- Environment variables (.env)
- Default values

Includes validation to ensure configuration values are correct.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

import yaml
from dotenv import load_dotenv

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_OUTPUT_FORMATS = ["table", "json", "csv", "markdown", "text"]

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def __str__(self) -> str:
        """Format validation result as string."""
        lines = []
        if self.errors:
            lines.append("Errors:")
            lines.extend(f"  - {e}" for e in self.errors)
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in self.warnings)
        if not lines:
            return "Configuration is valid."
        return "\n".join(lines)


def as_bool(value: Any) -> bool:
    """Interpret config/env values such as ``"false"`` as booleans."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


class Config:
    """Configuration manager for Handle Agent."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML or TOML config file (optional)
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self._config: Dict[str, Any] = {}
        self._config_file = config_file

        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)
            self.logger.info("Loaded environment variables from .env")

        if config_file:
            self._load_config_file(config_file)
        else:
            self._auto_load_config()

        self._load_defaults()

    def _load_config_file(self, config_file: str) -> None:
        """Load configuration from YAML or TOML file."""
        config_path = Path(config_file)

        if not config_path.exists():
            self.logger.warning(f"Config file not found: {config_file}")
            return

        try:
            with open(config_path, "rb") as f:
                if config_file.endswith((".yaml", ".yml")):
                    self._config = yaml.safe_load(f) or {}
                    self.logger.info(f"Loaded YAML config from {config_file}")
                elif config_file.endswith(".toml"):
                    self._config = tomllib.load(f)
                    self.logger.info(f"Loaded TOML config from {config_file}")
                else:
                    self.logger.error(f"Unsupported config format: {config_file}")
        except Exception as e:
            self.logger.error(f"Failed to load config file {config_file}: {e}")
            self._config = {}

    def _auto_load_config(self) -> None:
        """Automatically find and load config file."""
        config_dir = Path("config")

        candidates = [
            config_dir / "handle_agent.yaml",
            config_dir / "handle_agent.yml",
            config_dir / "handle_agent.toml",
            Path("handle_agent.yaml"),
            Path("handle_agent.yml"),
            Path("handle_agent.toml"),
        ]

        for candidate in candidates:
            if candidate.exists():
                self._load_config_file(str(candidate))
                return

        self.logger.debug("No config file found, using defaults and environment variables")

    def _load_defaults(self) -> None:
        """Load default configuration values."""
        defaults = {
            "logging": {
                "level": "WARNING",
                "directory": "",
                "file": "handle_agent.log",
                "json_format": False,
            },
            "output": {"format": "table", "title": ""},
            "clipboard": {"enabled": True, "decorated": True, "reset_ms": 1500},
            "generation": {"salt": None},
        }

        # Loaded config takes precedence
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value
            elif isinstance(value, dict):
                self._config[key] = {**value, **(self._config.get(key) or {})}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Supports dot notation for nested keys: "logging.level"

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        # Environment variables have the highest priority
        env_key = key.upper().replace(".", "_")
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Like ``get`` but coerces to ``int``; unparsable values give ``default``."""
        value = self.get(key, default)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            self.logger.warning(f"Config {key}={value!r} is not an integer, using {default}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        return as_bool(self.get(key, default))

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value at runtime.

        Supports dot notation for nested keys: "logging.level"

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config or not isinstance(config[k], dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self.logger.debug(f"Set config {key} = {value}")

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "logging", "clipboard")

        Returns:
            Dictionary with section configuration
        """
        return self._config.get(section, {})

    def to_dict(self) -> Dict[str, Any]:
        """Get all configuration as dictionary."""
        return self._config.copy()

    def reload(self, config_file: Optional[str] = None) -> None:
        """
        Reload configuration from file.

        Args:
            config_file: Path to config file (optional, uses original if not provided)
        """
        self._config = {}
        config_file = config_file or self._config_file
        if config_file:
            self._config_file = config_file
            self._load_config_file(config_file)
        else:
            self._auto_load_config()
        self._load_defaults()
        self.logger.info("Configuration reloaded")

    def validate(self) -> ValidationResult:
        """
        Validate the configuration.

        Checks:
        - Logging level and directory
        - Output format
        - Clipboard reset delay
        - Fixed salt, when one is configured

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        log_level = str(self.get("logging.level", "WARNING"))
        if log_level.upper() not in VALID_LOG_LEVELS:
            result.add_error(
                f"Invalid logging level '{log_level}'. "
                f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

        log_dir = self.get("logging.directory", "")
        if log_dir and not Path(log_dir).exists():
            result.add_warning(f"Log directory does not exist and will be created: {log_dir}")

        output_format = str(self.get("output.format", "table"))
        if output_format.lower() not in VALID_OUTPUT_FORMATS:
            result.add_error(
                f"Invalid output format '{output_format}'. "
                f"Must be one of: {', '.join(VALID_OUTPUT_FORMATS)}"
            )

        reset_ms = self.get("clipboard.reset_ms", 1500)
        try:
            if int(reset_ms) < 0:
                result.add_error("clipboard.reset_ms must be a non-negative integer")
        except (TypeError, ValueError):
            result.add_error("clipboard.reset_ms must be a non-negative integer")

        salt = self.get("generation.salt")
        if salt is not None and salt != "":
            try:
                int(salt)
            except (TypeError, ValueError):
                result.add_error("generation.salt must be an integer when set")
            else:
                result.add_warning(
                    "generation.salt is fixed; every run returns the same suggestions"
                )

        if not result.is_valid:
            for error in result.errors:
                self.logger.error(f"Config validation error: {error}")
        for warning in result.warnings:
            self.logger.warning(f"Config validation warning: {warning}")

        return result

    def validate_and_raise(self) -> None:
        """
        Validate configuration and raise exception if invalid.

        Raises:
            ValueError: If configuration is invalid
        """
        result = self.validate()
        if not result.is_valid:
            raise ValueError(f"Invalid configuration:\n{result}")


_global_config: Optional[Config] = None


def get_config(config_file: Optional[str] = None) -> Config:
    """
    Get global configuration instance.

    Args:
        config_file: Path to config file (only used on first call)

    Returns:
        Config instance
    """
    global _global_config

    if _global_config is None:
        _global_config = Config(config_file)

    return _global_config


def reload_config(config_file: Optional[str] = None) -> None:
    """
    Reload global configuration.

    Args:
        config_file: Path to config file (optional)
    """
    global _global_config

    if _global_config is not None:
        _global_config.reload(config_file)
    else:
        _global_config = Config(config_file)
