"""
================================================================================
Global Configuration for UI Helpers
================================================================================

This module provides centralized configuration management for the page
objects and table helpers, including logging setup and configuration file
loading.

Features:
    - Built-in defaults for every timeout and selector the helpers use
    - YAML-based configuration loading (config/config.yaml, config/{ENV}.yaml)
    - Environment variable support (UI_BASE_URL, UI__TIMEOUTS__ROW_LOOKUP, ...)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

# Explicit environment variable -> config key mapping
ENV_MAPPING: Dict[str, str] = {
    "UI_BASE_URL": "ui.base_url",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
    },
    "ui": {
        "base_url": "http://localhost:3000",
        # All timeouts in milliseconds
        "timeouts": {
            "row_lookup": 5000,
            "row_poll_interval": 300,
            "page_settle": 1000,
            "cell_visible": 5000,
            "button_visible": 60000,
            "field_visible": 20000,
            "date_visible": 5000,
            "rows_visible": 5000,
            "suggestion_delay": 500,
        },
        "table": {
            "header_selector": "table thead th",
            "next_page_button": "Next",
            "max_pages": 20,
        },
    },
}


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""
    pass


def init_logger(level: str = None, log_file: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path to write logs to. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or get_config("logging.level", "INFO")).upper()
    log_format = get_config("logging.format", DEFAULT_CONFIG["logging"]["format"])

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = log_file or get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Return the loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _config_dirs() -> List[Path]:
    return [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e


def _load_config() -> None:
    """
    Loads configuration from defaults, YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults (DEFAULT_CONFIG)
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config

    _config = copy.deepcopy(DEFAULT_CONFIG)

    config_dir = next((d for d in _config_dirs() if d.is_dir()), None)
    if config_dir is None:
        logger.debug("No configuration directory found. Using defaults.")
    else:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(default_config_path))
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(env_config_path))
            logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Explicit names listed in ENV_MAPPING (UI_BASE_URL -> ui.base_url)
        - Double underscore separates nested keys
          (UI__TIMEOUTS__ROW_LOOKUP=8000 overrides ui.timeouts.row_lookup)
    """
    for env_key, config_key in ENV_MAPPING.items():
        if env_key in os.environ:
            _set_nested(_config, config_key.split("."), os.environ[env_key])

    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        if not isinstance(d.get(key), dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def _convert_type(value: str, reference: Any) -> Any:
    """
    Convert string value to match reference type.

    Used for environment variables which are always strings.
    """
    if reference is None:
        return value

    if isinstance(reference, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(reference, int):
        try:
            return int(value)
        except ValueError:
            return value
    if isinstance(reference, float):
        try:
            return float(value)
        except ValueError:
            return value

    return value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    String values (e.g. from environment variables) are converted to the
    type of ``default`` when a default is given.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.timeouts.row_lookup").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.timeouts.row_lookup", 5000)
        5000
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    if isinstance(value, str):
        return _convert_type(value, default)
    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reset_config() -> None:
    """
    Drop the loaded configuration; the next lookup reloads it.

    Useful for testing when configuration needs to be reloaded
    with different settings.
    """
    global _config
    _config = {}


def reload_config() -> None:
    """
    Reloads the configuration from files.
    """
    reset_config()
    _load_config()
    logger.info("Configuration reloaded.")
