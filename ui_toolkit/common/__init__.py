"""
================================================================================
UI Toolkit Common Utilities
================================================================================

Shared configuration management and logging setup for the page objects and
table helpers.

Exports:
    - get_config / set_config / reset_config / reload_config
    - init_logger / get_logger
    - ConfigurationError

Usage:
    from ui_toolkit.common import get_config, init_logger

    init_logger()
    timeout = get_config("ui.timeouts.row_lookup", 5000)

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    get_logger,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "reset_config",
    "set_config",
]
