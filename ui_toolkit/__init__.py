"""
================================================================================
UI Toolkit
================================================================================

Support utilities shared by the Playwright page objects.

Modules:
    - common: Configuration loading and loguru setup
    - report_tools: Allure attachment helpers

Example:
    from ui_toolkit.common import get_config, init_logger
    from ui_toolkit.report_tools import attach_text

    init_logger()
    attach_text("hello", name="greeting")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
