"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helpers for page objects.

Components:
    - smart_locator: Element location with ordered fallback strategies
    - page_base: Base page object for common operations
    - web_table_helper: Row/column/cell resolution for HTML tables

Author: Automation Team
License: MIT
================================================================================
"""

from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .web_table_helper import (
    WebTableHelper,
    TableLookupError,
    RowNotFoundError,
    ColumnNotFoundError,
)

__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "WebTableHelper",
    "TableLookupError",
    "RowNotFoundError",
    "ColumnNotFoundError",
]
