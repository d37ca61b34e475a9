"""
================================================================================
Locators
================================================================================

Selector builders shared by the page objects.

================================================================================
"""

from .common_locators import CommonLocators, xpath_literal
from .web_table_page_locators import WebTablePageLocators

__all__ = [
    "CommonLocators",
    "WebTablePageLocators",
    "xpath_literal",
]
