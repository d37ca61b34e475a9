"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .common_user_actions_page import CommonUserActionsPage
from .web_table_page import WebTablePage

__all__ = [
    "CommonUserActionsPage",
    "WebTablePage",
]
