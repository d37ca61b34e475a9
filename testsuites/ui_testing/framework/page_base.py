"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Smart element location (fallback chains)
    - Visibility waits with descriptive failures

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional, Type

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ui_toolkit.common import get_config

from .smart_locator import ElementNotFoundError, SmartLocator


class BasePage:
    """
    Base class for all page objects.

    Provides common functionality for:
        - Navigation and URL handling
        - Smart element interaction
        - Wait utilities that fail with the identifier the test used

    Usage:
        class SettingsPage(BasePage):
            URL_PATH = "/settings"

            async def save(self):
                button = self.page.get_by_role("button", name="Save")
                await self.wait_visible(button, 5000, 'The button "Save" is NOT visible')
                await button.click()
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: Optional[str] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to `ui.base_url`)
        """
        self.page = page
        self.base_url = (base_url or get_config("ui.base_url", "http://localhost:3000")).rstrip("/")
        self.smart = SmartLocator(page)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        await self.navigate_to(self.URL_PATH, wait_for=wait_for)

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "load",
    ) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {full_url}")

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait_visible(
        self,
        locator: Locator,
        timeout: int,
        failure_message: str,
        error_cls: Type[ElementNotFoundError] = ElementNotFoundError,
    ) -> Locator:
        """
        Wait for `locator` to become visible.

        Args:
            locator: Element to wait for
            timeout: Timeout in milliseconds
            failure_message: Message prefix of the raised error
            error_cls: Error raised on timeout (ElementNotFoundError or a subclass)

        Returns:
            The same locator, for chaining

        Raises:
            error_cls: "<failure_message>: ->> <playwright error>"
        """
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise error_cls(f"{failure_message}: ->> {e}") from e
        return locator

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
