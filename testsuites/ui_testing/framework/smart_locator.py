"""
================================================================================
Smart Locator with Fallback Strategies
================================================================================

Element location by human-readable name with:
    - An ordered chain of locator strategies per element
    - Automatic degradation when the preferred strategy matches nothing
    - Usage analytics (which elements needed a fallback)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from loguru import logger
from playwright.async_api import Locator, Page

from testsuites.ui_testing.locators.common_locators import CommonLocators


class ElementNotFoundError(Exception):
    """Raised when the target element of an action cannot be found."""
    pass


# Builds a locator for the page at resolution time
LocatorFactory = Callable[[Page], Locator]


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        element_name: Human-readable element name
        primary_strategy: The preferred strategy
        strategy: The strategy that matched
        used_fallback: Whether a fallback was used
    """
    element_name: str
    primary_strategy: str
    strategy: str
    used_fallback: bool = False


def field_strategies(field_name: str) -> Dict[str, LocatorFactory]:
    """
    Locator chain for a text input identified by its visible name.

    Order: role (textbox, exact accessible name) -> label -> placeholder
    -> relative XPath (last resort).
    """
    return {
        "role": lambda page: page.get_by_role("textbox", name=field_name, exact=True),
        "label": lambda page: page.get_by_label(field_name, exact=True),
        "placeholder": lambda page: page.get_by_placeholder(field_name, exact=True),
        "relative XPath": lambda page: page.locator(CommonLocators.input_field_locator(field_name)),
    }


class SmartLocator:
    """
    Resolves elements through ordered fallback strategies.

    A strategy wins as soon as its locator matches at least one element;
    strategies are not waited on, so the chain reflects the DOM as it is
    when the action runs.

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.fill_field("Email", "test@example.com")
        >>> strategy, locator = await smart.resolve("Search", {
        ...     "test id": lambda p: p.get_by_test_id("search"),
        ...     "placeholder": lambda p: p.get_by_placeholder("Search"),
        ... })
    """

    def __init__(self, page: Page):
        """
        Initialize SmartLocator with Playwright page.

        Args:
            page: Playwright Page object
        """
        self.page = page
        self._fallback_used: Dict[str, LocatorHealth] = {}

    async def resolve(
        self,
        element_name: str,
        strategies: Dict[str, LocatorFactory],
        description: Optional[str] = None,
    ) -> Tuple[str, Locator]:
        """
        Return the first strategy (and its locator) that matches an element.

        Args:
            element_name: Human-readable element name for logging and errors
            strategies: Ordered mapping of strategy name -> locator factory
            description: Element kind used in the error message (e.g. "Input field")

        Returns:
            Tuple of (strategy name, Playwright Locator)

        Raises:
            ElementNotFoundError: When no strategy matches
        """
        if not strategies:
            raise ElementNotFoundError(
                f"No locator strategies defined for element: {element_name}"
            )

        primary = next(iter(strategies))
        for strategy_name, factory in strategies.items():
            locator = factory(self.page)
            if await locator.count() == 0:
                logger.debug(f"'{element_name}' not matched by {strategy_name} locator")
                continue

            health = LocatorHealth(
                element_name=element_name,
                primary_strategy=primary,
                strategy=strategy_name,
                used_fallback=(strategy_name != primary),
            )
            if health.used_fallback:
                logger.warning(
                    f"Element '{element_name}' used fallback: {strategy_name}"
                )
                self._fallback_used[element_name] = health
            return strategy_name, locator

        names = list(strategies)
        if len(names) > 2:
            tried = ", ".join(names[:-1]) + f", or {names[-1]}"
        else:
            tried = " or ".join(names)
        raise ElementNotFoundError(
            f'{description or "Element"} "{element_name}" not found using {tried}.'
        )

    async def fill_field(self, field_name: str, value: str) -> str:
        """
        Fill a text input found through `field_strategies`.

        Returns:
            Name of the strategy that located the field
        """
        strategy, locator = await self.resolve(
            field_name, field_strategies(field_name), description="Input field"
        )
        await locator.fill(value)
        return strategy

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements that could only be found through a fallback
        strategy (maintenance candidates).
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
        ]
        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Missed primary: {health.primary_strategy}",
                f"    Used: {health.strategy}",
                "",
            ])
        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
    "LocatorFactory",
    "field_strategies",
]
