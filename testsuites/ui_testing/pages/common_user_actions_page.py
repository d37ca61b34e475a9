"""
================================================================================
Common User Actions Page Object (Async / Playwright)
================================================================================

Generic form interactions that work on any page: fields, buttons,
checkboxes, radio buttons and date inputs, all addressed by the text a
tester sees next to them.

Usage:
    actions = CommonUserActionsPage(page)
    await actions.input_on_field("Email", "test@example.com")
    await actions.select_checkbox("I agree to the Terms and Conditions")
    await actions.click_on_button("Submit")

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from loguru import logger

from ui_toolkit.common import get_config

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.locators.common_locators import CommonLocators


class CommonUserActionsPage(PageBase):
    """User actions shared by every page (async)."""

    @allure.step("Input On Field: {field_name} with Value: {text_input}")
    async def input_on_field(self, field_name: str, text_input: str) -> None:
        """
        Fill the input named `field_name`, trying in order:
        role (textbox), label, placeholder, relative XPath.

        Raises:
            ElementNotFoundError: No strategy found the field
        """
        strategy = await self.smart.fill_field(field_name, text_input)
        logger.info(
            f'The input field "{field_name}" filled with value: {text_input} using {strategy} locator'
        )

    @allure.step("Click On Button: {button_name}")
    async def click_on_button(self, button_name: str) -> None:
        """
        Usage:
            await actions.click_on_button("Add to Cart")
        """
        button = self.page.locator(CommonLocators.button_locator(button_name)).first
        await self.wait_visible(
            button,
            get_config("ui.timeouts.button_visible", 60000),
            f'The button "{button_name}" to be clicked is NOT visible',
        )
        await button.click()
        logger.info(f'The button "{button_name}" clicked')

    @allure.step("Input On Text Field: {field_name} with Text: {text}")
    async def input_on_text_field(self, field_name: str, text: str) -> None:
        """Fill the field found by its label, then Tab out to fire blur handlers."""
        field = self.page.locator(CommonLocators.input_field_locator(field_name))
        await self.wait_visible(
            field,
            get_config("ui.timeouts.field_visible", 20000),
            f'The field "{field_name}" is NOT visible',
        )
        await field.fill(text)
        await field.press("Tab")
        logger.info(f'The field "{field_name}" filled with text: {text}')

    @allure.step("Input On Text Field: {field_name} with Values: {values}")
    async def input_multi_values(self, field_name: str, values: List[str]) -> None:
        """
        Enter several values into a tag/autocomplete style field.

        Each value is typed, the suggestion list gets
        `ui.timeouts.suggestion_delay` ms to appear, then Enter picks it.

        Raises:
            ValueError: `values` is empty or holds only blank strings
        """
        if not values or all(not v.strip() for v in values):
            raise ValueError(
                f'No valid values provided for "{field_name}". '
                f"Expected at least one value, e.g. ['Maths', 'English']"
            )

        field = self.page.locator(CommonLocators.input_field_locator(field_name))
        await self.wait_visible(
            field,
            get_config("ui.timeouts.field_visible", 20000),
            f'The field "{field_name}" is NOT visible',
        )

        delay = get_config("ui.timeouts.suggestion_delay", 500)
        for value in values:
            await field.press_sequentially(value)
            await self.page.wait_for_timeout(delay)
            await self.page.keyboard.press("Enter")

        logger.info(f'The field "{field_name}" filled with text: {values}')

    @allure.step("Select on checkbox for {label_name}")
    async def select_checkbox(self, label_name: str) -> None:
        """
        Usage:
            await actions.select_checkbox("I agree to the Terms and Conditions")
        """
        checkbox = self.page.locator(CommonLocators.check_box_locator(label_name))
        await self.wait_visible(
            checkbox,
            get_config("ui.timeouts.button_visible", 60000),
            f'The checkbox for "{label_name}" NOT found',
        )
        await checkbox.click()
        logger.info(f'The checkbox for "{label_name}" selected')

    @allure.step("Select on radio button for {label_name}")
    async def select_radio_button(self, label_name: str) -> None:
        radio = self.page.locator(CommonLocators.radio_button_locator(label_name))
        await self.wait_visible(
            radio,
            get_config("ui.timeouts.button_visible", 60000),
            f'The radio button for "{label_name}" NOT found',
        )
        await radio.click()
        logger.info(f'The radio button for "{label_name}" selected')

    @allure.step('Select Date "{date}" for field "{field_label}"')
    async def select_date(self, field_label: str, date: str) -> None:
        """Type `date` into the date input labelled `field_label` and confirm with Enter."""
        date_input = self.page.locator(CommonLocators.date_picker_locator(field_label))
        await self.wait_visible(
            date_input,
            get_config("ui.timeouts.date_visible", 5000),
            f'Date input field "{field_label}" not visible',
        )
        await date_input.click()
        await date_input.fill(date)
        await date_input.press("Enter")
        logger.info(f'Date "{date}" entered in field "{field_label}"')
