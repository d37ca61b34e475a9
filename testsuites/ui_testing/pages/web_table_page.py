"""
================================================================================
Web Table Page Object (Async / Playwright)
================================================================================

Page object for screens built around a data table with per-row action
icons (edit/delete) and, optionally, pagination.

Two lookup styles are offered:
  - Fuzzy, polling lookups through `WebTableHelper` (row text matched
    partially, header matched partially)
  - Direct XPath lookups (`get_table_cell_value`) where the row is identified
    by the exact text of one of its cells

================================================================================
"""

from __future__ import annotations

import random
import re
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Page

from ui_toolkit.common import get_config

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.web_table_helper import (
    ColumnNotFoundError,
    TableLookupError,
    WebTableHelper,
)
from testsuites.ui_testing.locators.web_table_page_locators import WebTablePageLocators


class WebTablePage(PageBase):
    """Web table page object (async)."""

    URL_PATH = "/webtables"

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)
        self.table = WebTableHelper(page)

    @allure.step('Click On "{icon_type}" icon in column "{column_name}" for {row_item} table row item')
    async def click_on_table_row_action_icon(self, row_item: str, column_name: str, icon_type: str) -> None:
        """
        Usage:
            await web_table_page.click_on_table_row_action_icon("Cierra", "Action", "Delete")
        """
        await self.table.click_cell_action(row_item, column_name, icon_type)
        logger.info(f'The "{icon_type}" icon for "{row_item}" clicked')

    @allure.step("Click On Icon Edit Button for {row_item} table row item")
    async def click_on_table_row_edit_icon(self, row_item: str) -> None:
        """
        Usage:
            await web_table_page.click_on_table_row_edit_icon("Cierra")
        """
        edit_icon = self.page.locator(WebTablePageLocators.web_table_row_edit_locator(row_item))
        await self.wait_visible(
            edit_icon,
            get_config("ui.timeouts.button_visible", 60000),
            f'The icon edit button for "{row_item}" NOT found',
        )
        await edit_icon.click()
        logger.info(f'The icon edit button for "{row_item}" clicked')

    @allure.step('Verify Expected Cell Value - Row: "{row_name}", Column: "{column_name}", Expected: "{expected_value}"')
    async def verify_table_cell_value(self, row_name: str, column_name: str, expected_value: str) -> None:
        actual_value = await self.table.get_cell_value(row_name, column_name)
        logger.info(f'Actual value retrieved from table: "{actual_value}"')
        assert actual_value == expected_value, (
            f"Actual and Expected NOT matched - Row: \"{row_name}\", Column: \"{column_name}\", "
            f"Expected: \"{expected_value}\", Actual: \"{actual_value}\""
        )

    async def get_table_column_index_by_name(self, column_name: str) -> int:
        """
        Get the column index (1-based) of a table column by its name.

        Header text must equal `column_name`, ignoring case and surrounding
        whitespace.

        Example:
            >>> await web_table_page.get_table_column_index_by_name("Email")
            4

        Raises:
            ColumnNotFoundError: No header has that name
        """
        headers = self.page.locator(WebTablePageLocators.web_table_column_header_locator())
        count = await headers.count()

        for i in range(count):
            header_text = (await headers.nth(i).inner_text()).strip()
            if header_text.lower() == column_name.strip().lower():
                return i + 1

        raise ColumnNotFoundError(f'Column with name "{column_name}" not found.')

    @allure.step('Get table cell value - Row: "{row_name}", Column: "{column_name}"')
    async def get_table_cell_value(self, row_name: str, column_name: str) -> str:
        """
        Returns the cell value from the web table by matching the row text and column name.

        The row is the first one having a cell whose text equals `row_name`.

        Example:
            >>> await web_table_page.get_table_cell_value("Cierra", "Email")
            'cierra@example.com'
        """
        column_index = await self.get_table_column_index_by_name(column_name)

        cell = self.page.locator(WebTablePageLocators.web_table_cell_locator(row_name, column_index))
        logger.debug(f'Constructed cell locator for Row "{row_name}": {cell}')

        await self.wait_visible(
            cell,
            get_config("ui.timeouts.button_visible", 60000),
            f'The table cell for Row: "{row_name}" Column: {column_name} NOT found',
        )
        return (await cell.inner_text()).strip()

    @allure.step("Get a random row name from the web table")
    async def get_random_row_name(self) -> str:
        """
        Retrieves the first-cell text of a random data row.

        Raises:
            TableLookupError: The table has no data rows with a first-cell text
        """
        first_cells = self.page.locator(WebTablePageLocators.web_table_row_first_name_locator())
        await self.wait_visible(
            first_cells.first,
            get_config("ui.timeouts.rows_visible", 5000),
            "No rows found in the table. Ensure the table is loaded and visible",
            error_cls=TableLookupError,
        )

        rows = self.page.get_by_role("row")
        count = await rows.count()
        row_names: List[str] = []

        # Row 0 is the header row
        for i in range(1, count):
            cells = rows.nth(i).get_by_role("cell")
            if await cells.count() == 0:
                continue
            row_first_name = (await cells.nth(0).inner_text()).strip()
            if row_first_name:
                row_names.append(row_first_name)

        if not row_names:
            raise TableLookupError("No valid row names extracted from the table cells.")

        random_row_name = random.choice(row_names)
        logger.info(f"Available Table Rows: {row_names}")
        logger.info(f'Randomly Selected Row: "{random_row_name}"')
        return random_row_name

    async def get_cell_by_row_and_column(self, row_text: str, column_name: str) -> Optional[str]:
        """
        Text of the cell in the first row whose accessible name contains
        `row_text` (case-insensitive), in the column whose header is exactly
        `column_name`.

        Raises:
            ColumnNotFoundError: No header is named `column_name`
            TableLookupError: No data row matches `row_text`, or the row has
                no cell in that column
        """
        header_texts = [
            h.strip() for h in await self.page.get_by_role("columnheader").all_text_contents()
        ]
        logger.debug(f"Column Headers: {header_texts}")
        if column_name not in header_texts:
            raise ColumnNotFoundError(f'Column with name "{column_name}" not found.')
        col_index = header_texts.index(column_name)
        logger.debug(f'Column "{column_name}" found at index: {col_index}')

        row = self.page.get_by_role(
            "row", name=re.compile(re.escape(row_text), re.IGNORECASE)
        ).filter(has=self.page.get_by_role("cell")).first
        logger.debug(f'Locating row with text "{row_text}"')
        await self.wait_visible(
            row,
            get_config("ui.timeouts.cell_visible", 5000),
            f'The row "{row_text}" NOT found',
            error_cls=TableLookupError,
        )

        cells = row.get_by_role("cell")
        if await cells.count() <= col_index:
            raise TableLookupError(
                f'The row "{row_text}" has no cell in column "{column_name}"'
            )
        return await cells.nth(col_index).text_content()
