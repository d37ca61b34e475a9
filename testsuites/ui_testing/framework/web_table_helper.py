"""
================================================================================
Web Table Helper
================================================================================

Resolves table rows, columns and cells from the text a tester reads on screen.

    row    -> first `role=row` element holding data cells whose inner text
              matches the row text (partial by default); the returned
              locator is pinned to that row's cell texts
    column -> 0-based index of the first header matching the column name
    cell   -> `index`-th `role=cell` of the row

Rows are looked up by polling, because tables are usually rendered after the
data request completes. Everything is recomputed on every call; nothing is
cached between calls.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import List, Literal, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ui_toolkit.common import get_config
from ui_toolkit.report_tools import attach_json, attach_table_log

from .smart_locator import ElementNotFoundError

MatchMode = Literal["exact", "partial"]


class TableLookupError(ElementNotFoundError):
    """Raised when a row, column or cell cannot be resolved."""
    pass


class RowNotFoundError(TableLookupError):
    pass


class ColumnNotFoundError(TableLookupError):
    pass


def normalize(text: str) -> str:
    return text.lower().strip()


def match(actual: str, expected: str, mode: MatchMode = "partial") -> bool:
    """
    Compare normalized texts.

    `exact` requires equality; `partial` requires `expected` to be
    contained in `actual`.
    """
    if mode not in ("exact", "partial"):
        raise ValueError(f"Unknown match mode: {mode}")
    a = normalize(actual)
    b = normalize(expected)
    return a == b if mode == "exact" else b in a


class WebTableHelper:
    """
    Row/column/cell resolution for HTML tables.

    Usage:
        >>> table = WebTableHelper(page)
        >>> await table.get_cell_value("Cierra", "Email")
        'cierra@example.com'
        >>> await table.click_cell_action("Cierra", "Action", "Edit")
    """

    def __init__(self, page: Page):
        self.page = page

    # =========================================================================
    # Settings (read on every call so runtime overrides apply)
    # =========================================================================

    @property
    def header_selector(self) -> str:
        return get_config("ui.table.header_selector", "table thead th")

    @property
    def row_timeout(self) -> int:
        return get_config("ui.timeouts.row_lookup", 5000)

    @property
    def poll_interval(self) -> int:
        return get_config("ui.timeouts.row_poll_interval", 300)

    @property
    def cell_timeout(self) -> int:
        return get_config("ui.timeouts.cell_visible", 5000)

    # =========================================================================
    # Columns
    # =========================================================================

    @allure.step("Get table headers")
    async def get_headers(self) -> List[str]:
        headers = await self.page.locator(self.header_selector).all_inner_texts()
        headers = [h.strip() for h in headers]
        logger.debug(f"Table headers: {headers}")
        return headers

    @allure.step('Find column index for "{column_name}" (mode: {mode})')
    async def get_column_index(self, column_name: str, mode: MatchMode = "partial") -> int:
        """
        Return the 0-based index of the first header matching `column_name`.

        Raises:
            ColumnNotFoundError: No header matches; the message lists the headers
        """
        headers = await self.get_headers()
        index = next(
            (i for i, header in enumerate(headers) if match(header, column_name, mode)),
            -1,
        )
        if index == -1:
            raise ColumnNotFoundError(
                f'Column "{column_name}" not found.\nAvailable: {", ".join(headers)}'
            )

        logger.info(f'Found column "{column_name}" at index {index} (mode: {mode})')
        return index

    # =========================================================================
    # Rows
    # =========================================================================

    async def _find_row_once(self, row_text: str, mode: MatchMode) -> Optional[Locator]:
        rows = self.page.get_by_role("row")
        count = await rows.count()
        for i in range(count):
            row = rows.nth(i)
            text = (await row.inner_text()).strip()
            if not match(text, row_text, mode):
                continue
            # Header rows hold columnheader cells only
            cell_texts = [t.strip() for t in await row.get_by_role("cell").all_inner_texts()]
            if not cell_texts:
                continue
            return self._row_by_content(cell_texts)
        return None

    def _row_by_content(self, cell_texts: List[str]) -> Locator:
        # Anchored on cell contents, not position, so rows added or removed
        # above it later do not shift the locator onto another row
        row = self.page.get_by_role("row").filter(has=self.page.get_by_role("cell"))
        for text in cell_texts:
            if text:
                row = row.filter(has_text=text)
        return row.first

    async def _poll_for_row(self, row_text: str, mode: MatchMode, timeout: int) -> Optional[Locator]:
        # At least one scan, even with a zero timeout
        deadline = time.monotonic() + timeout / 1000
        while True:
            row = await self._find_row_once(row_text, mode)
            if row is not None:
                return row
            if time.monotonic() >= deadline:
                return None
            await self.page.wait_for_timeout(self.poll_interval)

    async def _available_rows(self) -> List[str]:
        rows = await self.page.get_by_role("row").all_inner_texts()
        return [r.strip() for r in rows]

    @allure.step('Find row with text "{row_text}"')
    async def get_row(
        self,
        row_text: str,
        timeout: Optional[int] = None,
        mode: MatchMode = "partial",
    ) -> Locator:
        """
        Return the first data row whose text matches `row_text`.

        Polls every `ui.timeouts.row_poll_interval` ms until the row shows up
        or `timeout` ms (default `ui.timeouts.row_lookup`) have elapsed.

        Raises:
            RowNotFoundError: Not found in time; the message lists the rows
        """
        timeout = self.row_timeout if timeout is None else timeout
        row = await self._poll_for_row(row_text, mode, timeout)
        if row is not None:
            return row

        available = await self._available_rows()
        logger.error(f"Available rows: {available}")
        attach_json(available, name="available-rows")
        raise RowNotFoundError(
            f'Row "{row_text}" not found after {timeout}ms\nAvailable:\n' + "\n".join(available)
        )

    @allure.step('Find row with text "{row_text}" across pages')
    async def find_row_across_pages(
        self,
        row_text: str,
        next_button: Optional[str] = None,
        max_pages: Optional[int] = None,
        timeout: Optional[int] = None,
        mode: MatchMode = "partial",
    ) -> Locator:
        """
        Look for a row on the current page, then on the following ones.

        Pages are advanced with the button named `next_button`
        (default `ui.table.next_page_button`). The search stops when the row
        is found, the button is missing or disabled, or `max_pages` pages
        (default `ui.table.max_pages`) have been inspected.

        Args:
            timeout: Per-page polling window in ms (default `ui.timeouts.page_settle`)

        Raises:
            RowNotFoundError: Row is on none of the inspected pages
        """
        next_button = next_button or get_config("ui.table.next_page_button", "Next")
        max_pages = get_config("ui.table.max_pages", 20) if max_pages is None else max_pages
        if max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")
        timeout = get_config("ui.timeouts.page_settle", 1000) if timeout is None else timeout

        pages_seen = 0
        while True:
            pages_seen += 1
            row = await self._poll_for_row(row_text, mode, timeout)
            if row is not None:
                logger.info(f'Row "{row_text}" found on page {pages_seen}')
                return row
            if pages_seen >= max_pages:
                break

            button = self.page.get_by_role("button", name=next_button).first
            if await button.count() == 0 or await button.is_disabled():
                break
            await button.click()
            logger.debug(f'Row "{row_text}" not on page {pages_seen}, moved to next page')

        raise RowNotFoundError(
            f'Row "{row_text}" not found on {pages_seen} page(s) '
            f'(next page button: "{next_button}")'
        )

    # =========================================================================
    # Cells
    # =========================================================================

    async def get_cell(
        self,
        row_text: str,
        column_name: str,
        timeout: Optional[int] = None,
        match_mode: MatchMode = "partial",
        column_match_mode: MatchMode = "partial",
    ) -> Locator:
        """Locator of the cell at [row_text -> column_name]."""
        row = await self.get_row(row_text, timeout=timeout, mode=match_mode)
        col_index = await self.get_column_index(column_name, column_match_mode)
        return row.get_by_role("cell").nth(col_index)

    @allure.step("Get cell value at [{row_text} -> {column_name}]")
    async def get_cell_value(
        self,
        row_text: str,
        column_name: str,
        timeout: Optional[int] = None,
        match_mode: MatchMode = "partial",
        column_match_mode: MatchMode = "partial",
    ) -> Optional[str]:
        """
        Read the trimmed text of a cell.

        Returns:
            Cell text, or None when the cell is empty
        """
        cell = await self.get_cell(
            row_text,
            column_name,
            timeout=timeout,
            match_mode=match_mode,
            column_match_mode=column_match_mode,
        )
        try:
            await cell.wait_for(state="visible", timeout=self.cell_timeout)
        except PlaywrightTimeoutError as e:
            raise TableLookupError(
                f'Cell [{row_text} -> {column_name}] is NOT visible: ->> {e}'
            ) from e

        value = (await cell.text_content() or "").strip() or None

        logger.info(f"The cell [{row_text}] -> in column [{column_name}] = {value}")
        attach_table_log(row_text, column_name, value)
        return value

    @allure.step('Click "{button_name}" in [{row_text} -> {column_name}]')
    async def click_cell_action(self, row_text: str, column_name: str, button_name: str) -> None:
        """Click the element titled `button_name` inside the cell."""
        cell = await self.get_cell(row_text, column_name)
        button = cell.get_by_title(button_name, exact=True)
        try:
            await button.wait_for(state="visible", timeout=self.cell_timeout)
        except PlaywrightTimeoutError as e:
            raise TableLookupError(
                f'"{button_name}" in [{row_text} -> {column_name}] is NOT visible: ->> {e}'
            ) from e
        await button.click()
        logger.info(f'Clicked "{button_name}" in [{row_text} -> {column_name} column]')

    @allure.step('Get all values from column "{column_name}"')
    async def get_column_values(self, column_name: str) -> List[str]:
        """Non-empty trimmed values of a column, one per data row, in row order."""
        col_index = await self.get_column_index(column_name, "partial")
        rows = self.page.get_by_role("row")
        count = await rows.count()
        values: List[str] = []

        # Row 0 is the header row
        for i in range(1, count):
            cells = rows.nth(i).get_by_role("cell")
            if await cells.count() <= col_index:
                continue
            text = (await cells.nth(col_index).text_content() or "").strip()
            if text:
                values.append(text)

        logger.info(f'Column "{column_name}" values: {values}')
        return values


__all__ = [
    "MatchMode",
    "WebTableHelper",
    "TableLookupError",
    "RowNotFoundError",
    "ColumnNotFoundError",
    "normalize",
    "match",
]
