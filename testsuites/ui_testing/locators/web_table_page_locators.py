"""
Selectors for the web table page.

Cell and row selectors match the row by the text of any of its cells
(trimmed, case-sensitive), the same way a tester reads the table.
"""

from __future__ import annotations

from .common_locators import xpath_literal


class WebTablePageLocators:

    @staticmethod
    def web_table_rows_locator() -> str:
        # Includes the header row; index 0 is the header
        return "xpath=//table//tr"

    @staticmethod
    def web_table_row_first_name_locator() -> str:
        return "xpath=//table//tbody/tr/td[1]"

    @staticmethod
    def web_table_column_header_locator() -> str:
        return "xpath=//table//thead//th"

    @staticmethod
    def web_table_row_edit_locator(row_item: str) -> str:
        row = xpath_literal(row_item)
        return (
            f"xpath=(//table//tr[td[normalize-space()={row}]]"
            f"//*[@title='Edit' or @aria-label='Edit'])[1]"
        )

    @staticmethod
    def web_table_cell_locator(row_name: str, column_index: int) -> str:
        """Cell in the first row having a cell equal to `row_name`; `column_index` is 1-based."""
        row = xpath_literal(row_name)
        return f"xpath=(//table//tr[td[normalize-space()={row}]])[1]/td[{column_index}]"


__all__ = [
    "WebTablePageLocators",
]
