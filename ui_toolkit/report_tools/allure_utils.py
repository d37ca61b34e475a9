"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by the page objects to enrich Allure reports.

When pytest runs without the allure plugin these calls are no-ops.

================================================================================
"""

import json
from typing import Any, Optional

import allure


def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def format_table_log(row_text: str, column_name: str, value: Optional[str]) -> str:
    return f"Row: {row_text}\nColumn: {column_name}\nValue: {value}"


def attach_table_log(row_text: str, column_name: str, value: Optional[str]):
    """Attach the row/column/value triple read from a web table."""
    attach_text(format_table_log(row_text, column_name, value), name="table-log")


__all__ = [
    "attach_json",
    "attach_text",
    "attach_table_log",
    "format_table_log",
]
