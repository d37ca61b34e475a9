"""
================================================================================
Common Locators
================================================================================

Relative XPath builders for generic form controls, keyed by the human-readable
text a tester sees next to the control (label, button caption).

All builders quote user-supplied text with `xpath_literal`, so names that
contain quotes or apostrophes ("Driver's licence") are safe.

================================================================================
"""

from __future__ import annotations


def xpath_literal(value: str) -> str:
    """
    Return `value` as an XPath 1.0 string literal.

    XPath 1.0 has no escape sequences, so a value containing both quote
    characters is split into pieces and joined with concat().

    >>> xpath_literal("Email")
    "'Email'"
    >>> xpath_literal("Driver's licence")
    '"Driver\\'s licence"'
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i < len(parts) - 1:
            pieces.append('"\'"')
    return f"concat({', '.join(pieces)})"


class CommonLocators:
    """XPath templates shared by every page."""

    @staticmethod
    def button_locator(button_name: str) -> str:
        name = xpath_literal(button_name)
        return (
            f"xpath=//button[normalize-space()={name}]"
            f" | //*[@role='button' and normalize-space()={name}]"
            f" | //input[(@type='button' or @type='submit' or @type='reset') and @value={name}]"
        )

    @staticmethod
    def input_field_locator(field_name: str) -> str:
        # First text control after the label (or label-like element) carrying the name
        name = xpath_literal(field_name)
        return (
            f"xpath=(//*[self::label or self::span or self::div][normalize-space()={name}]"
            f"/following::*[self::input or self::textarea][1])[1]"
        )

    @staticmethod
    def check_box_locator(label_name: str) -> str:
        name = xpath_literal(label_name)
        return (
            f"xpath=(//label[normalize-space()={name}]"
            f"[@for=//input[@type='checkbox']/@id or .//input[@type='checkbox']])[1]"
        )

    @staticmethod
    def radio_button_locator(label_name: str) -> str:
        name = xpath_literal(label_name)
        return (
            f"xpath=(//label[normalize-space()={name}]"
            f"[@for=//input[@type='radio']/@id or .//input[@type='radio']])[1]"
        )

    @staticmethod
    def date_picker_locator(field_label: str) -> str:
        name = xpath_literal(field_label)
        return (
            f"xpath=(//*[self::label or self::span or self::div][normalize-space()={name}]"
            f"/following::input[1])[1]"
        )


__all__ = [
    "CommonLocators",
    "xpath_literal",
]
