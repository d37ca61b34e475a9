from .allure_utils import attach_json, attach_table_log, attach_text, format_table_log

__all__ = [
    "attach_json",
    "attach_table_log",
    "attach_text",
    "format_table_log",
]
