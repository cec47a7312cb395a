"""Utility modules for tubeformat."""

from tubeformat.utils.text import (
    between,
    change_url_parameter,
    parse_time,
    remove_url_parameter,
    strip_html,
)

__all__ = [
    "between",
    "change_url_parameter",
    "parse_time",
    "remove_url_parameter",
    "strip_html",
]
