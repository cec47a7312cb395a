"""
Parsers for embedded page data.
"""

from __future__ import annotations

from .json_extractor import (
    INITIAL_DATA_VARIABLE,
    PLAYER_RESPONSE_VARIABLE,
    cut_after_json,
    find_embedded_json,
)

__all__ = [
    "INITIAL_DATA_VARIABLE",
    "PLAYER_RESPONSE_VARIABLE",
    "cut_after_json",
    "find_embedded_json",
]
