"""
Small string helpers shared by the parsers.

Functions
---------
between
    Extract the text between two markers.
strip_html
    Reduce an HTML fragment to its text, keeping line breaks.
parse_time
    Convert a human-friendly duration to milliseconds.
change_url_parameter, remove_url_parameter
    Edit a query string parameter in place.
"""

from __future__ import annotations

import re
from typing import Final, Union

Needle = Union[str, re.Pattern[str]]

_NUMBER_FORMAT_RE: Final[re.Pattern[str]] = re.compile(r"^\d+$")
_TIME_FORMAT_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?:(\d+):)?(\d{1,2}):)?(\d{1,2})(?:\.(\d{3}))?$"
)
_TIME_UNIT_RE: Final[re.Pattern[str]] = re.compile(r"(-?\d+)(ms|s|m|h)")

TIME_UNITS_MS: Final[dict[str, int]] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
}


def _find(haystack: str, needle: Needle) -> tuple[int, int]:
    """Return (start, end) of the first occurrence of ``needle``, or (-1, -1)."""
    if isinstance(needle, re.Pattern):
        match = needle.search(haystack)
        if match is None:
            return -1, -1
        return match.start(), match.end()
    pos = haystack.find(needle)
    if pos == -1:
        return -1, -1
    return pos, pos + len(needle)


def between(haystack: str, left: Needle, right: Needle) -> str:
    """
    Extract the string between ``left`` and the next ``right``.

    Parameters
    ----------
    haystack : str
        Text to search.
    left, right : str | re.Pattern[str]
        Markers; either may be a literal or a compiled regex.

    Returns
    -------
    str
        The text between the markers, or an empty string when either
        marker is missing.

    Examples
    --------
    >>> between('video/mp4; codecs="avc1.4d401e"', 'codecs="', '"')
    'avc1.4d401e'
    """
    _, end = _find(haystack, left)
    if end == -1:
        return ""
    haystack = haystack[end:]
    pos, _ = _find(haystack, right)
    if pos == -1:
        return ""
    return haystack[:pos]


def strip_html(html: str) -> str:
    """Strip tags from ``html``, turning ``<br>`` and paragraph breaks into newlines."""
    text = re.sub(r"[\n\r]", " ", html)
    text = re.sub(r"\s*<\s*br\s*/?\s*>\s*", "\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<\s*/\s*p\s*>\s*<\s*p[^>]*>", "\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<.*?>", "", text)
    return text.strip()


def parse_time(time: Union[int, float, str]) -> int:
    """
    Convert a human-friendly time to milliseconds.

    Supports plain millisecond counts (``"1500"``), clock notation
    ``[[hh:]mm:]ss[.mmm]`` and unit sums such as ``"1m30s"`` or
    ``"2h15ms"``.

    Parameters
    ----------
    time : int | float | str
        Numbers are returned as-is (truncated to int).

    Returns
    -------
    int
        Milliseconds; 0 when nothing recognizable is found.
    """
    if isinstance(time, (int, float)):
        return int(time)
    if _NUMBER_FORMAT_RE.match(time):
        return int(time)

    clock = _TIME_FORMAT_RE.match(time)
    if clock:
        hours, minutes, seconds, millis = clock.groups()
        return (
            int(hours or 0) * TIME_UNITS_MS["h"]
            + int(minutes or 0) * TIME_UNITS_MS["m"]
            + int(seconds) * TIME_UNITS_MS["s"]
            + int(millis or 0)
        )

    return sum(
        int(amount) * TIME_UNITS_MS[unit] for amount, unit in _TIME_UNIT_RE.findall(time)
    )


def change_url_parameter(uri: str, key: str, value: str) -> str:
    """Set query parameter ``key`` to ``value``, appending it if absent."""
    pattern = re.compile(r"([?&])" + re.escape(key) + r"=.*?(&|$)", re.IGNORECASE)
    if pattern.search(uri):
        return pattern.sub(lambda m: f"{m.group(1)}{key}={value}{m.group(2)}", uri, count=1)
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{key}={value}"


def remove_url_parameter(uri: str, key: str) -> str:
    """Remove every occurrence of query parameter ``key`` from ``uri``."""
    if "?" not in uri:
        return uri
    base, query = uri.split("?", 1)
    if not query:
        return base
    params = [param for param in query.split("&") if param.split("=")[0] != key]
    return f"{base}?{'&'.join(params)}"
