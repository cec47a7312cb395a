"""
Extraction of JSON literals embedded in page source.

Player pages assign their data to script variables, e.g.::

    var ytInitialPlayerResponse = {...};var meta = ...

A non-greedy regex cannot find the end of such a literal because objects
nest arbitrarily, so the literal is cut by bracket counting instead.

Functions
---------
cut_after_json
    Return the minimal balanced ``[...]`` or ``{...}`` prefix of a string.
find_embedded_json
    Locate a variable assignment in page source and decode its literal.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from tubeformat.exceptions import (
    MalformedLiteralError,
    NoLiteralFoundError,
    UnbalancedLiteralError,
    UnsupportedInputKindError,
)
from tubeformat.models.result import Err, Ok, Result

logger = logging.getLogger(__name__)

PLAYER_RESPONSE_VARIABLE = "ytInitialPlayerResponse"
INITIAL_DATA_VARIABLE = "ytInitialData"

_BRACKET_PAIRS: dict[str, str] = {"[": "]", "{": "}"}


def _assignment_pattern(variable_name: str) -> re.Pattern[str]:
    # Handles: var NAME = {...};
    #          NAME = {...};
    #          window["NAME"] = {...};
    return re.compile(
        r'(?:var\s+|window\["|)' + re.escape(variable_name) + r'(?:"\])?\s*=\s*'
    )


def cut_after_json(mixed_json: str) -> Result[str]:
    """
    Cut the balanced JSON literal at the start of ``mixed_json``.

    Bracket characters inside double-quoted strings are ignored. A quote
    preceded by a backslash does not open or close a string.

    Parameters
    ----------
    mixed_json : str
        Text whose first character is ``[`` or ``{``, usually followed by
        unrelated script content.

    Returns
    -------
    Result[str]
        ``Ok`` with the shortest balanced prefix, or ``Err`` with
        ``UnsupportedInputKindError`` (bad first character) or
        ``UnbalancedLiteralError`` (input ends before the literal closes).
    """
    first = mixed_json[:1]
    close = _BRACKET_PAIRS.get(first)
    if close is None:
        return Err(UnsupportedInputKindError(first))

    in_string = False
    depth = 0

    for i, ch in enumerate(mixed_json):
        if ch == '"' and (i == 0 or mixed_json[i - 1] != "\\"):
            in_string = not in_string
            continue
        if in_string:
            continue

        if ch == first:
            depth += 1
        elif ch == close:
            depth -= 1

        if depth == 0:
            return Ok(mixed_json[: i + 1])

    return Err(UnbalancedLiteralError(depth))


def find_embedded_json(html: str, variable_name: str = PLAYER_RESPONSE_VARIABLE) -> Result[Any]:
    """
    Find and decode the literal assigned to ``variable_name`` in ``html``.

    Parameters
    ----------
    html : str
        Raw page source.
    variable_name : str, optional
        Script variable holding the literal (default: ytInitialPlayerResponse).

    Returns
    -------
    Result[Any]
        ``Ok`` with the decoded JSON value, or ``Err`` with
        ``NoLiteralFoundError``, an extraction error from
        ``cut_after_json``, or ``MalformedLiteralError``.
    """
    match = _assignment_pattern(variable_name).search(html)
    if match is None:
        logger.debug("No assignment to %s found in page", variable_name)
        return Err(NoLiteralFoundError(variable_name))

    cut = cut_after_json(html[match.end() :])
    if isinstance(cut, Err):
        logger.debug("Could not cut %s literal: %s", variable_name, cut.error.message)
        return cut

    try:
        return Ok(json.loads(cut.value))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse %s JSON: %s", variable_name, e)
        return Err(MalformedLiteralError(variable_name, str(e)))
