"""
Supplementary metadata scraped from watch page HTML.

These helpers read the markup around the player: ``itemprop`` meta tags,
the description block, the view counter and the related-videos blob.
Newer pages carry the same data in ``ytInitialPlayerResponse``; the
description and view count fall back to it when the markup is absent.

Every helper is total: missing data yields an empty value, never an
exception.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qsl

from bs4 import BeautifulSoup

from tubeformat.models.result import Ok
from tubeformat.parsers.json_extractor import find_embedded_json
from tubeformat.utils.text import between

logger = logging.getLogger(__name__)

_RELATED_ARGS_LEFT = "'RELATED_PLAYER_ARGS': {\"rvs\":"
_RELATED_ARGS_RIGHT = "},"


def _video_details(html: str) -> dict[str, Any]:
    result = find_embedded_json(html)
    if isinstance(result, Ok) and isinstance(result.value, dict):
        details = result.value.get("videoDetails")
        if isinstance(details, dict):
            return details
    return {}


def get_meta_item(html: str, name: str) -> str:
    """
    Return the ``content`` of ``<meta itemprop="name">``.

    Parameters
    ----------
    html : str
        Raw HTML of the watch page.
    name : str
        The ``itemprop`` value, e.g. ``"channelId"`` or ``"datePublished"``.

    Returns
    -------
    str
        The attribute value, or an empty string when absent.
    """
    soup = BeautifulSoup(html, "html.parser")
    meta = soup.find("meta", attrs={"itemprop": name})
    if meta and meta.get("content"):
        return str(meta["content"])
    return ""


def get_video_description(html: str) -> str:
    """Full video description with line breaks preserved."""
    soup = BeautifulSoup(html, "html.parser")
    eow_desc = soup.find(id="eow-description")
    if eow_desc:
        for br in eow_desc.find_all("br"):
            br.replace_with("\n")
        description = eow_desc.get_text().strip()
        # Clean up excessive consecutive newlines
        return re.sub(r"\n{3,}", "\n\n", description)

    return str(_video_details(html).get("shortDescription", ""))


def get_views_count(html: str) -> int:
    """
    View count from the watch-view-count block or the player response.

    Thousands separators are dropped but a dot is kept, so the count is
    the integer part of what remains ("1.2 views" gives 1).
    """
    soup = BeautifulSoup(html, "html.parser")
    counter = soup.find("div", class_="watch-view-count")
    text = counter.get_text() if counter else str(_video_details(html).get("viewCount", ""))
    match = re.match(r"\d+", re.sub(r"[^0-9.]", "", text))
    return int(match.group()) if match else 0


def get_published(html: str) -> datetime | None:
    """
    Publication date from ``<meta itemprop="datePublished">``.

    Returns
    -------
    datetime | None
        A timezone-aware datetime (UTC when the page gives no offset), or
        None if the tag is missing or unparseable.
    """
    value = get_meta_item(html, "datePublished")
    if not value:
        return None
    try:
        published = datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Unparseable datePublished value: %s", value)
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return published


def get_related_videos(html: str) -> list[dict[str, str]]:
    """
    Related videos listed in the ``RELATED_PLAYER_ARGS`` script blob.

    The blob holds a JSON string of comma-separated query strings, one per
    video (``id=...&title=...&length_seconds=...``).

    Returns
    -------
    list[dict[str, str]]
        One dict per related video, or an empty list if the blob is
        missing or malformed.
    """
    raw = between(html, _RELATED_ARGS_LEFT, _RELATED_ARGS_RIGHT)
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return []
    if not isinstance(decoded, str):
        return []
    return [dict(parse_qsl(link)) for link in decoded.split(",") if link]
