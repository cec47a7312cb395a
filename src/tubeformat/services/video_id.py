"""
Video identifier resolution.

Turns caller-supplied strings into canonical 11-character video IDs. The
hosting service has used several URL shapes over the years:

- https://www.youtube.com/watch?v=VIDEO_ID
- https://m.youtube.com/watch?v=VIDEO_ID
- https://music.youtube.com/watch?v=VIDEO_ID
- https://gaming.youtube.com/watch?v=VIDEO_ID
- https://youtu.be/VIDEO_ID
- https://www.youtube.com/embed/VIDEO_ID
- https://www.youtube.com/v/VIDEO_ID

Unknown hosts are rejected rather than searched for something ID-shaped.
"""

from __future__ import annotations

import logging
import re
from typing import Final
from urllib.parse import parse_qs, urlsplit

from tubeformat.exceptions import (
    InvalidIdentifierShapeError,
    NoIdentifierFoundError,
    NotSupportedDomainError,
)
from tubeformat.models.result import Err, Ok, Result
from tubeformat.models.youtube_types import (
    VIDEO_ID_LENGTH,
    VIDEO_ID_PATTERN,
    VideoId,
    is_video_id,
)

logger = logging.getLogger(__name__)

WATCH_URL: Final[str] = "https://www.youtube.com/watch?v="

VALID_QUERY_DOMAINS: Final[frozenset[str]] = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "gaming.youtube.com",
    }
)

# Links whose last path segment is the video ID.
VALID_PATH_DOMAINS_RE: Final[re.Pattern[str]] = re.compile(
    r"^https?://(youtu\.be/|(www\.)?youtube\.com/(embed|v)/)"
)


def validate_id(video_id: str) -> bool:
    """Return True if ``video_id`` satisfies the video ID format."""
    return is_video_id(video_id)


def get_url_video_id(link: str) -> Result[VideoId]:
    """
    Extract the video ID from a link.

    The ``v`` query parameter wins. Without it, path-style links
    (short links, ``/embed/``, ``/v/``) yield their last path segment.
    Any other link with a host outside ``VALID_QUERY_DOMAINS`` is
    rejected. The candidate is truncated to 11 characters before its
    shape is checked.

    Parameters
    ----------
    link : str
        URL to parse.

    Returns
    -------
    Result[VideoId]
        ``Ok`` with the ID, or ``Err`` with ``NotSupportedDomainError``,
        ``NoIdentifierFoundError`` or ``InvalidIdentifierShapeError``.
    """
    try:
        parsed = urlsplit(link)
    except ValueError:
        logger.debug("Could not parse link %r", link)
        return Err(NoIdentifierFoundError(link))

    candidate = parse_qs(parsed.query).get("v", [None])[0]

    if not candidate and VALID_PATH_DOMAINS_RE.match(link):
        candidate = parsed.path.split("/")[-1]
    elif parsed.hostname and parsed.hostname not in VALID_QUERY_DOMAINS:
        logger.debug("Rejected link on unsupported host %s", parsed.hostname)
        return Err(NotSupportedDomainError(parsed.hostname))

    if not candidate:
        return Err(NoIdentifierFoundError(link))

    candidate = candidate[:VIDEO_ID_LENGTH]
    if not validate_id(candidate):
        return Err(InvalidIdentifierShapeError(candidate, VIDEO_ID_PATTERN))

    return Ok(candidate)


def get_video_id(value: str) -> Result[VideoId]:
    """
    Resolve a bare video ID or a link to a video ID.

    Parameters
    ----------
    value : str
        Either an 11-character ID, returned unchanged, or a URL.

    Returns
    -------
    Result[VideoId]
        See ``get_url_video_id``.
    """
    if validate_id(value):
        return Ok(value)
    return get_url_video_id(value)


def validate_url(link: str) -> bool:
    """Return True if a video ID can be extracted from ``link``."""
    return isinstance(get_url_video_id(link), Ok)


def watch_url(video_id: VideoId) -> str:
    """Build the watch page URL for a validated video ID."""
    return WATCH_URL + video_id
