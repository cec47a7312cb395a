"""
Custom validated types for YouTube identifiers.

Provides a strongly-typed wrapper for video IDs that enforces format and
length constraints at the type level.
"""

from __future__ import annotations

import re
from typing import Annotated, Final

from pydantic import BeforeValidator, Field

VIDEO_ID_PATTERN: Final[str] = r"^[a-zA-Z0-9_-]{11}$"
VIDEO_ID_RE: Final[re.Pattern[str]] = re.compile(VIDEO_ID_PATTERN)
VIDEO_ID_LENGTH: Final[int] = 11


def is_video_id(v: object) -> bool:
    """Return True if ``v`` is exactly 11 characters of ``[A-Za-z0-9_-]``."""
    return isinstance(v, str) and VIDEO_ID_RE.fullmatch(v) is not None


def validate_video_id(v: str) -> str:
    """Validate YouTube Video ID format."""
    if not isinstance(v, str):
        raise TypeError("VideoId must be a string")

    # Check length
    if len(v) != VIDEO_ID_LENGTH:
        raise ValueError(
            f"VideoId must be exactly 11 characters long, got {len(v)}: {v}"
        )

    # Check valid characters (alphanumeric, hyphens, underscores)
    if not is_video_id(v):
        raise ValueError(f"VideoId contains invalid characters: {v}")

    return v


VideoId = Annotated[
    str,
    BeforeValidator(validate_video_id),
    Field(description="YouTube Video ID (11 chars, alphanumeric)"),
]
