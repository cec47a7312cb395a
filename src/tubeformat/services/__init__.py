"""
Services for tubeformat.

Video identifier resolution, page extras scraping and the format
pipeline coordinator.
"""

from __future__ import annotations

from .format_service import FormatService, raw_formats
from .page_extras import (
    get_meta_item,
    get_published,
    get_related_videos,
    get_video_description,
    get_views_count,
)
from .video_id import (
    get_url_video_id,
    get_video_id,
    validate_id,
    validate_url,
    watch_url,
)

__all__ = [
    "FormatService",
    "raw_formats",
    "get_meta_item",
    "get_published",
    "get_related_videos",
    "get_video_description",
    "get_views_count",
    "get_url_video_id",
    "get_video_id",
    "validate_id",
    "validate_url",
    "watch_url",
]
