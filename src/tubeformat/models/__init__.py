"""
Data models for tubeformat.

Provides Pydantic models for format records and selection requests, the
validated ``VideoId`` type, and the ``Ok``/``Err`` result type.
"""

from __future__ import annotations

from .format import VideoFormat
from .result import Err, Ok, Result
from .selection import (
    FilterSpec,
    FormatFilter,
    FormatPredicate,
    QualitySpec,
    QualityTier,
    SelectionRequest,
)
from .youtube_types import VideoId, is_video_id, validate_video_id

__all__ = [
    "VideoFormat",
    "Ok",
    "Err",
    "Result",
    "FilterSpec",
    "FormatFilter",
    "FormatPredicate",
    "QualitySpec",
    "QualityTier",
    "SelectionRequest",
    "VideoId",
    "is_video_id",
    "validate_video_id",
]
