"""
Format models for streaming media renditions.

A ``VideoFormat`` describes one stream advertised by a player response:
its catalog identifier (``itag``), content type, bitrates, quality label
and playback URL, plus the attributes derived during enrichment.

Player responses use camelCase keys (``mimeType``, ``qualityLabel``,
``audioBitrate``); the model accepts those through Pydantic's alias
generator while exposing snake_case attributes to Python code.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of ``value``.

    Parameters
    ----------
    value : Any
        An int, a numeric string such as ``"128000"`` or a label such as
        ``"720p60"``.

    Returns
    -------
    Optional[int]
        The parsed integer, or None if ``value`` does not start with digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


class VideoFormat(BaseModel):
    """
    One renditable media stream of a video.

    Instances are immutable: ranking and selection only reorder, filter
    and choose among them.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="allow",
    )

    itag: int = Field(..., ge=0, description="Catalog key of the format")
    mime_type: Optional[str] = Field(
        default=None, description='Content type, e.g. video/mp4; codecs="avc1"'
    )
    quality_label: Optional[str] = Field(
        default=None, description="Resolution label such as 720p (video only)"
    )
    bitrate: int = Field(default=0, description="Bits per second, 0 if unknown")
    audio_bitrate: Optional[int] = Field(
        default=None, description="Audio bitrate in kbps (audio only)"
    )
    url: str = Field(default="", description="Playback URL")

    # Derived during enrichment
    container: Optional[str] = Field(default=None, description="Container subtype")
    codecs: str = Field(default="", description="Codecs parameter of mime_type")
    is_live: bool = Field(default=False, description="Live broadcast source")
    is_hls: bool = Field(default=False, description="HLS manifest delivery")
    is_dash_mpd: bool = Field(default=False, description="DASH manifest delivery")

    @field_validator("itag", mode="before")
    @classmethod
    def coerce_itag(cls, v: Any) -> Any:
        """Accept numeric strings as catalog keys."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @field_validator("bitrate", mode="before")
    @classmethod
    def coerce_bitrate(cls, v: Any) -> int:
        """Unparseable or missing bitrates count as 0."""
        return parse_leading_int(v) or 0

    @field_validator("audio_bitrate", mode="before")
    @classmethod
    def coerce_audio_bitrate(cls, v: Any) -> Optional[int]:
        """Unparseable audio bitrates count as absent."""
        if v is None:
            return None
        return parse_leading_int(v)

    @property
    def has_video(self) -> bool:
        """Whether the format carries a video track."""
        return bool(self.quality_label)

    @property
    def has_audio(self) -> bool:
        """Whether the format carries an audio track."""
        return bool(self.audio_bitrate)

    @property
    def resolution(self) -> int:
        """Leading integer of ``quality_label`` (720 for "720p60"), else 0."""
        if not self.quality_label:
            return 0
        return parse_leading_int(self.quality_label) or 0

    def describe(self) -> str:
        """Short human-readable summary used in logs and CLI output."""
        parts = [str(self.itag)]
        if self.container:
            parts.append(self.container)
        if self.quality_label:
            parts.append(self.quality_label)
        if self.audio_bitrate:
            parts.append(f"{self.audio_bitrate}kbps")
        if self.codecs:
            parts.append(f"[{self.codecs}]")
        return " ".join(parts)
