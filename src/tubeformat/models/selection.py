"""
Selection request models.

A ``SelectionRequest`` bundles the options a caller passes when asking for
"the best stream": an explicit format, a filter and a quality descriptor.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tubeformat.exceptions import InvalidFilterSpecificationError
from tubeformat.models.format import VideoFormat


class QualityTier(str, Enum):
    """Named quality tiers understood by the format selector."""

    HIGHEST = "highest"
    LOWEST = "lowest"
    HIGHEST_AUDIO = "highestaudio"
    LOWEST_AUDIO = "lowestaudio"
    HIGHEST_VIDEO = "highestvideo"
    LOWEST_VIDEO = "lowestvideo"


class FormatFilter(str, Enum):
    """Named format filters."""

    AUDIO_AND_VIDEO = "audioandvideo"
    VIDEO = "video"
    VIDEO_ONLY = "videoonly"
    AUDIO = "audio"
    AUDIO_ONLY = "audioonly"


FormatPredicate = Callable[[VideoFormat], bool]
FilterSpec = Union[FormatFilter, FormatPredicate]
QualitySpec = Union[QualityTier, int, str, list[Union[int, str]]]


class SelectionRequest(BaseModel):
    """
    Caller options for choosing one format.

    Attributes
    ----------
    format : Optional[VideoFormat]
        Explicit format; when set it is returned as-is and every other
        option is ignored.
    filter : Optional[FilterSpec]
        A ``FormatFilter`` name or a predicate over one ``VideoFormat``.
    quality : QualitySpec
        A ``QualityTier``, a literal itag, or an ordered list of itags
        tried in turn.
    """

    model_config = ConfigDict(frozen=True)

    format: Optional[VideoFormat] = None
    filter: Optional[FilterSpec] = None
    quality: QualitySpec = Field(default=QualityTier.HIGHEST)

    @field_validator("filter", mode="before")
    @classmethod
    def validate_filter(cls, v: Any) -> Any:
        """
        Resolve filter names, rejecting anything that is neither a known
        name nor a callable.

        Raises
        ------
        InvalidFilterSpecificationError
            If ``v`` is not a recognized filter. Being a ``TypeError``, it
            propagates out of model construction unwrapped.
        """
        if v is None or callable(v) or isinstance(v, FormatFilter):
            return v
        try:
            return FormatFilter(v)
        except ValueError:
            raise InvalidFilterSpecificationError(v) from None
