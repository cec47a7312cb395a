"""
Format filtering and selection.

``choose_format`` resolves a ``SelectionRequest`` against a list of
enriched formats. Expected misses (nothing passes the filter, the video
lacks the requested quality) come back as ``Err`` values.
``filter_formats`` raises ``InvalidFilterSpecificationError`` for a filter
that is neither a known name nor a callable, because that is a bug in the
caller rather than a property of the video.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Optional, Union

from tubeformat.exceptions import (
    InvalidFilterSpecificationError,
    NoFormatsMatchFilterError,
    NoMatchingFormatError,
)
from tubeformat.formats.ranking import (
    DEFAULT_RANKING_POLICY,
    RankingPolicy,
    audio_score,
    sort_formats,
)
from tubeformat.models.format import VideoFormat
from tubeformat.models.result import Err, Ok, Result
from tubeformat.models.selection import (
    FormatFilter,
    FormatPredicate,
    QualitySpec,
    QualityTier,
    SelectionRequest,
)

logger = logging.getLogger(__name__)

_FILTER_PREDICATES: dict[FormatFilter, FormatPredicate] = {
    FormatFilter.AUDIO_AND_VIDEO: lambda fmt: fmt.has_video and fmt.has_audio,
    FormatFilter.VIDEO: lambda fmt: fmt.has_video,
    FormatFilter.VIDEO_ONLY: lambda fmt: fmt.has_video and not fmt.has_audio,
    FormatFilter.AUDIO: lambda fmt: fmt.has_audio,
    FormatFilter.AUDIO_ONLY: lambda fmt: not fmt.has_video and fmt.has_audio,
}


def _resolve_predicate(filter_spec: Any) -> FormatPredicate:
    if isinstance(filter_spec, str):
        try:
            return _FILTER_PREDICATES[FormatFilter(filter_spec)]
        except ValueError:
            raise InvalidFilterSpecificationError(filter_spec) from None
    if callable(filter_spec):
        return filter_spec
    raise InvalidFilterSpecificationError(filter_spec)


def filter_formats(
    formats: Sequence[VideoFormat],
    filter_spec: Union[FormatFilter, str, FormatPredicate],
) -> list[VideoFormat]:
    """
    Keep the formats accepted by ``filter_spec``, in their original order.

    Parameters
    ----------
    formats : Sequence[VideoFormat]
        Candidate formats.
    filter_spec : FormatFilter | str | Callable[[VideoFormat], bool]
        One of ``audioandvideo``, ``video``, ``videoonly``, ``audio``,
        ``audioonly``, or a predicate over a single format.

    Returns
    -------
    list[VideoFormat]
        The accepted formats.

    Raises
    ------
    InvalidFilterSpecificationError
        If ``filter_spec`` is neither a known name nor callable.
    """
    predicate = _resolve_predicate(filter_spec)
    return [fmt for fmt in formats if predicate(fmt)]


def _scan(
    formats: Sequence[VideoFormat],
    score: Callable[[VideoFormat], float],
    prefer_higher: bool,
) -> Optional[VideoFormat]:
    # First format wins ties.
    best: Optional[VideoFormat] = None
    best_score = 0.0
    for fmt in formats:
        current = score(fmt)
        if best is None or (current > best_score if prefer_higher else current < best_score):
            best, best_score = fmt, current
    return best


def _find_by_itag(
    formats: Sequence[VideoFormat], quality: QualitySpec
) -> Optional[VideoFormat]:
    wanted = quality if isinstance(quality, list) else [quality]
    for itag in wanted:
        # str() of an enum member is its qualified name, not its value.
        key = itag.value if isinstance(itag, QualityTier) else str(itag)
        for fmt in formats:
            if str(fmt.itag) == key:
                return fmt
    return None


def _describe_quality(quality: QualitySpec) -> str:
    if isinstance(quality, list):
        return ",".join(_describe_quality(q) for q in quality)
    if isinstance(quality, QualityTier):
        return quality.value
    return str(quality)


def choose_format(
    formats: Sequence[VideoFormat],
    request: Optional[SelectionRequest] = None,
    policy: RankingPolicy = DEFAULT_RANKING_POLICY,
) -> Result[VideoFormat]:
    """
    Choose one format according to ``request``.

    Parameters
    ----------
    formats : Sequence[VideoFormat]
        Enriched candidate formats, in any order.
    request : SelectionRequest, optional
        Caller options (default: highest quality, no filter).
    policy : RankingPolicy, optional
        Codec preferences used by the ranking tie-breaks.

    Returns
    -------
    Result[VideoFormat]
        ``Ok`` with the chosen format, or ``Err`` with
        ``NoFormatsMatchFilterError`` or ``NoMatchingFormatError``.

    Raises
    ------
    InvalidFilterSpecificationError
        If the request carries an unusable filter.
    """
    if request is None:
        request = SelectionRequest()

    if request.format is not None:
        return Ok(request.format)

    candidates: Sequence[VideoFormat] = formats
    if request.filter is not None:
        candidates = filter_formats(candidates, request.filter)
        if not candidates:
            return Err(NoFormatsMatchFilterError(request.filter))

    quality = request.quality
    chosen: Optional[VideoFormat]

    if quality == QualityTier.HIGHEST:
        ranked = sort_formats(candidates, policy)
        chosen = ranked[0] if ranked else None
    elif quality == QualityTier.LOWEST:
        ranked = sort_formats(candidates, policy)
        chosen = ranked[-1] if ranked else None
    elif quality in (QualityTier.HIGHEST_AUDIO, QualityTier.LOWEST_AUDIO):
        chosen = _scan(
            filter_formats(candidates, FormatFilter.AUDIO),
            lambda fmt: audio_score(fmt, policy),
            prefer_higher=quality == QualityTier.HIGHEST_AUDIO,
        )
    elif quality in (QualityTier.HIGHEST_VIDEO, QualityTier.LOWEST_VIDEO):
        chosen = _scan(
            filter_formats(candidates, FormatFilter.VIDEO),
            lambda fmt: fmt.bitrate,
            prefer_higher=quality == QualityTier.HIGHEST_VIDEO,
        )
    else:
        chosen = _find_by_itag(candidates, quality)

    if chosen is None:
        return Err(NoMatchingFormatError(_describe_quality(quality)))

    logger.debug("Chose format %s for quality %s", chosen.describe(), _describe_quality(quality))
    return Ok(chosen)
