"""
Format quality ranking.

Orders enriched formats from highest to lowest quality. The comparison
walks a fixed tie-break chain and stops at the first criterion that
differs:

1. feature score: 2 for a parsable resolution, +1 for an audio track
2. resolution (leading integer of the quality label)
3. video bitrate
4. audio score: audio bitrate plus a tenth of the audio codec rank
5. video codec rank

Codec ranks come from a ``RankingPolicy`` whose lists are ordered from
worst to best, so a higher index is a better codec.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from tubeformat.models.format import VideoFormat

DEFAULT_AUDIO_ENCODING_RANKS: Final[tuple[str, ...]] = (
    "mp4a",
    "mp3",
    "vorbis",
    "aac",
    "opus",
    "flac",
)

DEFAULT_VIDEO_ENCODING_RANKS: Final[tuple[str, ...]] = (
    "mp4v",
    "avc1",
    "Sorenson H.283",
    "MPEG-4 Visual",
    "VP8",
    "VP9",
    "H.264",
)


class RankingPolicy(BaseModel):
    """
    Codec preference lists used as ranking tie-breaks.

    Attributes
    ----------
    audio_encoding_ranks : tuple[str, ...]
        Audio codec names, worst first.
    video_encoding_ranks : tuple[str, ...]
        Video codec names, worst first.
    """

    model_config = ConfigDict(frozen=True)

    audio_encoding_ranks: tuple[str, ...] = Field(default=DEFAULT_AUDIO_ENCODING_RANKS)
    video_encoding_ranks: tuple[str, ...] = Field(default=DEFAULT_VIDEO_ENCODING_RANKS)


DEFAULT_RANKING_POLICY: Final[RankingPolicy] = RankingPolicy()


def encoding_rank(codecs: str, ranks: Sequence[str]) -> int:
    """
    Index of the first entry of ``ranks`` contained in ``codecs``.

    Returns -1 when no entry matches or ``codecs`` is empty.
    """
    if not codecs:
        return -1
    for index, encoding in enumerate(ranks):
        if encoding in codecs:
            return index
    return -1


def feature_score(fmt: VideoFormat) -> int:
    """2 for a parsable resolution plus 1 for an audio track."""
    return (2 if fmt.resolution else 0) + (1 if fmt.has_audio else 0)


def audio_score(fmt: VideoFormat, policy: RankingPolicy = DEFAULT_RANKING_POLICY) -> float:
    """Audio bitrate with the audio codec rank folded in as tenths."""
    rank = encoding_rank(fmt.codecs, policy.audio_encoding_ranks)
    return (fmt.audio_bitrate or 0) + rank / 10


def video_encoding_score(
    fmt: VideoFormat, policy: RankingPolicy = DEFAULT_RANKING_POLICY
) -> int:
    """Rank of the video codec; higher is better."""
    return encoding_rank(fmt.codecs, policy.video_encoding_ranks)


def ranking_key(
    fmt: VideoFormat, policy: RankingPolicy = DEFAULT_RANKING_POLICY
) -> tuple[int, int, int, float, int]:
    """
    Sort key of ``fmt``; greater keys are better formats.

    The tuple holds, in tie-break order: feature score, resolution,
    video bitrate, audio score and video codec rank.
    """
    return (
        feature_score(fmt),
        fmt.resolution,
        fmt.bitrate,
        audio_score(fmt, policy),
        video_encoding_score(fmt, policy),
    )


def compare_formats(
    a: VideoFormat,
    b: VideoFormat,
    policy: RankingPolicy = DEFAULT_RANKING_POLICY,
) -> int:
    """
    Compare two formats for a highest-first sort.

    Returns
    -------
    int
        Negative if ``a`` ranks before ``b``, positive if after, 0 if the
        two are equivalent for ordering purposes.
    """
    a_key = ranking_key(a, policy)
    b_key = ranking_key(b, policy)
    return (b_key > a_key) - (b_key < a_key)


def sort_formats(
    formats: Iterable[VideoFormat],
    policy: RankingPolicy = DEFAULT_RANKING_POLICY,
) -> list[VideoFormat]:
    """
    Return ``formats`` ordered from highest to lowest quality.

    The sort is stable: equivalent formats keep their input order. The
    input is not modified.
    """
    return sorted(formats, key=lambda fmt: ranking_key(fmt, policy), reverse=True)
