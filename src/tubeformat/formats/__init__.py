"""
Format catalog, enrichment, ranking and selection.
"""

from __future__ import annotations

from .catalog import (
    KNOWN_FORMATS,
    FormatCatalog,
    StaticFormatCatalog,
    default_catalog,
)
from .enricher import FormatEnricher
from .ranking import (
    DEFAULT_RANKING_POLICY,
    RankingPolicy,
    audio_score,
    compare_formats,
    ranking_key,
    sort_formats,
)
from .selection import choose_format, filter_formats

__all__ = [
    "KNOWN_FORMATS",
    "FormatCatalog",
    "StaticFormatCatalog",
    "default_catalog",
    "FormatEnricher",
    "DEFAULT_RANKING_POLICY",
    "RankingPolicy",
    "audio_score",
    "compare_formats",
    "ranking_key",
    "sort_formats",
    "choose_format",
    "filter_formats",
]
