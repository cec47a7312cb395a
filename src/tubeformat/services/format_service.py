"""
Format service: from page source to one chosen stream.

Coordinates the full pipeline:

1. cut ``ytInitialPlayerResponse`` out of the page source
2. enrich every entry of ``streamingData.formats`` and
   ``streamingData.adaptiveFormats`` with catalog defaults
3. rank the enriched formats
4. resolve a caller's selection request

The service holds only immutable collaborators (catalog and ranking
policy), so one instance may be shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from tubeformat.formats.catalog import FormatCatalog
from tubeformat.formats.enricher import FormatEnricher
from tubeformat.formats.ranking import (
    DEFAULT_RANKING_POLICY,
    RankingPolicy,
    sort_formats,
)
from tubeformat.formats.selection import choose_format
from tubeformat.models.format import VideoFormat
from tubeformat.models.result import Err, Ok, Result
from tubeformat.models.selection import SelectionRequest
from tubeformat.parsers.json_extractor import (
    PLAYER_RESPONSE_VARIABLE,
    find_embedded_json,
)

logger = logging.getLogger(__name__)

_STREAMING_DATA_KEYS = ("formats", "adaptiveFormats")


def raw_formats(player_response: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """
    Collect the raw format dicts advertised by a player response.

    Parameters
    ----------
    player_response : Mapping[str, Any]
        Decoded ``ytInitialPlayerResponse``.

    Returns
    -------
    list[Mapping[str, Any]]
        Muxed formats followed by adaptive formats; entries without an
        ``itag`` are skipped.
    """
    streaming_data = player_response.get("streamingData") or {}
    collected: list[Mapping[str, Any]] = []
    for key in _STREAMING_DATA_KEYS:
        for entry in streaming_data.get(key) or []:
            if isinstance(entry, Mapping) and entry.get("itag") is not None:
                collected.append(entry)
            else:
                logger.debug("Skipping %s entry without itag", key)
    return collected


class FormatService:
    """
    Extracts, enriches, ranks and selects stream formats.

    Parameters
    ----------
    catalog : FormatCatalog, optional
        Reference table for enrichment (default: built-in catalog).
    policy : RankingPolicy, optional
        Codec preferences for ranking (default: built-in policy).
    """

    def __init__(
        self,
        catalog: Optional[FormatCatalog] = None,
        policy: Optional[RankingPolicy] = None,
    ) -> None:
        self.enricher = FormatEnricher(catalog)
        self.policy = policy or DEFAULT_RANKING_POLICY

    def formats_from_player_response(
        self, player_response: Mapping[str, Any]
    ) -> list[VideoFormat]:
        """Enrich and rank the formats of a decoded player response."""
        raw = raw_formats(player_response)
        enriched = self.enricher.enrich_all(raw)
        logger.debug("Enriched %d formats", len(enriched))
        return sort_formats(enriched, self.policy)

    def formats_from_page(self, html: str) -> Result[list[VideoFormat]]:
        """
        Enrich and rank the formats embedded in a watch page.

        Parameters
        ----------
        html : str
            Raw page source.

        Returns
        -------
        Result[list[VideoFormat]]
            ``Ok`` with the ranked formats (possibly empty), or the
            extraction ``Err`` when the page holds no usable player
            response.
        """
        found = find_embedded_json(html, PLAYER_RESPONSE_VARIABLE)
        if isinstance(found, Err):
            return found
        if not isinstance(found.value, Mapping):
            logger.warning("Player response is not an object: %s", type(found.value).__name__)
            return Ok([])
        return Ok(self.formats_from_player_response(found.value))

    def choose(
        self,
        formats: Sequence[VideoFormat],
        request: Optional[SelectionRequest] = None,
        **options: Any,
    ) -> Result[VideoFormat]:
        """
        Choose one format.

        Parameters
        ----------
        formats : Sequence[VideoFormat]
            Enriched formats.
        request : SelectionRequest, optional
            Prepared request. When omitted, one is built from ``options``
            (``format``, ``filter``, ``quality``).

        Returns
        -------
        Result[VideoFormat]
            See ``choose_format``.
        """
        if request is None:
            request = SelectionRequest(**options)
        result = choose_format(formats, request, self.policy)
        if isinstance(result, Err):
            logger.info("Format selection failed: %s", result.error.message)
        return result
