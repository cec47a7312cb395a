"""
Format enrichment.

Merges a raw format observation from a player response with the catalog
defaults for its itag and derives the attributes the ranker and selector
rely on: container, codec string and delivery-mode flags.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any, Final, Optional

from tubeformat.formats.catalog import FormatCatalog, default_catalog
from tubeformat.models.format import VideoFormat
from tubeformat.utils.text import between

logger = logging.getLogger(__name__)

LIVE_BROADCAST_RE: Final[re.Pattern[str]] = re.compile(r"/source/yt_live_broadcast/")
HLS_MANIFEST_RE: Final[re.Pattern[str]] = re.compile(r"/manifest/hls_(variant|playlist)/")
DASH_MANIFEST_RE: Final[re.Pattern[str]] = re.compile(r"/manifest/dash/")

# Field name (snake_case) to player response key (camelCase).
_FIELD_ALIASES: Final[dict[str, str]] = {
    name: field.alias or name for name, field in VideoFormat.model_fields.items()
}


def parse_container(mime_type: Optional[str]) -> Optional[str]:
    """Return the subtype of a content type ("mp4" for 'video/mp4; codecs=...')."""
    if not mime_type:
        return None
    media_type = mime_type.split(";")[0]
    if "/" not in media_type:
        return None
    return media_type.split("/")[1].strip()


def parse_codecs(mime_type: Optional[str]) -> str:
    """Return the ``codecs`` parameter of a content type, or an empty string."""
    if not mime_type:
        return ""
    return between(mime_type, 'codecs="', '"')


class FormatEnricher:
    """
    Builds ``VideoFormat`` records from raw observations.

    Parameters
    ----------
    catalog : FormatCatalog, optional
        Reference table consulted by itag (default: the built-in catalog).
    """

    def __init__(self, catalog: Optional[FormatCatalog] = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()

    def merge(self, observed: Mapping[str, Any]) -> dict[str, Any]:
        """
        Overlay ``observed`` on the catalog entry for its itag.

        Parameters
        ----------
        observed : Mapping[str, Any]
            Raw format dict; it is not modified.

        Returns
        -------
        dict[str, Any]
            A new dict holding catalog defaults overridden by every key
            present in ``observed``. Known fields are keyed by their
            camelCase alias, whichever spelling ``observed`` used.
        """
        merged: dict[str, Any] = {}
        entry = self.catalog.get(observed.get("itag"))  # type: ignore[arg-type]
        if entry is not None:
            merged.update(entry)
        else:
            logger.debug("itag %s not in catalog", observed.get("itag"))
        merged.update({_FIELD_ALIASES.get(key, key): value for key, value in observed.items()})
        return merged

    def enrich(self, observed: Mapping[str, Any]) -> VideoFormat:
        """
        Create the enriched ``VideoFormat`` for one observation.

        Parameters
        ----------
        observed : Mapping[str, Any]
            Raw format dict with at least an ``itag``; typically also a
            ``mimeType`` and a ``url``.

        Returns
        -------
        VideoFormat
            The merged record with ``container``, ``codecs``, ``is_live``,
            ``is_hls`` and ``is_dash_mpd`` derived.
        """
        merged = self.merge(observed)

        mime_type = merged.get("mimeType")
        url = merged.get("url") or ""

        merged["url"] = url
        merged["container"] = parse_container(mime_type)
        merged["codecs"] = parse_codecs(mime_type)
        merged["isLive"] = LIVE_BROADCAST_RE.search(url) is not None
        merged["isHls"] = HLS_MANIFEST_RE.search(url) is not None
        merged["isDashMpd"] = DASH_MANIFEST_RE.search(url) is not None

        return VideoFormat.model_validate(merged)

    def enrich_all(self, observed: Iterable[Mapping[str, Any]]) -> list[VideoFormat]:
        """Enrich every observation, preserving order."""
        return [self.enrich(item) for item in observed]
