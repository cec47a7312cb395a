"""
Pytest configuration and fixtures for tubeformat tests.
"""

from __future__ import annotations

import json
import os
from typing import Any

import pytest

from tubeformat.formats.catalog import StaticFormatCatalog


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TUBEFORMAT_* variables from the host out of settings."""
    for key in list(os.environ):
        if key.startswith("TUBEFORMAT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def player_response() -> dict[str, Any]:
    """A trimmed ytInitialPlayerResponse with muxed and adaptive formats."""
    return {
        "videoDetails": {
            "videoId": "dQw4w9WgXcQ",
            "title": "Sample",
            "shortDescription": "Line one\nLine two",
            "viewCount": "1234567",
        },
        "streamingData": {
            "formats": [
                {
                    "itag": 18,
                    "mimeType": 'video/mp4; codecs="avc1.42001E, mp4a.40.2"',
                    "qualityLabel": "360p",
                    "bitrate": 503000,
                    "url": "https://rr1---sn.example.googlevideo.com/videoplayback?itag=18",
                },
                {
                    "itag": 22,
                    "mimeType": 'video/mp4; codecs="avc1.64001F, mp4a.40.2"',
                    "qualityLabel": "720p",
                    "bitrate": 1500000,
                    "url": "https://rr1---sn.example.googlevideo.com/videoplayback?itag=22",
                },
            ],
            "adaptiveFormats": [
                {
                    "itag": 137,
                    "mimeType": 'video/mp4; codecs="avc1.640028"',
                    "qualityLabel": "1080p",
                    "bitrate": 4500000,
                    "url": "https://rr1---sn.example.googlevideo.com/videoplayback?itag=137",
                },
                {
                    "itag": 140,
                    "mimeType": 'audio/mp4; codecs="mp4a.40.2"',
                    "bitrate": 130000,
                    "url": "https://rr1---sn.example.googlevideo.com/videoplayback?itag=140",
                },
                {
                    "itag": 251,
                    "mimeType": 'audio/webm; codecs="opus"',
                    "bitrate": 160000,
                    "url": "https://rr1---sn.example.googlevideo.com/videoplayback?itag=251",
                },
            ],
        },
    }


@pytest.fixture
def watch_page(player_response: dict[str, Any]) -> str:
    """Watch page source embedding ``player_response`` in a script tag."""
    return (
        "<html><head>"
        '<meta itemprop="channelId" content="UCuAXFkgsw1L7xaCfnd5JJOw">'
        '<meta itemprop="datePublished" content="2009-10-25">'
        "</head><body><script>"
        f"var ytInitialPlayerResponse = {json.dumps(player_response)};"
        "var meta = document.createElement('meta');"
        "</script></body></html>"
    )


@pytest.fixture
def tiny_catalog() -> StaticFormatCatalog:
    """A two-entry catalog for enrichment tests."""
    return StaticFormatCatalog(
        {
            1: {
                "mimeType": 'video/mp4; codecs="avc1, mp4a"',
                "qualityLabel": "480p",
                "bitrate": 900000,
                "audioBitrate": 96,
            },
            2: {
                "mimeType": 'audio/webm; codecs="opus"',
                "qualityLabel": None,
                "bitrate": None,
                "audioBitrate": 160,
            },
        }
    )
