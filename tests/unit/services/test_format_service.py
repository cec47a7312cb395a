"""
Tests for FormatService.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from tubeformat.exceptions import ErrorKind, NoLiteralFoundError
from tubeformat.formats.catalog import StaticFormatCatalog
from tubeformat.formats.ranking import RankingPolicy
from tubeformat.models.result import Err, Ok
from tubeformat.models.selection import QualityTier, SelectionRequest
from tubeformat.services.format_service import FormatService, raw_formats


@pytest.fixture
def service() -> FormatService:
    """A service using the built-in catalog and policy."""
    return FormatService()


class TestRawFormats:
    """Tests for raw_formats."""

    def test_muxed_then_adaptive(self, player_response: dict[str, Any]) -> None:
        """Test muxed formats come before adaptive ones."""
        assert [f["itag"] for f in raw_formats(player_response)] == [18, 22, 137, 140, 251]

    def test_missing_streaming_data(self) -> None:
        """Test a response without streamingData."""
        assert raw_formats({"videoDetails": {}}) == []
        assert raw_formats({"streamingData": None}) == []

    def test_entries_without_itag_are_skipped(self) -> None:
        """Test malformed entries are dropped."""
        response = {
            "streamingData": {
                "formats": [{"url": "x"}, {"itag": 18}, "junk"],
                "adaptiveFormats": None,
            }
        }
        assert raw_formats(response) == [{"itag": 18}]


class TestFormatService:
    """Tests for FormatService."""

    def test_formats_are_enriched_and_ranked(
        self, service: FormatService, player_response: dict[str, Any]
    ) -> None:
        """Test the player response pipeline."""
        formats = service.formats_from_player_response(player_response)
        assert [f.itag for f in formats] == [22, 18, 137, 251, 140]
        audio = formats[-1]
        assert audio.audio_bitrate == 128
        assert audio.container == "mp4"
        assert audio.codecs == "mp4a.40.2"

    def test_formats_from_page(
        self, service: FormatService, watch_page: str, player_response: dict[str, Any]
    ) -> None:
        """Test the page pipeline matches the player response pipeline."""
        result = service.formats_from_page(watch_page)
        assert result == Ok(service.formats_from_player_response(player_response))

    def test_page_without_player_response(self, service: FormatService) -> None:
        """Test the extraction error is passed through."""
        result = service.formats_from_page("<html></html>")
        assert isinstance(result, Err)
        assert result.error == NoLiteralFoundError("ytInitialPlayerResponse")

    def test_player_response_not_an_object(self, service: FormatService) -> None:
        """Test a non-object literal yields no formats."""
        assert service.formats_from_page("var ytInitialPlayerResponse = [1, 2];") == Ok([])

    def test_injected_catalog(self) -> None:
        """Test enrichment uses the injected catalog."""
        catalog = StaticFormatCatalog({18: {"qualityLabel": "9000p", "audioBitrate": 1}})
        service = FormatService(catalog=catalog)
        formats = service.formats_from_player_response(
            {"streamingData": {"formats": [{"itag": 18}]}}
        )
        assert formats[0].quality_label == "9000p"

    def test_injected_policy_is_used(self) -> None:
        """Test the policy reaches ranking."""
        policy = RankingPolicy(audio_encoding_ranks=("opus", "mp4a"))
        service = FormatService(policy=policy)
        assert service.policy is policy

    def test_choose_with_request(
        self, service: FormatService, player_response: dict[str, Any]
    ) -> None:
        """Test choosing with a prepared request."""
        formats = service.formats_from_player_response(player_response)
        request = SelectionRequest(quality=QualityTier.HIGHEST_AUDIO, filter="audioonly")
        assert service.choose(formats, request).unwrap().itag == 251

    def test_choose_with_options(
        self, service: FormatService, player_response: dict[str, Any]
    ) -> None:
        """Test keyword options build the request."""
        formats = service.formats_from_player_response(player_response)
        assert service.choose(formats, quality=[999, 140]).unwrap().itag == 140
        assert service.choose(formats).unwrap().itag == 22

    def test_choose_failure_is_logged(
        self,
        service: FormatService,
        player_response: dict[str, Any],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test a failed selection is returned and logged."""
        formats = service.formats_from_player_response(player_response)
        with caplog.at_level(logging.INFO, logger="tubeformat"):
            result = service.choose(formats, quality=5)
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.NO_MATCHING_FORMAT
        assert "No such format found: 5" in caplog.text
