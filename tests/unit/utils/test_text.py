"""
Tests for text helpers.
"""

from __future__ import annotations

import re

import pytest

from tubeformat.utils.text import (
    between,
    change_url_parameter,
    parse_time,
    remove_url_parameter,
    strip_html,
)


class TestBetween:
    """Tests for between."""

    def test_literal_markers(self) -> None:
        """Test plain string markers."""
        assert between('video/mp4; codecs="avc1.4d401e"', 'codecs="', '"') == "avc1.4d401e"

    def test_first_right_after_left(self) -> None:
        """Test the right marker is searched after the left one."""
        assert between("a]b[c]d]", "[", "]") == "c"

    def test_regex_markers(self) -> None:
        """Test compiled regex markers."""
        assert between("id: 42; name: x;", re.compile(r"id:\s*"), re.compile(r";")) == "42"

    @pytest.mark.parametrize("haystack", ["no markers", "left[ only", "]right only"])
    def test_missing_marker(self, haystack: str) -> None:
        """Test an empty result when a marker is absent."""
        assert between(haystack, "[", "]") == ""


class TestStripHtml:
    """Tests for strip_html."""

    def test_breaks_and_paragraphs(self) -> None:
        """Test br and paragraph boundaries become newlines."""
        html = "<p>One <b>bold</b></p><p>Two</p>\nthree<br/>four"
        assert strip_html(html) == "One bold\nTwo three\nfour"

    def test_plain_text(self) -> None:
        """Test text without tags is only trimmed."""
        assert strip_html("  plain  ") == "plain"


class TestParseTime:
    """Tests for parse_time."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1500, 1500),
            (2.9, 2),
            ("1500", 1500),
            ("59", 59),
            ("1:30", 90_000),
            ("01:02:03.004", 3_723_004),
            ("00:05.500", 5_500),
            ("1m30s", 90_000),
            ("2h15ms", 7_200_015),
            ("nothing", 0),
        ],
    )
    def test_formats(self, value: int | float | str, expected: int) -> None:
        """Test milliseconds, clock notation and unit sums."""
        assert parse_time(value) == expected


class TestUrlParameters:
    """Tests for change_url_parameter and remove_url_parameter."""

    def test_change_existing(self) -> None:
        """Test an existing parameter is replaced in place."""
        uri = "https://host/path?a=1&range=0-100&b=2"
        assert change_url_parameter(uri, "range", "100-200") == (
            "https://host/path?a=1&range=100-200&b=2"
        )

    def test_change_last(self) -> None:
        """Test the last parameter can be replaced."""
        assert change_url_parameter("https://host/?a=1", "a", "2") == "https://host/?a=2"

    def test_append_when_absent(self) -> None:
        """Test a new parameter is appended with the right separator."""
        assert change_url_parameter("https://host/", "a", "1") == "https://host/?a=1"
        assert change_url_parameter("https://host/?b=2", "a", "1") == "https://host/?b=2&a=1"

    def test_remove(self) -> None:
        """Test a parameter is removed and others kept."""
        uri = "https://host/?a=1&ratebypass=yes&b=2"
        assert remove_url_parameter(uri, "ratebypass") == "https://host/?a=1&b=2"

    def test_remove_without_query(self) -> None:
        """Test URIs without a query are returned unchanged."""
        assert remove_url_parameter("https://host/", "a") == "https://host/"
        assert remove_url_parameter("https://host/?", "a") == "https://host/"
