"""
Tests for the top-level CLI.
"""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from tubeformat import __version__
from tubeformat.cli.constants import EXIT_USER_ERROR
from tubeformat.cli.errors import ErrorCategory, format_error
from tubeformat.cli.main import app, configure_logging

runner = CliRunner()


class TestMainCallback:
    """Tests for the application callback."""

    def test_version_flag(self) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"tubeformat v{__version__}" in result.output

    def test_version_command(self) -> None:
        """Test the version command panel."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        """Test the help screen names the sub-commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "video-id" in result.output
        assert "formats" in result.output

    def test_verbose_enables_debug(self) -> None:
        """Test --verbose sets the package logger to DEBUG."""
        result = runner.invoke(app, ["--verbose", "version"])
        assert result.exit_code == 0
        assert logging.getLogger("tubeformat").level == logging.DEBUG

    def test_log_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the configured log level is applied without --verbose."""
        monkeypatch.setenv("TUBEFORMAT_LOG_LEVEL", "warning")
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert logging.getLogger("tubeformat").level == logging.WARNING


class TestVideoIdCommand:
    """Tests for the video-id command."""

    def test_link(self) -> None:
        """Test a link is resolved to its ID."""
        result = runner.invoke(app, ["video-id", "https://youtu.be/RAW_VIDEOID"])
        assert result.exit_code == 0
        assert result.output.strip() == "RAW_VIDEOID"

    def test_watch_url_output(self) -> None:
        """Test --url prints the canonical watch URL."""
        result = runner.invoke(app, ["video-id", "RAW_VIDEOID", "--url"])
        assert result.exit_code == 0
        assert "https://www.youtube.com/watch?v=RAW_VIDEOID" in result.output

    def test_unsupported_domain(self) -> None:
        """Test a foreign host shows an error panel and exits 1."""
        result = runner.invoke(app, ["video-id", "https://vimeo.com/12345"])
        assert result.exit_code == EXIT_USER_ERROR
        assert "Not a YouTube domain: vimeo.com" in result.output

    def test_invalid_shape(self) -> None:
        """Test a too-short ID is reported."""
        result = runner.invoke(app, ["video-id", "https://www.youtube.com/watch?v=abc"])
        assert result.exit_code == EXIT_USER_ERROR
        assert "does not match" in result.output


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_handler_after_repeated_calls(self) -> None:
        """Test reconfiguring replaces the CLI handler instead of stacking them."""
        configure_logging("INFO")
        configure_logging("DEBUG")
        package_logger = logging.getLogger("tubeformat")
        cli_handlers = [
            h for h in package_logger.handlers if getattr(h, "_tubeformat_cli", False)
        ]
        assert len(cli_handlers) == 1
        assert cli_handlers[0].level == logging.DEBUG
        assert package_logger.level == logging.DEBUG


class TestFormatError:
    """Tests for the error message formatter."""

    def test_all_parts(self) -> None:
        """Test every optional part is rendered on its own line."""
        text = format_error(
            ErrorCategory.VALIDATION, "Bad input", expected="an ID", got="abc", hint="Retry"
        )
        assert text.splitlines() == [
            "Error: Validation: Bad input",
            "   Expected: an ID",
            "   Got: abc",
            "   Hint: Retry",
        ]

    def test_message_only(self) -> None:
        """Test optional parts are omitted when not given."""
        assert format_error("Not Found", "Nothing") == "Error: Not Found: Nothing"
