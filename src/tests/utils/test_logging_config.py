"""Tests for logging configuration module."""

import io
from contextlib import redirect_stderr
from datetime import UTC, datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from unittest.mock import patch

from loguru import logger

from wmoheader.utils.logging_config import LoggingConfig


def _record(message: str, extra: dict[str, str]) -> dict[str, object]:
    return {
        "time": datetime.now(UTC),
        "level": type("Level", (), {"name": "INFO"})(),
        "name": "wmoheader.scanner",
        "function": "iter_headers",
        "line": 42,
        "message": message,
        "extra": extra,
    }


class TestLoggingConfig:
    """Test cases for LoggingConfig class."""

    def setup_method(self) -> None:
        """Reset logging configuration before each test."""
        LoggingConfig.reset()

    def teardown_method(self) -> None:
        """Clean up after each test."""
        LoggingConfig.reset()

    def test_configure_console_writes_to_stderr(self) -> None:
        """Test that console logging goes to stderr."""
        output = io.StringIO()

        with redirect_stderr(output):
            LoggingConfig.configure("INFO")
            logger.info("Scanned bulletin source", source="<stdin>", headers=2)

        assert LoggingConfig.is_configured()
        content = output.getvalue()
        assert "Scanned bulletin source" in content
        assert "INFO" in content
        assert "source=<stdin>" in content

    def test_configure_with_file_logging(self) -> None:
        """Test logging configuration with file output."""
        with NamedTemporaryFile(mode="w+", delete=False, suffix=".log") as temp_file:
            log_file_path = temp_file.name

        try:
            with redirect_stderr(io.StringIO()):
                LoggingConfig.configure("DEBUG", log_file_path)
                logger.debug("Rejected WMO header", header="fpus61 kokx 171530")
            LoggingConfig.reset()

            log_content = Path(log_file_path).read_text(encoding="utf-8")
            assert "Rejected WMO header" in log_content
            assert "header=fpus61 kokx 171530" in log_content
            assert "DEBUG" in log_content

        finally:
            Path(log_file_path).unlink(missing_ok=True)

    def test_multiple_configure_calls_ignored(self) -> None:
        """Test that multiple configure calls are ignored."""
        with redirect_stderr(io.StringIO()):
            LoggingConfig.configure("INFO")
        assert LoggingConfig.is_configured()

        with patch.object(logger, "remove") as mock_remove:
            LoggingConfig.configure("DEBUG")
            mock_remove.assert_not_called()

    def test_escape_loguru_braces(self) -> None:
        """Test that curly braces are properly escaped."""
        assert LoggingConfig._escape_loguru_braces("{start} middle {end}") == "{{start}} middle {{end}}"  # type: ignore
        assert LoggingConfig._escape_loguru_braces(123) == "123"  # type: ignore
        assert LoggingConfig._escape_loguru_braces(None) == "None"  # type: ignore

    def test_console_formatter_escapes_markup(self) -> None:
        """Test that header text cannot inject color tags."""
        result = LoggingConfig._console_formatter(  # type: ignore
            _record("Skipping <red> line", {"line": "{x}<b>"}),
        )

        assert r"\<red>" in result
        assert r"{{x}}\<b>" in result
        assert "<cyan>" in result
        assert "<magenta>" in result

    def test_file_formatter_without_colors(self) -> None:
        """Test file formatter produces output without color codes."""
        result = LoggingConfig._file_formatter(_record("Header scan complete", {"headers": "3"}))  # type: ignore

        assert "<cyan>" not in result
        assert "<green>" not in result
        assert "Header scan complete" in result
        assert "headers=3" in result
        assert result.endswith("\n")

    def test_formatter_exception_handling(self) -> None:
        """Test that formatters handle malformed records gracefully."""
        assert "<formatting_error>" in LoggingConfig._console_formatter({})  # type: ignore
        assert "<formatting_error>" in LoggingConfig._file_formatter({})  # type: ignore

    def test_logging_with_braces_in_values(self) -> None:
        """Test logging values that contain loguru-reserved braces."""
        output = io.StringIO()

        with redirect_stderr(output):
            LoggingConfig.configure("INFO")
            logger.bind(header="FPUS61 {KOKX}").info("Parsed header")

        assert "header=FPUS61 {KOKX}" in output.getvalue()
