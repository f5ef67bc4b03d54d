# pyright: strict
"""Tests for locating headers in bulletin text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from wmoheader import WmoHeader, find_header, iter_headers

if TYPE_CHECKING:
    from loguru import Record

BULLETIN = (
    "\x01\r\r\n"
    "523 \r\r\n"
    "FPUS61 KOKX 171530\r\r\n"
    "ZFPOKX\r\r\n"
    "\r\r\n"
    "ZONE FORECAST PRODUCT\r\r\n"
    "NATIONAL WEATHER SERVICE NEW YORK NY\r\r\n"
    "1130 AM EDT THU JUL 17 2026\r\r\n"
    "\x03"
)


class TestIterHeaders:
    """Test iter_headers function."""

    def test_finds_header_among_bulletin_lines(self) -> None:
        """Test that only the header line is yielded."""
        headers = list(iter_headers(BULLETIN.splitlines()))
        assert headers == [WmoHeader("FPUS61 KOKX 171530")]

    def test_strips_padding_and_terminators(self) -> None:
        """Test that surrounding whitespace and framing characters are removed."""
        lines = ["  SXUS51 KNYC 041200 (PAA)\r\n", "\x01WWUS81 KBOX 051200 COR\x03"]
        headers = list(iter_headers(lines))
        assert [h.raw for h in headers] == ["SXUS51 KNYC 041200 (PAA)", "WWUS81 KBOX 051200 COR"]

    def test_multiple_bulletins_in_order(self) -> None:
        """Test that every header in a concatenated stream is returned in order."""
        stream = BULLETIN + "\n" + BULLETIN.replace("FPUS61 KOKX 171530", "WWUS81 KBOX 171540 (CCA)")
        headers = list(iter_headers(stream.splitlines()))
        assert [h.product for h in headers] == ["FPUS61", "WWUS81"]
        assert headers[1].addendum == "CCA"

    def test_no_headers(self) -> None:
        """Test that text without headers yields nothing."""
        assert list(iter_headers(["fpus61 kokx 171530", "", "ZFPOKX"])) == []


class TestFindHeader:
    """Test find_header function."""

    def test_find_first_header(self) -> None:
        """Test returning the first header in the text."""
        header = find_header(BULLETIN)
        assert header is not None
        assert header.station == "KOKX"
        assert header.region == "US"

    def test_max_lines_limits_search(self) -> None:
        """Test that only the leading lines are searched when limited."""
        # "\r\r\n" splits into two lines, so the header is the fifth line.
        assert find_header(BULLETIN, max_lines=4) is None
        assert find_header(BULLETIN, max_lines=5) is not None

    def test_missing_header(self) -> None:
        """Test that None is returned when there is no header."""
        assert find_header("no header here\nat all") is None

    def test_logs_scan_summary_when_stopping_early(self, reset_logging: None) -> None:
        """Test that the scan summary is logged although the scan stops at the first header."""
        records: list[Record] = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            find_header(BULLETIN)
        finally:
            logger.remove(handler_id)

        summaries = [r for r in records if r["message"] == "Header scan complete"]
        assert len(summaries) == 1
        assert summaries[0]["extra"]["lines"] == 5
        assert summaries[0]["extra"]["headers"] == 1
