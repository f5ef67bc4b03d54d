# pyright: strict
"""Locate WMO header lines inside bulletin text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from loguru import logger

from wmoheader.grammar import is_valid
from wmoheader.header import WmoHeader


def iter_headers(lines: Iterable[str]) -> Iterator[WmoHeader]:
    """Yield a header for every line that is a valid WMO header once stripped.

    Bulletins arrive with CR/LF line endings, padding and SOH/ETX framing
    characters around the header; all surrounding whitespace and control
    characters are removed before validating.

    Args:
        lines: Lines of bulletin text, with or without line terminators.

    Yields:
        One populated header per matching line, in input order.

    """
    scanned = 0
    found = 0
    try:
        for line in lines:
            scanned += 1
            candidate = line.strip().strip("\x01\x03").strip()
            if not is_valid(candidate):
                logger.trace("Skipping non-header line", line_number=scanned)
                continue
            found += 1
            yield WmoHeader(candidate)
    finally:
        logger.debug("Header scan complete", lines=scanned, headers=found)


def find_header(text: str, max_lines: int | None = None) -> WmoHeader | None:
    """Return the first header in ``text``, or None if there is none.

    Args:
        text: Bulletin text.
        max_lines: Only look at this many leading lines when given.

    """
    lines: Iterable[str] = text.splitlines()
    if max_lines is not None:
        lines = islice(lines, max_lines)
    headers = iter_headers(lines)
    try:
        return next(headers, None)
    finally:
        headers.close()
