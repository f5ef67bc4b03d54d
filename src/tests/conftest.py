# pyright: strict
"""Shared pytest fixtures for wmoheader tests."""

from __future__ import annotations

import datetime

import pytest

from wmoheader import WmoHeader
from wmoheader.utils import LoggingConfig


@pytest.fixture
def forecast_header() -> WmoHeader:
    """Header without addendum; T1 'F' is a region designator, so region is 'US'."""
    return WmoHeader("FPUS61 KOKX 171530")


@pytest.fixture
def upper_air_header() -> WmoHeader:
    """Header whose T1 'U' carries no region."""
    return WmoHeader("UAUS51 KWBC 171200")


@pytest.fixture
def segmented_header() -> WmoHeader:
    """Header with a parenthesized segment addendum and a region."""
    return WmoHeader("SXUS51 KNYC 041200 (PAA)")


@pytest.fixture
def reference_time() -> datetime.datetime:
    """Fixed receipt time used to resolve DDHHMM groups."""
    return datetime.datetime(2026, 10, 19, 12, 0, tzinfo=datetime.UTC)


@pytest.fixture
def reset_logging():
    """Reset loguru handlers around a test."""
    LoggingConfig.reset()
    yield
    LoggingConfig.reset()
