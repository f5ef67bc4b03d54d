# pyright: strict
"""Lexical grammar for WMO abbreviated header lines.

A header line has the shape ``T1T2A1A2ii CCCC DDHHMM [BBB]``::

    FPUS61 KOKX 171530
    SXUS51 KNYC 041200 (PAA)

Everything here is pure string handling. Nothing checks whether a product,
station or timestamp actually exists.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

HEADER_PATTERN = re.compile(
    r"[A-Z]{4}[0-9]{1,2} [A-Z]{3,4} [0-9]{4,6}( \(?((AA|CC|RR|P[A-X])[A-X]|COR)\)?)?",
)
"""Full-match pattern for a header line (ASCII letters and digits only)."""

REGION_DESIGNATORS = frozenset("ABCEFMNRSWV")
"""T1 letters whose A1A2 pair is a geographical region code."""

PRODUCT = "PRODUCT"
"""Product-type tag for callers that key handlers by product family."""


class AddendumKind(Enum):
    """Meaning of the BBB group."""

    AMENDMENT = "amendment"
    CORRECTION = "correction"
    DELAYED = "delayed"
    SEGMENT = "segment"


class HeaderParts(NamedTuple):
    """The four space-separated groups of a header line."""

    product: str
    station: str
    time: str
    addendum: str | None


class ProductParts(NamedTuple):
    """The ``T1T2A1A2ii`` product group split by position."""

    t1: str
    t2: str
    a1: str
    a2: str
    ii: str

    @property
    def t1t2(self) -> str:
        return self.t1 + self.t2

    @property
    def a1a2(self) -> str:
        return self.a1 + self.a2


def is_valid(text: object) -> bool:
    """Return True if ``text`` looks like a WMO abbreviated header line.

    The line must already be stripped of its line terminator. Anything that
    is not a ``str`` is reported as invalid rather than raising.
    """
    if not isinstance(text, str):
        return False
    return HEADER_PATTERN.fullmatch(text) is not None


def normalize_addendum(addendum: str | None) -> str | None:
    """Strip at most one opening and one closing parenthesis from a BBB group."""
    if addendum is None:
        return None
    return addendum.removeprefix("(").removesuffix(")")


def split_header(line: str) -> HeaderParts:
    """Split a header line into its groups without validating it.

    Missing groups come back empty (or ``None`` for the addendum) so that
    callers can validate separately.
    """
    groups = line.split(" ", 3)
    groups.extend([""] * (3 - len(groups)))
    addendum = groups[3] if len(groups) > 3 else None
    return HeaderParts(groups[0], groups[1], groups[2], normalize_addendum(addendum))


def split_product(product: str) -> ProductParts:
    """Split a product code by fixed offsets; short codes yield empty parts."""
    return ProductParts(
        t1=product[0:1],
        t2=product[1:2],
        a1=product[2:3],
        a2=product[3:4],
        ii=product[4:6],
    )


def region_for(product: str) -> str | None:
    """Return the A1A2 region code when T1 designates one, else None."""
    parts = split_product(product)
    if parts.t1 and parts.t1 in REGION_DESIGNATORS:
        return parts.a1a2
    return None


def classify_addendum(addendum: str | None) -> AddendumKind | None:
    """Classify an unparenthesized BBB group."""
    if not addendum:
        return None
    if addendum == "COR" or addendum.startswith("CC"):
        return AddendumKind.CORRECTION
    if addendum.startswith("AA"):
        return AddendumKind.AMENDMENT
    if addendum.startswith("RR"):
        return AddendumKind.DELAYED
    if addendum.startswith("P"):
        return AddendumKind.SEGMENT
    return None


def compose_header(
    product: str,
    station: str,
    time: str,
    addendum: str | None = None,
) -> str:
    """Join explicit groups into a header line.

    The addendum, when given, is always written in parentheses. The result
    is not validated here.
    """
    line = f"{product} {station} {time}"
    if addendum is not None:
        line += f" ({addendum})"
    return line
