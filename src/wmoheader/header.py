# pyright: strict
"""Assign-once WMO abbreviated header value.

Example::

    header = WmoHeader("FPUS61 KOKX 171530")
    header.product          # 'FPUS61'
    header.region           # 'US', T1 'F' is a region designator

    header = WmoHeader("FPUS51", "KNYC", "041200", "PAA")
    header.raw              # 'FPUS51 KNYC 041200 (PAA)'

    header = WmoHeader()
    header.raw = "FPUS51 KNYC 041200 (PAA)"
"""

from __future__ import annotations

import datetime
import threading
from typing import Any

from loguru import logger

from wmoheader.errors import AlreadySetError, HeaderTypeMismatchError, ReadOnlyFieldError
from wmoheader.grammar import AddendumKind, compose_header
from wmoheader.models.wmo import WMOModel
from wmoheader.utils.wmo_time import resolve_ddhhmm

READ_ONLY_FIELDS = frozenset(
    {
        "product",
        "station",
        "time",
        "addendum",
        "bbb",
        "region",
        "t1",
        "t2",
        "t1t2",
        "tt",
        "a1",
        "a2",
        "a1a2",
        "ii",
        "is_set",
        "model",
        "addendum_kind",
    },
)
"""Attributes that can never be written, only derived from ``raw``."""


class WmoHeader:
    """A WMO abbreviated header line and its decomposed groups.

    An instance is either empty or holds exactly one validated
    :class:`WMOModel`. Moving from empty to populated happens once, through
    the constructor, :meth:`assign` or ``header.raw = ...``; after that the
    header never changes. Every accessor returns ``None`` while the header
    is empty.
    """

    __slots__ = ("_lock", "_model")

    _lock: threading.Lock
    _model: WMOModel | None

    def __init__(self, *parts: str) -> None:
        """Create a header from a raw line, from its groups, or empty.

        Args:
            *parts: Nothing, a single header line, or ``product, station,
                time`` with an optional fourth ``addendum``.

        Raises:
            InvalidHeaderError: If the resulting line is not a valid header.
            TypeError: If given two or more than four parts.

        """
        object.__setattr__(self, "_lock", threading.Lock())
        object.__setattr__(self, "_model", None)

        if not parts:
            return
        if len(parts) == 1:
            self.assign(parts[0])
        elif len(parts) in (3, 4):
            self.assign(compose_header(*parts))
        else:
            msg = f"WmoHeader takes 0, 1, 3 or 4 parts ({len(parts)} given)"
            raise TypeError(msg)

    @classmethod
    def parse(cls, line: str) -> WmoHeader:
        """Create a header from a complete header line."""
        return cls(line)

    @classmethod
    def from_fields(
        cls,
        product: str,
        station: str,
        time: str,
        addendum: str | None = None,
    ) -> WmoHeader:
        """Create a header from its groups.

        The addendum is written in parentheses when the line is composed,
        and the composed line must pass the same validation as a raw line.
        """
        return cls(compose_header(product, station, time, addendum))

    @classmethod
    def from_model(cls, model: WMOModel) -> WmoHeader:
        """Wrap an already validated model."""
        header = cls()
        object.__setattr__(header, "_model", model)
        return header

    def assign(self, line: str) -> None:
        """Populate an empty header.

        Raises:
            AlreadySetError: If the header already holds a value.
            InvalidHeaderError: If ``line`` is not a valid header.

        """
        with self._lock:
            if self._model is not None:
                logger.warning(
                    "Refusing to reassign WMO header",
                    current=self._model.raw,
                    rejected=line,
                )
                raise AlreadySetError(self._model.raw, line)
            object.__setattr__(self, "_model", WMOModel.parse(line))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "raw":
            self.assign(value)
            return
        if name in READ_ONLY_FIELDS:
            raise ReadOnlyFieldError(name)
        msg = f"'{type(self).__name__}' object has no attribute '{name}'"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[WmoHeader], tuple[str, ...]]:
        # The lock is not picklable; rebuild through the validating constructor.
        return (type(self), (self._model.raw,) if self._model is not None else ())

    def __copy__(self) -> WmoHeader:
        if self._model is None:
            return type(self)()
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> WmoHeader:
        return self.__copy__()

    def __delattr__(self, name: str) -> None:
        if name == "raw" or name in READ_ONLY_FIELDS:
            raise ReadOnlyFieldError(name)
        msg = f"'{type(self).__name__}' object has no attribute '{name}'"
        raise AttributeError(msg)

    @property
    def is_set(self) -> bool:
        """Whether the header holds a value."""
        return self._model is not None

    @property
    def model(self) -> WMOModel | None:
        """The decomposed header as a pydantic model."""
        return self._model

    @property
    def raw(self) -> str | None:
        """The complete header line."""
        return self._model.raw if self._model is not None else None

    @property
    def product(self) -> str | None:
        """The ``T1T2A1A2ii`` group."""
        return self._model.product if self._model is not None else None

    @property
    def station(self) -> str | None:
        """The originating station (``CCCC``)."""
        return self._model.station if self._model is not None else None

    @property
    def time(self) -> str | None:
        """The ``DDHHMM`` group as it appears in the line."""
        return self._model.time if self._model is not None else None

    @property
    def addendum(self) -> str | None:
        """The ``BBB`` group without parentheses, or None when absent."""
        return self._model.addendum if self._model is not None else None

    @property
    def bbb(self) -> str | None:
        return self.addendum

    @property
    def region(self) -> str | None:
        """Geographical region code, or None when T1 carries no region."""
        return self._model.region if self._model is not None else None

    @property
    def t1(self) -> str | None:
        return self._model.t1 if self._model is not None else None

    @property
    def t2(self) -> str | None:
        return self._model.t2 if self._model is not None else None

    @property
    def t1t2(self) -> str | None:
        return self._model.t1t2 if self._model is not None else None

    @property
    def tt(self) -> str | None:
        return self.t1t2

    @property
    def a1(self) -> str | None:
        return self._model.a1 if self._model is not None else None

    @property
    def a2(self) -> str | None:
        return self._model.a2 if self._model is not None else None

    @property
    def a1a2(self) -> str | None:
        return self._model.a1a2 if self._model is not None else None

    @property
    def ii(self) -> str | None:
        return self._model.ii if self._model is not None else None

    @property
    def addendum_kind(self) -> AddendumKind | None:
        """Whether the addendum marks an amendment, correction, delay or segment."""
        return self._model.addendum_kind if self._model is not None else None

    def valid_time(self, reference: datetime.datetime | None = None) -> datetime.datetime | None:
        """Resolve the time group to a UTC datetime.

        Args:
            reference: Receipt time to resolve against; defaults to now.

        Returns:
            The resolved timestamp, or None for an empty header.

        Raises:
            InvalidTimeError: If the time group cannot be resolved.

        """
        if self._model is None:
            return None
        if reference is None:
            reference = datetime.datetime.now(datetime.UTC)
        return resolve_ddhhmm(self._model.time, reference)

    def same_product(self, other: object) -> bool:
        """Return True if ``other`` has the same product group.

        Raises:
            HeaderTypeMismatchError: If ``other`` is not a header or header model.

        """
        if isinstance(other, WmoHeader):
            other_product = other.product
        elif isinstance(other, WMOModel):
            other_product = other.product
        else:
            raise HeaderTypeMismatchError(other)
        return self.product is not None and self.product == other_product

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WmoHeader):
            return NotImplemented
        return self._model == other._model

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return self.raw or ""

    def __repr__(self) -> str:
        if self._model is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._model.raw!r})"


def same_product(first: WmoHeader, second: object) -> bool:
    """Return True if both headers carry the same product group."""
    if not isinstance(first, WmoHeader):
        raise HeaderTypeMismatchError(first)
    return first.same_product(second)
