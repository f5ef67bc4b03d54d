# pyright: strict
"""WMO header error types."""

from __future__ import annotations


class WmoHeaderError(Exception):
    """Base exception for WMO header errors."""


class InvalidHeaderError(WmoHeaderError, ValueError):
    """A candidate header line does not match the header grammar."""

    def __init__(self, header: str) -> None:
        """Initialize with the rejected header line."""
        super().__init__(f"Invalid WMO header: {header!r}")
        self.header = header


class AlreadySetError(WmoHeaderError):
    """A header that already holds a value was assigned again."""

    def __init__(self, current: str, rejected: str) -> None:
        """Initialize with the held value and the value that was refused."""
        super().__init__(f"WMO header already set to {current!r}, refusing {rejected!r}")
        self.current = current
        self.rejected = rejected


class ReadOnlyFieldError(WmoHeaderError, AttributeError):
    """A decomposed header field was written to."""

    def __init__(self, field: str) -> None:
        """Initialize with the name of the field."""
        super().__init__(f"'{field}' field of WmoHeader is read-only")
        self.field = field


class HeaderTypeMismatchError(WmoHeaderError, TypeError):
    """A header was compared against something that is not a header."""

    def __init__(self, other: object) -> None:
        """Initialize with the offending value."""
        self.other_type = type(other)
        super().__init__(f"{self.other_type.__name__} is not a WMO header")


class InvalidTimeError(WmoHeaderError, ValueError):
    """A DDHHMM group could not be resolved to a timestamp."""

    def __init__(self, ddhhmm: str, reason: str) -> None:
        """Initialize with the time group and why it was rejected."""
        super().__init__(f"Cannot resolve WMO time {ddhhmm!r}: {reason}")
        self.ddhhmm = ddhhmm
        self.reason = reason
