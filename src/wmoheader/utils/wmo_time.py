# pyright: strict
"""Resolve the DDHHMM group of a WMO header to a UTC timestamp."""

from __future__ import annotations

import calendar
import datetime

from wmoheader.errors import InvalidTimeError

FUTURE_TOLERANCE = datetime.timedelta(days=1)
"""How far past the reference time a resolved timestamp may land."""

_MAX_MONTHS_BACK = 12


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def resolve_ddhhmm(ddhhmm: str, reference: datetime.datetime) -> datetime.datetime:
    """Resolve a DDHHMM group against a reference time.

    The header only carries day of month, hour and minute. The month and
    year are taken from ``reference``, stepping back one month at a time
    until the day exists and the result is no more than
    ``FUTURE_TOLERANCE`` after the reference.

    Args:
        ddhhmm: Six digit time group from the header.
        reference: Time the bulletin was received. Naive values are taken
            as UTC.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        InvalidTimeError: If the group is not six digits or names an
            impossible day, hour or minute.

    """
    if len(ddhhmm) != 6 or not (ddhhmm.isascii() and ddhhmm.isdigit()):
        raise InvalidTimeError(ddhhmm, "expected six digits DDHHMM")

    day, hour, minute = int(ddhhmm[0:2]), int(ddhhmm[2:4]), int(ddhhmm[4:6])
    if not 1 <= day <= 31:
        raise InvalidTimeError(ddhhmm, "day out of range")
    if hour > 23:
        raise InvalidTimeError(ddhhmm, "hour out of range")
    if minute > 59:
        raise InvalidTimeError(ddhhmm, "minute out of range")

    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=datetime.UTC)
    else:
        reference = reference.astimezone(datetime.UTC)

    year, month = reference.year, reference.month
    for _ in range(_MAX_MONTHS_BACK):
        if day <= calendar.monthrange(year, month)[1]:
            candidate = datetime.datetime(year, month, day, hour, minute, tzinfo=datetime.UTC)
            if candidate - reference <= FUTURE_TOLERANCE:
                return candidate
        year, month = _previous_month(year, month)

    raise InvalidTimeError(ddhhmm, "no matching month near reference time")
