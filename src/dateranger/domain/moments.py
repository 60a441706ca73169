"""Moments, open-bound sentinels, time units, and calendar-aware arithmetic.

A moment is a naive ``datetime``. There is no nullable open end: the
representable minimum and maximum stand in for negative and positive
infinity, and :func:`is_open_bound` is the one place that recognizes them.

Month and year arithmetic follows ``dateutil.relativedelta`` so adding a
month to January 31st clamps to the last day of February instead of
spilling into March.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime, timedelta
from enum import StrEnum
from typing import Final

from dateutil.relativedelta import relativedelta

from dateranger.domain.errors import UnsupportedTimeUnitError

MIN_MOMENT: Final[datetime] = datetime.min
MAX_MOMENT: Final[datetime] = datetime.max

MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)


class TimeUnit(StrEnum):
    """Units a range can be stepped or offset by."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    MINUTE = "minute"
    HOUR = "hour"


_DELTAS: Final[dict[TimeUnit, Callable[[int], timedelta | relativedelta]]] = {
    TimeUnit.MINUTE: lambda n: timedelta(minutes=n),
    TimeUnit.HOUR: lambda n: timedelta(hours=n),
    TimeUnit.DAY: lambda n: timedelta(days=n),
    TimeUnit.WEEK: lambda n: timedelta(days=7 * n),
    TimeUnit.MONTH: lambda n: relativedelta(months=n),
    TimeUnit.YEAR: lambda n: relativedelta(years=n),
}


# --- Open bounds ---


def is_open_start(moment: datetime) -> bool:
    """True when *moment* is the negative-infinity sentinel."""
    return moment == MIN_MOMENT


def is_open_end(moment: datetime) -> bool:
    """True when *moment* is the positive-infinity sentinel."""
    return moment == MAX_MOMENT


def is_open_bound(moment: datetime) -> bool:
    """True when *moment* stands for an unbounded side of a range."""
    return is_open_start(moment) or is_open_end(moment)


# --- Wall clock ---


def now() -> datetime:
    """Current local time, truncated to whole milliseconds."""
    moment = datetime.now()
    return moment.replace(microsecond=moment.microsecond - moment.microsecond % 1000)


def today() -> datetime:
    """Midnight at the start of the current local day."""
    return truncate_to_date(now())


def truncate_to_date(moment: datetime) -> datetime:
    """Drop the time-of-day part of *moment*."""
    return datetime(moment.year, moment.month, moment.day)


# --- Units ---


def coerce_unit(value: object) -> TimeUnit | None:
    """Return the :class:`TimeUnit` named by *value*, or None if it names none."""
    if isinstance(value, TimeUnit):
        return value
    if isinstance(value, str):
        try:
            return TimeUnit(value.strip().lower())
        except ValueError:
            return None
    return None


def add_units(moment: datetime, unit: TimeUnit, magnitude: int) -> datetime:
    """Shift *moment* by *magnitude* units using calendar-aware addition.

    Raises:
        UnsupportedTimeUnitError: If *unit* is not a :class:`TimeUnit`.
        OverflowError: If the result falls outside the representable range.
    """
    make_delta = _DELTAS.get(unit) if isinstance(unit, TimeUnit) else None
    if make_delta is None:
        msg = f"Unsupported time unit: {unit!r}"
        raise UnsupportedTimeUnitError(msg)
    try:
        return moment + make_delta(magnitude)
    except ValueError as exc:
        # relativedelta reports an out-of-range year as ValueError
        raise OverflowError(str(exc)) from exc


def iterate_moments(start: datetime, step: TimeUnit) -> Iterator[datetime]:
    """Yield *start*, then *start* advanced by one *step* at a time, forever.

    The sequence has no end; the consumer stops it by no longer pulling.
    An unrecognized *step* produces an empty sequence rather than an error.
    """
    unit = coerce_unit(step)
    if unit is None:
        return
    current = start
    while True:
        yield current
        current = add_units(current, unit, 1)
