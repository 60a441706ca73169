"""DateRange — a closed, immutable interval of moments.

INVARIANT: ``start <= end``. The constructor swaps out-of-order bounds.

Open-ended ranges use the moment sentinels from
:mod:`dateranger.domain.moments`: a start of ``MIN_MOMENT`` means "no lower
limit" and an end of ``MAX_MOMENT`` means "no upper limit". :data:`EMPTY`
(``MIN_MOMENT`` .. ``MIN_MOMENT``) marks a failed parse or an unknown unit;
it is still an ordinary zero-width range to every operation, so callers
check for it explicitly.

Predefined ranges (``today()``, ``last_month()`` ...) are re-derived from the
wall clock on every call. Their ends sit one millisecond before the next
period begins, which suits SQL ``BETWEEN`` queries.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from types import MappingProxyType
from typing import Final

from dateranger.domain import moments, periods
from dateranger.domain.errors import (
    NonIntersectingRangesError,
    UnboundedStartError,
    UnsupportedTimeUnitError,
)
from dateranger.domain.moments import MAX_MOMENT, MILLISECOND, MIN_MOMENT, TimeUnit
from dateranger.domain.quarter import end_of_quarter_at, start_of_quarter_at

SHORT_SEPARATOR: Final[str] = "_"

# yyyy-MM-dd, ASCII digits only; calendar validity is checked separately.
_SHORT_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Bounds of the SQL Server ``datetime`` type.
SQL_MIN_MOMENT: Final[datetime] = datetime(1753, 1, 1)
SQL_MAX_MOMENT: Final[datetime] = datetime(9999, 12, 31, 23, 59, 59, 997000)


def _parse_short_date(text: str) -> datetime | None:
    if not _SHORT_DATE_PATTERN.fullmatch(text):
        return None
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


@dataclass(frozen=True)
class DateRange:
    """A closed ``[start, end]`` interval.

    Usage::

        week = DateRange.this_week()
        if week.intersects(DateRange.yesterday()):
            overlap = week.get_intersection(DateRange.yesterday())
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.end:
            first, second = self.start, self.end
            object.__setattr__(self, "start", second)
            object.__setattr__(self, "end", first)

    # --- Properties ---

    @property
    def time_span(self) -> timedelta:
        return self.end - self.start

    @property
    def has_open_start(self) -> bool:
        return moments.is_open_start(self.start)

    @property
    def has_open_end(self) -> bool:
        return moments.is_open_end(self.end)

    @property
    def is_empty(self) -> bool:
        """True when this range equals the :data:`EMPTY` sentinel."""
        return self == EMPTY

    # --- Relations ---

    def intersects(self, other: DateRange) -> bool:
        """True unless the two ranges are disjoint. Touching bounds intersect."""
        if (
            other.end < self.start
            or other.start > self.end
            or self.end < other.start
            or self.start > other.end
        ):
            return False
        return True

    def contains(self, moment: datetime) -> bool:
        """Inclusive on both ends."""
        return self.start <= moment <= self.end

    def get_intersection(self, other: DateRange) -> DateRange:
        """Return the overlap of the two ranges.

        Raises:
            NonIntersectingRangesError: If the ranges do not intersect.
        """
        if not self.intersects(other):
            msg = f"Date ranges do not intersect: {self} and {other}"
            raise NonIntersectingRangesError(msg)
        latest_start = self.start if self.start >= other.start else other.start
        earliest_end = other.end if self.end >= other.end else self.end
        return DateRange(latest_start, earliest_end)

    # --- Enumeration ---

    def enumerate_moments(self, step: TimeUnit | str) -> Iterator[datetime]:
        """Lazily yield ``start``, ``start + 1 step``, ... while ``<= end``.

        Validation happens at call time; the returned iterator restarts
        from ``start`` each time this method is called.

        Raises:
            UnsupportedTimeUnitError: If *step* is not a :class:`TimeUnit`.
            UnboundedStartError: If ``start`` is the negative-infinity sentinel.
        """
        unit = moments.coerce_unit(step)
        if unit is None:
            msg = f"Cannot step a date range by {step!r}"
            raise UnsupportedTimeUnitError(msg)
        if self.has_open_start:
            msg = "Cannot enumerate a date range with an unbounded start"
            raise UnboundedStartError(msg)
        return self._step_through(unit)

    def _step_through(self, unit: TimeUnit) -> Iterator[datetime]:
        steps = moments.iterate_moments(self.start, unit)
        try:
            yield from itertools.takewhile(lambda moment: moment <= self.end, steps)
        except OverflowError:
            # The step past the last representable moment is past ``end`` too.
            return

    # --- String forms ---

    def to_short_string(self) -> str:
        """``yyyy-MM-dd_yyyy-MM-dd``; the time of day is dropped."""
        return f"{self.start.date().isoformat()}{SHORT_SEPARATOR}{self.end.date().isoformat()}"

    @classmethod
    def try_parse_short(cls, text: str) -> DateRange | None:
        """Parse ``yyyy-MM-dd_yyyy-MM-dd`` strictly; return None on any deviation."""
        parts = text.split(SHORT_SEPARATOR)
        if len(parts) != 2:
            return None
        start = _parse_short_date(parts[0])
        end = _parse_short_date(parts[1])
        if start is None or end is None:
            return None
        return cls(start, end)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"

    # --- Period factories ---

    @classmethod
    def day(cls, moment: datetime) -> DateRange:
        """The whole day containing *moment*."""
        return cls(periods.start_of_day(moment), periods.end_of_day(moment))

    @classmethod
    def week(cls, moment: datetime) -> DateRange:
        """The Sunday-to-Saturday week containing *moment*."""
        return cls(periods.start_of_week(moment), periods.end_of_week(moment))

    @classmethod
    def month(cls, moment: datetime) -> DateRange:
        return cls(periods.start_of_month(moment), periods.end_of_month(moment))

    @classmethod
    def quarter(cls, moment: datetime) -> DateRange:
        return cls(start_of_quarter_at(moment), end_of_quarter_at(moment))

    @classmethod
    def year(cls, moment: datetime) -> DateRange:
        return cls(periods.start_of_year(moment), periods.end_of_year(moment))

    @classmethod
    def date_range_from(
        cls, reference: datetime, magnitude: int, unit: TimeUnit | str
    ) -> DateRange:
        """Range between *reference* and *reference* shifted by *magnitude* units.

        A negative magnitude reaches into the past, so the shifted moment
        becomes the start. An unrecognized *unit* yields :data:`EMPTY`
        instead of raising.

        Examples:
            ``date_range_from(now, 5, TimeUnit.MINUTE)`` spans now to five
            minutes from now; ``date_range_from(now, -1, TimeUnit.HOUR)``
            spans the last hour.
        """
        resolved = moments.coerce_unit(unit)
        if resolved is None:
            return EMPTY
        return cls(reference, moments.add_units(reference, resolved, magnitude))

    # --- Predefined ranges ---

    @classmethod
    def yesterday(cls) -> DateRange:
        midnight = moments.today()
        return cls(midnight - timedelta(days=1), midnight - MILLISECOND)

    @classmethod
    def today(cls) -> DateRange:
        midnight = moments.today()
        return cls(midnight, midnight + timedelta(days=1) - MILLISECOND)

    @classmethod
    def tomorrow(cls) -> DateRange:
        midnight = moments.today()
        return cls(midnight + timedelta(days=1), midnight + timedelta(days=2) - MILLISECOND)

    @classmethod
    def this_week(cls) -> DateRange:
        return cls(periods.start_of_this_week(), periods.end_of_this_week())

    @classmethod
    def last_week(cls) -> DateRange:
        return cls(periods.start_of_last_week(), periods.end_of_last_week())

    @classmethod
    def next_week(cls) -> DateRange:
        return cls(periods.start_of_next_week(), periods.end_of_next_week())

    @classmethod
    def this_month(cls) -> DateRange:
        return cls(periods.start_of_this_month(), periods.end_of_this_month())

    @classmethod
    def last_month(cls) -> DateRange:
        return cls(periods.start_of_last_month(), periods.end_of_last_month())

    @classmethod
    def next_month(cls) -> DateRange:
        return cls(periods.start_of_next_month(), periods.end_of_next_month())

    @classmethod
    def this_year(cls) -> DateRange:
        return cls(periods.start_of_this_year(), periods.end_of_this_year())

    @classmethod
    def last_year(cls) -> DateRange:
        return cls(periods.start_of_last_year(), periods.end_of_last_year())

    @classmethod
    def next_year(cls) -> DateRange:
        return cls(periods.start_of_next_year(), periods.end_of_next_year())

    @classmethod
    def the_past(cls) -> DateRange:
        """Everything up to one millisecond before now."""
        return cls(MIN_MOMENT, moments.now() - MILLISECOND)

    @classmethod
    def the_future(cls) -> DateRange:
        """Everything from one millisecond after now."""
        return cls(moments.now() + MILLISECOND, MAX_MOMENT)

    @classmethod
    def max_sql_range(cls) -> DateRange:
        """The widest range a SQL ``datetime`` column can store."""
        return cls(SQL_MIN_MOMENT, SQL_MAX_MOMENT)

    @classmethod
    def past_sql_range(cls) -> DateRange:
        """SQL ``datetime`` minimum up to now."""
        return cls(SQL_MIN_MOMENT, moments.now())


EMPTY: Final[DateRange] = DateRange(MIN_MOMENT, MIN_MOMENT)

PREDEFINED_RANGES: Final[Mapping[str, Callable[[], DateRange]]] = MappingProxyType(
    {
        "yesterday": DateRange.yesterday,
        "today": DateRange.today,
        "tomorrow": DateRange.tomorrow,
        "this_week": DateRange.this_week,
        "last_week": DateRange.last_week,
        "next_week": DateRange.next_week,
        "this_month": DateRange.this_month,
        "last_month": DateRange.last_month,
        "next_month": DateRange.next_month,
        "this_year": DateRange.this_year,
        "last_year": DateRange.last_year,
        "next_year": DateRange.next_year,
        "the_past": DateRange.the_past,
        "the_future": DateRange.the_future,
        "max_sql_range": DateRange.max_sql_range,
        "past_sql_range": DateRange.past_sql_range,
    }
)
