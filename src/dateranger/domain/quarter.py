"""Quarters of the year — value type, boundaries, and ``YYYYQ#`` parsing.

Quarters order by the integer formed by writing the year followed by the
quarter digit (``2009Q4`` -> ``20094``). That comparison is only sound
because the quarter digit is always a single character 1-4; do not reuse it
for periods with more than nine parts per year.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from dateranger.domain import moments
from dateranger.domain._parsing import try_parse_int
from dateranger.domain.periods import month_end, month_start

if TYPE_CHECKING:
    from dateranger.domain.daterange import DateRange


class QuarterOfYear(IntEnum):
    """The four quarters of a calendar year."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4

    @property
    def first_month(self) -> int:
        return 3 * (self.value - 1) + 1

    @property
    def last_month(self) -> int:
        return self.first_month + 2


def quarter_of_month(month: int) -> QuarterOfYear:
    """Map a month number to its quarter (Jan-Mar -> 1 ... Oct-Dec -> 4)."""
    if month <= 3:
        return QuarterOfYear.FIRST
    if month <= 6:
        return QuarterOfYear.SECOND
    if month <= 9:
        return QuarterOfYear.THIRD
    return QuarterOfYear.FOURTH


# --- Boundaries ---


def start_of_quarter(quarter: QuarterOfYear | int, year: int) -> datetime:
    """Midnight on the first day of *quarter* in *year*."""
    return month_start(year, QuarterOfYear(quarter).first_month)


def end_of_quarter(quarter: QuarterOfYear | int, year: int) -> datetime:
    """23:59:59.999 on the last day of *quarter* in *year*."""
    return month_end(year, QuarterOfYear(quarter).last_month)


def start_of_quarter_at(moment: datetime) -> datetime:
    return start_of_quarter(quarter_of_month(moment.month), moment.year)


def end_of_quarter_at(moment: datetime) -> datetime:
    return end_of_quarter(quarter_of_month(moment.month), moment.year)


def start_of_this_quarter() -> datetime:
    return Quarter.current().start


def end_of_this_quarter() -> datetime:
    return Quarter.current().end


def start_of_last_quarter() -> datetime:
    return Quarter.current().previous().start


def end_of_last_quarter() -> datetime:
    return Quarter.current().previous().end


def start_of_next_quarter() -> datetime:
    return Quarter.current().next().start


def end_of_next_quarter() -> datetime:
    return Quarter.current().next().end


# --- Value type ---


@functools.total_ordering
@dataclass(frozen=True)
class Quarter:
    """A (quarter, year) pair such as ``2014Q1``."""

    quarter_of_year: QuarterOfYear
    year: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "quarter_of_year", QuarterOfYear(self.quarter_of_year))

    @classmethod
    def from_moment(cls, moment: datetime) -> Quarter:
        return cls(quarter_of_month(moment.month), moment.year)

    @classmethod
    def current(cls) -> Quarter:
        """The quarter containing the current wall-clock moment."""
        return cls.from_moment(moments.now())

    @classmethod
    def try_parse(cls, text: str | None) -> Quarter | None:
        """Parse ``YYYYQ#`` (e.g. ``2009Q4``); return None if malformed."""
        if text is None:
            return None
        parts = text.split("Q")
        if len(parts) != 2:
            return None
        year = try_parse_int(parts[0])
        number = try_parse_int(parts[1])
        if year is None or number is None or not 1 <= number <= 4:
            return None
        return cls(QuarterOfYear(number), year)

    @property
    def start(self) -> datetime:
        return start_of_quarter(self.quarter_of_year, self.year)

    @property
    def end(self) -> datetime:
        return end_of_quarter(self.quarter_of_year, self.year)

    def next(self) -> Quarter:
        """The following quarter; Q4 rolls into Q1 of the next year."""
        if self.quarter_of_year is QuarterOfYear.FOURTH:
            return Quarter(QuarterOfYear.FIRST, self.year + 1)
        return Quarter(QuarterOfYear(self.quarter_of_year + 1), self.year)

    def previous(self) -> Quarter:
        """The preceding quarter; Q1 rolls back into Q4 of the previous year."""
        if self.quarter_of_year is QuarterOfYear.FIRST:
            return Quarter(QuarterOfYear.FOURTH, self.year - 1)
        return Quarter(QuarterOfYear(self.quarter_of_year - 1), self.year)

    def to_date_range(self) -> DateRange:
        from dateranger.domain.daterange import DateRange

        return DateRange(self.start, self.end)

    def _sort_key(self) -> int:
        return int(f"{self.year}{int(self.quarter_of_year)}")

    def compare_to(self, other: Quarter) -> int:
        """Negative, zero, or positive as *self* sorts before, with, or after *other*."""
        mine, theirs = self._sort_key(), other._sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quarter):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.year}Q{int(self.quarter_of_year)}"

    def to_long_string(self) -> str:
        """Long form, e.g. ``Quarter First, 2009``."""
        return f"Quarter {self.quarter_of_year.name.title()}, {self.year}"


def quarters_between(start: datetime, end: datetime) -> Iterator[Quarter]:
    """Yield quarters from the one containing *start* up to, not including, *end*'s.

    Unlike :class:`~dateranger.domain.daterange.DateRange`, which is closed,
    this sequence is half-open: the quarter that contains *end* is never
    produced, so equal quarters yield nothing.
    """
    current = Quarter.from_moment(start)
    last = Quarter.from_moment(end)
    while current.compare_to(last) < 0:
        yield current
        current = current.next()
