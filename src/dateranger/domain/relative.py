"""Relative moments and ranges — plain-English anchors resolved at call time.

:class:`RelativeDateTime` is a closed set of named anchors ("Now",
"Start of Last Week", "14 Days Ago", ...). Each member is bound to an
evaluator in a read-only table built at import time; nothing can be added
or removed afterwards. Names match case-insensitively.

:class:`RelativeDateRange` pairs two anchors into ``<name>_<name>``
strings such as ``14 Days Ago_Now``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from dateranger.domain import moments, periods
from dateranger.domain.daterange import DateRange
from dateranger.domain.errors import MissingBoundError

RANGE_SEPARATOR: Final[str] = "_"


class RelativeDateTime(StrEnum):
    """Named moments relative to now. The value is the display name."""

    NOW = "Now"

    START_OF_YESTERDAY = "Start of Yesterday"
    END_OF_YESTERDAY = "End of Yesterday"
    START_OF_TOMORROW = "Start of Tomorrow"
    END_OF_TOMORROW = "End of Tomorrow"

    ANY_TIME_IN_PAST = "Any Time in Past"
    ANY_TIME_IN_FUTURE = "Any Time in Future"

    START_OF_LAST_WEEK = "Start of Last Week"
    START_OF_THIS_WEEK = "Start of This Week"
    START_OF_NEXT_WEEK = "Start of Next Week"
    END_OF_LAST_WEEK = "End of Last Week"
    END_OF_THIS_WEEK = "End of This Week"
    END_OF_NEXT_WEEK = "End of Next Week"

    SEVEN_DAYS_AGO = "7 Days Ago"
    FOURTEEN_DAYS_AGO = "14 Days Ago"
    TWENTY_EIGHT_DAYS_AGO = "28 Days Ago"
    SEVEN_DAYS_FROM_NOW = "7 Days From Now"
    FOURTEEN_DAYS_FROM_NOW = "14 Days From Now"
    TWENTY_EIGHT_DAYS_FROM_NOW = "28 Days From Now"

    START_OF_LAST_MONTH = "Start of Last Month"
    START_OF_THIS_MONTH = "Start of This Month"
    START_OF_NEXT_MONTH = "Start of Next Month"
    END_OF_LAST_MONTH = "End of Last Month"
    END_OF_THIS_MONTH = "End of This Month"
    END_OF_NEXT_MONTH = "End of Next Month"

    START_OF_LAST_YEAR = "Start of Last Year"
    START_OF_THIS_YEAR = "Start of This Year"
    START_OF_NEXT_YEAR = "Start of Next Year"
    END_OF_LAST_YEAR = "End of Last Year"
    END_OF_THIS_YEAR = "End of This Year"
    END_OF_NEXT_YEAR = "End of Next Year"

    @property
    def display_name(self) -> str:
        return self.value

    def evaluate(self) -> datetime:
        """Resolve this anchor against the current wall clock."""
        return _EVALUATORS[self]()

    @classmethod
    def try_parse(cls, name: str) -> RelativeDateTime | None:
        """Case-insensitive exact-name lookup; None if the name is unknown."""
        return _BY_NAME.get(name.lower())

    @classmethod
    def from_name(cls, name: str) -> RelativeDateTime:
        """Like :meth:`try_parse` but raises ``KeyError`` for unknown names."""
        found = cls.try_parse(name)
        if found is None:
            msg = f"Unknown relative date/time: {name!r}"
            raise KeyError(msg)
        return found

    @classmethod
    def items(cls) -> list[RelativeDateTime]:
        """All anchors, sorted by lower-cased name."""
        return [_BY_NAME[key] for key in sorted(_BY_NAME)]


def _days_from_now(days: int) -> Callable[[], datetime]:
    return lambda: moments.now() + timedelta(days=days)


_EVALUATORS: Final[Mapping[RelativeDateTime, Callable[[], datetime]]] = MappingProxyType(
    {
        RelativeDateTime.NOW: lambda: moments.now(),
        RelativeDateTime.START_OF_YESTERDAY: periods.start_of_yesterday,
        RelativeDateTime.END_OF_YESTERDAY: periods.end_of_yesterday,
        RelativeDateTime.START_OF_TOMORROW: periods.start_of_tomorrow,
        RelativeDateTime.END_OF_TOMORROW: periods.end_of_tomorrow,
        RelativeDateTime.ANY_TIME_IN_PAST: lambda: moments.MIN_MOMENT,
        RelativeDateTime.ANY_TIME_IN_FUTURE: lambda: moments.MAX_MOMENT,
        RelativeDateTime.START_OF_LAST_WEEK: periods.start_of_last_week,
        RelativeDateTime.START_OF_THIS_WEEK: periods.start_of_this_week,
        RelativeDateTime.START_OF_NEXT_WEEK: periods.start_of_next_week,
        RelativeDateTime.END_OF_LAST_WEEK: periods.end_of_last_week,
        RelativeDateTime.END_OF_THIS_WEEK: periods.end_of_this_week,
        RelativeDateTime.END_OF_NEXT_WEEK: periods.end_of_next_week,
        RelativeDateTime.SEVEN_DAYS_AGO: _days_from_now(-7),
        RelativeDateTime.FOURTEEN_DAYS_AGO: _days_from_now(-14),
        RelativeDateTime.TWENTY_EIGHT_DAYS_AGO: _days_from_now(-28),
        RelativeDateTime.SEVEN_DAYS_FROM_NOW: _days_from_now(7),
        RelativeDateTime.FOURTEEN_DAYS_FROM_NOW: _days_from_now(14),
        RelativeDateTime.TWENTY_EIGHT_DAYS_FROM_NOW: _days_from_now(28),
        RelativeDateTime.START_OF_LAST_MONTH: periods.start_of_last_month,
        RelativeDateTime.START_OF_THIS_MONTH: periods.start_of_this_month,
        RelativeDateTime.START_OF_NEXT_MONTH: periods.start_of_next_month,
        RelativeDateTime.END_OF_LAST_MONTH: periods.end_of_last_month,
        RelativeDateTime.END_OF_THIS_MONTH: periods.end_of_this_month,
        RelativeDateTime.END_OF_NEXT_MONTH: periods.end_of_next_month,
        RelativeDateTime.START_OF_LAST_YEAR: periods.start_of_last_year,
        RelativeDateTime.START_OF_THIS_YEAR: periods.start_of_this_year,
        RelativeDateTime.START_OF_NEXT_YEAR: periods.start_of_next_year,
        RelativeDateTime.END_OF_LAST_YEAR: periods.end_of_last_year,
        RelativeDateTime.END_OF_THIS_YEAR: periods.end_of_this_year,
        RelativeDateTime.END_OF_NEXT_YEAR: periods.end_of_next_year,
    }
)

_BY_NAME: Final[Mapping[str, RelativeDateTime]] = MappingProxyType(
    {member.value.lower(): member for member in RelativeDateTime}
)


@dataclass(frozen=True)
class RelativeDateRange:
    """A range whose bounds are :class:`RelativeDateTime` anchors.

    The bounds are ordered by their evaluated moments at construction
    time. Anchors like "Now" drift, so two ranges built from the same pair
    at different times may order differently.
    """

    start: RelativeDateTime
    end: RelativeDateTime

    def __post_init__(self) -> None:
        if self.start is None:
            msg = "RelativeDateRange requires a start"
            raise MissingBoundError(msg)
        if self.end is None:
            msg = "RelativeDateRange requires an end"
            raise MissingBoundError(msg)
        if not self.start.evaluate() < self.end.evaluate():
            first, second = self.start, self.end
            object.__setattr__(self, "start", second)
            object.__setattr__(self, "end", first)

    @property
    def time_span(self) -> timedelta:
        return self.end.evaluate() - self.start.evaluate()

    def to_date_range(self) -> DateRange:
        """Evaluate both anchors now and build a concrete range."""
        return DateRange(self.start.evaluate(), self.end.evaluate())

    def to_string(self) -> str:
        """The parseable ``<name>_<name>`` form."""
        return f"{self.start.value}{RANGE_SEPARATOR}{self.end.value}"

    def __str__(self) -> str:
        return f"{self.start.value} - {self.end.value}"

    @classmethod
    def try_parse(cls, text: str) -> RelativeDateRange | None:
        """Parse ``<name>_<name>`` (e.g. ``now_start of last month``); None on failure."""
        parts = text.split(RANGE_SEPARATOR)
        if len(parts) != 2:
            return None
        start = RelativeDateTime.try_parse(parts[0])
        end = RelativeDateTime.try_parse(parts[1])
        if start is None or end is None:
            return None
        return cls(start, end)
