"""Time intervals and time vectors — ``Next_5_Days`` style offsets.

A :class:`TimeVector` is a direction, a magnitude, and a
:class:`TimeInterval`. It stays symbolic until :meth:`TimeVector.to_date_range`
resolves it against a reference moment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from dateranger.domain import moments
from dateranger.domain._parsing import try_parse_int
from dateranger.domain.daterange import DateRange
from dateranger.domain.moments import TimeUnit

VECTOR_SEPARATOR: Final[str] = "_"


class TimeInterval(StrEnum):
    """Closed set of interval names. The value is the singular display name."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"
    MINUTE = "Minute"
    HOUR = "Hour"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def optional_plural(self) -> str:
        return f"{self.value}(s)"

    @property
    def unit(self) -> TimeUnit:
        return TimeUnit(self.value.lower())

    @classmethod
    def try_parse(cls, text: str) -> TimeInterval | None:
        """Look up an interval, tolerating ``Days`` and ``Day(s)`` plurals.

        Matching is case-insensitive. Returns None for unknown names.
        """
        key = text.strip().lower()
        if key.endswith("(s)"):
            key = key[: -len("(s)")]
        elif key.endswith("s"):
            key = key[:-1]
        return _BY_NAME.get(key)


_BY_NAME: Final[Mapping[str, TimeInterval]] = MappingProxyType(
    {member.value.lower(): member for member in TimeInterval}
)


class TimeDirection(StrEnum):
    """Which way a vector points from its reference moment."""

    LAST = "Last"  # past
    NEXT = "Next"  # future


@dataclass(frozen=True)
class TimeVector:
    """A symbolic offset such as ``Next_5_Days`` or ``Last_3_Hours``."""

    direction: TimeDirection
    magnitude: int
    interval: TimeInterval

    @classmethod
    def try_parse(cls, text: str) -> TimeVector | None:
        """Parse ``<Last|Next>_<int>_<interval>``; None if malformed.

        Any direction token other than ``next`` (in any case) reads as
        ``Last``, so only the magnitude and the interval can fail a parse.
        """
        parts = text.split(VECTOR_SEPARATOR)
        if len(parts) != 3:
            return None
        direction = TimeDirection.NEXT if parts[0].lower() == "next" else TimeDirection.LAST
        magnitude = try_parse_int(parts[1])
        if magnitude is None:
            return None
        interval = TimeInterval.try_parse(parts[2])
        if interval is None:
            return None
        return cls(direction, magnitude, interval)

    @property
    def signed_magnitude(self) -> int:
        """Magnitude, negated when the vector points into the past."""
        if self.direction is TimeDirection.LAST:
            return -self.magnitude
        return self.magnitude

    def to_date_range(self, reference: datetime | None = None) -> DateRange:
        """Resolve against *reference* (default: now) into a concrete range."""
        if reference is None:
            reference = moments.now()
        return DateRange.date_range_from(reference, self.signed_magnitude, self.interval.unit)

    def __str__(self) -> str:
        return VECTOR_SEPARATOR.join(
            (self.direction.value, str(self.magnitude), self.interval.value)
        )
