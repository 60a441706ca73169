"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from dateranger.domain import moments
from dateranger.domain.daterange import DateRange
from dateranger.domain.relative import RelativeDateTime


def moment_iso(moment: datetime) -> str:
    """ISO 8601 with millisecond precision (the library's resolution)."""
    return moment.isoformat(timespec="milliseconds")


def parse_moment(text: str) -> datetime | None:
    """Parse a moment given on the command line.

    Accepts ``today``, any relative name (``now``, ``start of last week``)
    and naive ISO 8601 dates or date-times. Returns None otherwise;
    timezone-aware input is rejected.

    Examples:
        >>> parse_moment("2024-02-29")
        datetime.datetime(2024, 2, 29, 0, 0)
        >>> parse_moment("yesterday-ish") is None
        True
    """
    candidate = text.strip()
    if candidate.lower() == "today":
        return moments.today()
    relative = RelativeDateTime.try_parse(candidate)
    if relative is not None:
        return relative.evaluate()
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        return None
    return parsed


def range_payload(date_range: DateRange) -> dict[str, Any]:
    """Serializable view of a DateRange for ServiceResult.data."""
    return {
        "start": moment_iso(date_range.start),
        "end": moment_iso(date_range.end),
        "short": date_range.to_short_string(),
        "open_start": date_range.has_open_start,
        "open_end": date_range.has_open_end,
        "seconds": date_range.time_span.total_seconds(),
    }
