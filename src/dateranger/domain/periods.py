"""Calendar period boundaries — day, week, month, and year.

Pure functions. A period starts at midnight of its first day and ends at
23:59:59.999 of its last day, so a closed range built from the two matches
the SQL ``BETWEEN`` idiom at millisecond precision. Weeks begin on Sunday.

The ``*_this_*`` / ``*_last_*`` / ``*_next_*`` variants read the wall
clock at call time; nothing here is cached.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from dateranger.domain import moments

# Python numbers weekdays from Monday=0; weeks here start on Sunday.
SUNDAY = calendar.SUNDAY


def _last_instant(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 23, 59, 59, 999000)


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year*, leap years included."""
    return calendar.monthrange(year, month)[1]


# --- Day ---


def start_of_day(moment: datetime) -> datetime:
    """Midnight at the start of the day containing *moment*."""
    return datetime(moment.year, moment.month, moment.day)


def end_of_day(moment: datetime) -> datetime:
    """23:59:59.999 on the day containing *moment*."""
    return _last_instant(moment.year, moment.month, moment.day)


def start_of_today() -> datetime:
    return start_of_day(moments.now())


def end_of_today() -> datetime:
    return end_of_day(moments.now())


def start_of_yesterday() -> datetime:
    return start_of_day(moments.now() - timedelta(days=1))


def end_of_yesterday() -> datetime:
    return end_of_day(moments.now() - timedelta(days=1))


def start_of_tomorrow() -> datetime:
    return start_of_day(moments.now() + timedelta(days=1))


def end_of_tomorrow() -> datetime:
    return end_of_day(moments.now() + timedelta(days=1))


def next_weekday_occurrence(weekday: int, starting: datetime) -> datetime:
    """First moment strictly after *starting* that falls on *weekday*.

    *weekday* uses Python numbering (``calendar.MONDAY`` .. ``calendar.SUNDAY``).
    The time of day of *starting* is kept.
    """
    ahead = (weekday - starting.weekday()) % 7 or 7
    return starting + timedelta(days=ahead)


# --- Week ---


def start_of_week(moment: datetime) -> datetime:
    """Midnight on the Sunday that opens the week containing *moment*."""
    days_since_sunday = (moment.weekday() - SUNDAY) % 7
    return start_of_day(moment - timedelta(days=days_since_sunday))


def end_of_week(moment: datetime) -> datetime:
    """23:59:59.999 on the Saturday that closes the week containing *moment*."""
    return end_of_day(start_of_week(moment) + timedelta(days=6))


def start_of_this_week() -> datetime:
    return start_of_week(moments.now())


def end_of_this_week() -> datetime:
    return end_of_week(moments.now())


def start_of_last_week() -> datetime:
    return start_of_this_week() - timedelta(days=7)


def end_of_last_week() -> datetime:
    return end_of_this_week() - timedelta(days=7)


def start_of_next_week() -> datetime:
    return start_of_this_week() + timedelta(days=7)


def end_of_next_week() -> datetime:
    return end_of_this_week() + timedelta(days=7)


# --- Month ---


def month_start(year: int, month: int) -> datetime:
    """Midnight on the first day of *month* in *year*."""
    return datetime(year, month, 1)


def month_end(year: int, month: int) -> datetime:
    """23:59:59.999 on the last day of *month* in *year*."""
    return _last_instant(year, month, days_in_month(year, month))


def start_of_month(moment: datetime) -> datetime:
    return month_start(moment.year, moment.month)


def end_of_month(moment: datetime) -> datetime:
    return month_end(moment.year, moment.month)


def _shift_month(months: int) -> datetime:
    return start_of_month(moments.now()) + relativedelta(months=months)


def start_of_this_month() -> datetime:
    return start_of_month(moments.now())


def end_of_this_month() -> datetime:
    return end_of_month(moments.now())


def start_of_last_month() -> datetime:
    return _shift_month(-1)


def end_of_last_month() -> datetime:
    return end_of_month(_shift_month(-1))


def start_of_next_month() -> datetime:
    return _shift_month(1)


def end_of_next_month() -> datetime:
    return end_of_month(_shift_month(1))


def next_month_occurrence(month: int, starting: datetime) -> datetime:
    """First moment after *starting*, stepping whole months, that lands in *month*.

    Day-of-month clamps the same way month addition does.
    """
    candidate = starting
    for _ in range(12):
        candidate = candidate + relativedelta(months=1)
        if candidate.month == month:
            return candidate
    msg = f"Month must be between 1 and 12, got {month}"
    raise ValueError(msg)


# --- Year ---


def year_start(year: int) -> datetime:
    """Midnight on January 1st of *year*."""
    return datetime(year, 1, 1)


def year_end(year: int) -> datetime:
    """23:59:59.999 on December 31st of *year*."""
    return _last_instant(year, 12, days_in_month(year, 12))


def start_of_year(moment: datetime) -> datetime:
    return year_start(moment.year)


def end_of_year(moment: datetime) -> datetime:
    return year_end(moment.year)


def start_of_this_year() -> datetime:
    return year_start(moments.now().year)


def end_of_this_year() -> datetime:
    return year_end(moments.now().year)


def start_of_last_year() -> datetime:
    return year_start(moments.now().year - 1)


def end_of_last_year() -> datetime:
    return year_end(moments.now().year - 1)


def start_of_next_year() -> datetime:
    return year_start(moments.now().year + 1)


def end_of_next_year() -> datetime:
    return year_end(moments.now().year + 1)
