"""Errors raised when a caller violates a precondition.

Expected parse failures never raise: every ``try_parse`` returns None
instead. The exceptions below signal misuse and must not be swallowed.
Each one is also a ``ValueError`` so generic handlers still catch it.
"""

from __future__ import annotations


class DateRangeError(ValueError):
    """Base class for dateranger precondition violations."""


class NonIntersectingRangesError(DateRangeError):
    """An intersection was requested for two disjoint ranges."""


class UnsupportedTimeUnitError(DateRangeError):
    """A step or offset unit is not one of the supported time units."""


class UnboundedStartError(DateRangeError):
    """Stepping forward was requested from the negative-infinity sentinel."""


class MissingBoundError(DateRangeError):
    """A relative date range was built without a start or an end."""
