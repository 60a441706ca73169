"""RangeService — resolve, combine, and enumerate concrete date ranges.

Range arguments are free text. :func:`resolve_range` tries each codec in
the configured order (``[resolve] order``) and returns the first hit:

- ``short``       ``2024-01-01_2024-03-31``
- ``predefined``  ``today``, ``last month``, ``this_year`` ...
- ``relative``    ``14 Days Ago_Now``
- ``vector``      ``Last_3_Hours`` (resolved against now)
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Final

from dateranger.domain.daterange import PREDEFINED_RANGES, DateRange
from dateranger.domain.errors import (
    NonIntersectingRangesError,
    UnboundedStartError,
    UnsupportedTimeUnitError,
)
from dateranger.domain.intervals import TimeVector
from dateranger.domain.moments import TimeUnit, coerce_unit
from dateranger.domain.relative import RelativeDateRange
from dateranger.services._helpers import moment_iso, range_payload
from dateranger.services.base import BaseService
from dateranger.services.result import ServiceResult

logger = logging.getLogger(__name__)

PERIOD_FACTORIES: Final[dict[str, Callable[[datetime], DateRange]]] = {
    "day": DateRange.day,
    "week": DateRange.week,
    "month": DateRange.month,
    "quarter": DateRange.quarter,
    "year": DateRange.year,
}


def _predefined_key(text: str) -> str:
    return "_".join(text.strip().lower().replace("_", " ").split())


def _from_short(text: str) -> DateRange | None:
    return DateRange.try_parse_short(text.strip())


def _from_predefined(text: str) -> DateRange | None:
    factory = PREDEFINED_RANGES.get(_predefined_key(text))
    return factory() if factory is not None else None


def _from_relative(text: str) -> DateRange | None:
    relative = RelativeDateRange.try_parse(text.strip())
    return relative.to_date_range() if relative is not None else None


def _from_vector(text: str) -> DateRange | None:
    vector = TimeVector.try_parse(text.strip())
    return vector.to_date_range() if vector is not None else None


_CODECS: Final[dict[str, Callable[[str], DateRange | None]]] = {
    "short": _from_short,
    "predefined": _from_predefined,
    "relative": _from_relative,
    "vector": _from_vector,
}


def resolve_range(text: str, order: Sequence[str]) -> tuple[str, DateRange] | None:
    """Return ``(codec, range)`` for the first codec in *order* that parses *text*.

    Raises:
        OverflowError: If a codec parses *text* but the range it names falls
            outside the representable moments (``Next_99999999_Days``).
    """
    for codec in order:
        parsed = _CODECS[codec](text)
        if parsed is not None:
            logger.debug("Resolved %r with the %s codec", text, codec)
            return codec, parsed
    logger.debug("No codec in %s could resolve %r", list(order), text)
    return None


class RangeService(BaseService):
    """Operations over concrete :class:`DateRange` values."""

    def _resolve(self, op: str, text: str) -> tuple[str, DateRange] | ServiceResult:
        """Resolve *text*, or return the failure result for *op*."""
        order = self._settings.resolve.order
        try:
            resolved = resolve_range(text, order)
        except OverflowError as exc:
            return ServiceResult.failure(op, "OUT_OF_RANGE", str(exc), text=text)
        if resolved is None:
            return ServiceResult.failure(
                op,
                "PARSE_FAILED",
                f"Not a recognized date range: {text!r}",
                text=text,
                tried=list(order),
            )
        return resolved

    def parse(self, text: str) -> ServiceResult:
        """Resolve *text* through the configured codecs."""
        op = "parse_range"
        resolved = self._resolve(op, text)
        if isinstance(resolved, ServiceResult):
            return resolved
        codec, date_range = resolved
        return ServiceResult(
            ok=True,
            op=op,
            data=range_payload(date_range),
            meta={"codec": codec},
        )

    def predefined(self, name: str) -> ServiceResult:
        """Evaluate a predefined range such as ``today`` or ``last_month``."""
        op = "predefined_range"
        factory = PREDEFINED_RANGES.get(_predefined_key(name))
        if factory is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_RANGE",
                f"Unknown predefined range: {name!r}",
                available=sorted(PREDEFINED_RANGES),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": _predefined_key(name), **range_payload(factory())},
        )

    def list_predefined(self) -> ServiceResult:
        """Evaluate every predefined range now."""
        items = [
            {"name": name, **range_payload(factory())}
            for name, factory in sorted(PREDEFINED_RANGES.items())
        ]
        return ServiceResult(ok=True, op="list_predefined", data={"items": items})

    def period(self, period: str, at: str) -> ServiceResult:
        """The day / week / month / quarter / year containing the moment *at*."""
        op = "period_range"
        factory = PERIOD_FACTORIES.get(period.lower())
        if factory is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_PERIOD",
                f"Unknown period: {period!r}",
                available=list(PERIOD_FACTORIES),
            )
        moment = self._moment(at)
        if moment is None:
            return ServiceResult.failure(op, "BAD_MOMENT", f"Not a recognized moment: {at!r}")
        try:
            date_range = factory(moment)
        except (OverflowError, ValueError) as exc:
            # The period around MIN_MOMENT or MAX_MOMENT leaves the calendar.
            return ServiceResult.failure(
                op, "OUT_OF_RANGE", f"No {period.lower()} around {at!r}: {exc}"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"period": period.lower(), **range_payload(date_range)},
        )

    def offset(self, reference: str, magnitude: int, unit: str) -> ServiceResult:
        """Range between *reference* and *reference* shifted by *magnitude* units."""
        op = "offset_range"
        moment = self._moment(reference)
        if moment is None:
            return ServiceResult.failure(
                op, "BAD_MOMENT", f"Not a recognized moment: {reference!r}"
            )
        try:
            date_range = DateRange.date_range_from(moment, magnitude, unit)
        except OverflowError as exc:
            return ServiceResult.failure(op, "OUT_OF_RANGE", str(exc))
        # An unknown unit comes back as the EMPTY sentinel, not an exception.
        if date_range.is_empty:
            return ServiceResult.failure(
                op,
                "UNSUPPORTED_UNIT",
                f"Unsupported time unit: {unit!r}",
                available=[u.value for u in TimeUnit],
            )
        return ServiceResult(ok=True, op=op, data=range_payload(date_range))

    def intersect(self, first: str, second: str) -> ServiceResult:
        """The overlap of two ranges; fails when they are disjoint."""
        op = "intersect_ranges"
        resolved_first = self._resolve(op, first)
        if isinstance(resolved_first, ServiceResult):
            return resolved_first
        resolved_second = self._resolve(op, second)
        if isinstance(resolved_second, ServiceResult):
            return resolved_second
        a, b = resolved_first[1], resolved_second[1]
        try:
            overlap = a.get_intersection(b)
        except NonIntersectingRangesError as exc:
            return ServiceResult.failure(
                op,
                "NO_INTERSECTION",
                str(exc),
                first=range_payload(a),
                second=range_payload(b),
            )
        return ServiceResult(ok=True, op=op, data=range_payload(overlap))

    def contains(self, range_text: str, at: str) -> ServiceResult:
        """Whether the moment *at* lies inside the range (inclusive)."""
        op = "contains_moment"
        resolved = self._resolve(op, range_text)
        if isinstance(resolved, ServiceResult):
            return resolved
        moment = self._moment(at)
        if moment is None:
            return ServiceResult.failure(op, "BAD_MOMENT", f"Not a recognized moment: {at!r}")
        date_range = resolved[1]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "contains": date_range.contains(moment),
                "moment": moment_iso(moment),
                **range_payload(date_range),
            },
        )

    def enumerate(
        self,
        range_text: str,
        *,
        step: str | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """Step through a range, pulling at most *limit* moments.

        Defaults come from the ``[enumerate]`` config section.
        """
        op = "enumerate_range"
        resolved = self._resolve(op, range_text)
        if isinstance(resolved, ServiceResult):
            return resolved
        date_range = resolved[1]
        step_arg = step if step is not None else self._settings.enumerate.default_step
        max_items = limit if limit is not None else self._settings.enumerate.max_items

        try:
            sequence = date_range.enumerate_moments(step_arg)
        except UnsupportedTimeUnitError as exc:
            return ServiceResult.failure(
                op,
                "UNSUPPORTED_UNIT",
                str(exc),
                available=[u.value for u in TimeUnit],
            )
        except UnboundedStartError as exc:
            return ServiceResult.failure(op, "UNBOUNDED_START", str(exc))

        pulled = list(itertools.islice(sequence, max_items + 1))
        warnings: list[str] = []
        truncated = len(pulled) > max_items
        if truncated:
            pulled = pulled[:max_items]
            warnings.append(f"Stopped after {max_items} moments; raise --limit to see more")
        items = [{"moment": moment_iso(m)} for m in pulled]
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
            warnings=warnings,
            meta={"step": str(coerce_unit(step_arg)), "truncated": truncated},
        )
