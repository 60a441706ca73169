"""QuarterService — ``YYYYQ#`` parsing and quarter sequences."""

from __future__ import annotations

from typing import Any

from dateranger.domain.quarter import Quarter, quarters_between
from dateranger.services._helpers import moment_iso
from dateranger.services.base import BaseService
from dateranger.services.result import ServiceResult


def _quarter_payload(quarter: Quarter) -> dict[str, Any]:
    return {
        "quarter": str(quarter),
        "long": quarter.to_long_string(),
        "start": moment_iso(quarter.start),
        "end": moment_iso(quarter.end),
    }


class QuarterService(BaseService):
    """Quarter lookups and half-open quarter sequences."""

    def parse(self, text: str) -> ServiceResult:
        op = "parse_quarter"
        quarter = Quarter.try_parse(text.strip())
        if quarter is None:
            return ServiceResult.failure(
                op, "PARSE_FAILED", f"Expected 'YYYYQ#' with # in 1-4, got {text!r}"
            )
        try:
            payload = _quarter_payload(quarter)
        except ValueError as exc:
            # Any integer year parses; only 1..9999 has calendar dates.
            return ServiceResult.failure(
                op, "OUT_OF_RANGE", f"Quarter {quarter} has no calendar dates: {exc}"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={**payload, "next": str(quarter.next())},
        )

    def between(self, start: str, end: str) -> ServiceResult:
        """Quarters from *start*'s up to, but excluding, *end*'s."""
        op = "quarters_between"
        start_moment = self._moment(start)
        if start_moment is None:
            return ServiceResult.failure(op, "BAD_MOMENT", f"Not a recognized moment: {start!r}")
        end_moment = self._moment(end)
        if end_moment is None:
            return ServiceResult.failure(op, "BAD_MOMENT", f"Not a recognized moment: {end!r}")
        try:
            items = [_quarter_payload(q) for q in quarters_between(start_moment, end_moment)]
        except ValueError as exc:
            return ServiceResult.failure(op, "OUT_OF_RANGE", str(exc))
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
