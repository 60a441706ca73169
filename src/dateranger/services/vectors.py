"""VectorService — ``Next_5_Days`` style time vectors."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from dateranger.domain.intervals import TimeVector
from dateranger.services._helpers import moment_iso, range_payload
from dateranger.services.base import BaseService
from dateranger.services.result import ServiceResult


def _vector_payload(vector: TimeVector) -> dict[str, Any]:
    return {
        "vector": str(vector),
        "direction": vector.direction.value,
        "magnitude": vector.magnitude,
        "interval": vector.interval.value,
    }


class VectorService(BaseService):
    """Parse time vectors and turn them into concrete ranges."""

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* and resolve it against now."""
        return self._to_range("parse_vector", text, None)

    def resolve(self, text: str, reference: str) -> ServiceResult:
        """Parse *text* and resolve it against the moment *reference*."""
        op = "resolve_vector"
        moment = self._moment(reference)
        if moment is None:
            return ServiceResult.failure(
                op, "BAD_MOMENT", f"Not a recognized moment: {reference!r}"
            )
        return self._to_range(op, text, moment)

    def _to_range(self, op: str, text: str, reference: datetime | None) -> ServiceResult:
        vector = TimeVector.try_parse(text.strip())
        if vector is None:
            return ServiceResult.failure(
                op,
                "PARSE_FAILED",
                f"Expected '<Last|Next>_<int>_<interval>', got {text!r}",
            )
        try:
            date_range = vector.to_date_range(reference)
        except OverflowError as exc:
            return ServiceResult.failure(op, "OUT_OF_RANGE", str(exc))
        meta = {"reference": moment_iso(reference)} if reference is not None else {}
        return ServiceResult(
            ok=True,
            op=op,
            data={**_vector_payload(vector), **range_payload(date_range)},
            meta=meta,
        )
