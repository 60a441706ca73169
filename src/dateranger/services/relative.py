"""RelativeService — symbolic anchors resolved against the wall clock."""

from __future__ import annotations

import logging

from dateranger.domain.relative import RelativeDateRange, RelativeDateTime
from dateranger.services._helpers import moment_iso, range_payload
from dateranger.services.base import BaseService
from dateranger.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RelativeService(BaseService):
    """Lookups against the fixed :class:`RelativeDateTime` registry."""

    def list_names(self) -> ServiceResult:
        """Every registered anchor with its current value, sorted by name."""
        items = [
            {"name": anchor.value, "moment": moment_iso(anchor.evaluate())}
            for anchor in RelativeDateTime.items()
        ]
        return ServiceResult(ok=True, op="list_relative", data={"items": items})

    def resolve(self, name: str) -> ServiceResult:
        op = "resolve_relative"
        anchor = RelativeDateTime.try_parse(name)
        if anchor is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_NAME",
                f"Unknown relative date/time: {name!r}",
                available=[a.value for a in RelativeDateTime.items()],
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": anchor.value, "moment": moment_iso(anchor.evaluate())},
        )

    def resolve_range(self, text: str) -> ServiceResult:
        """Resolve ``<name>_<name>`` into its concrete range right now."""
        op = "resolve_relative_range"
        relative = RelativeDateRange.try_parse(text)
        if relative is None:
            return ServiceResult.failure(
                op,
                "PARSE_FAILED",
                f"Expected '<name>_<name>' with registered names, got {text!r}",
            )
        logger.debug("Relative range %r normalized to %s", text, relative.to_string())
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "relative": relative.to_string(),
                "start_name": relative.start.value,
                "end_name": relative.end.value,
                **range_payload(relative.to_date_range()),
            },
        )
