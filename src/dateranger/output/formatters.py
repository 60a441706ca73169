"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors, tables)
or machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dateranger.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dateranger.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be written.

    ``date_format`` and ``milliseconds`` only affect the Rich renderer;
    JSON output always carries ISO 8601 moments.
    """

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    date_format: str | None = None
    milliseconds: bool = True


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        date_format=settings.date_format,
        milliseconds=settings.milliseconds,
    )
