"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dateranger.output.console import create_console, get_output, style_for_bool

if TYPE_CHECKING:
    from rich.console import Console

    from dateranger.services.result import ServiceResult

_MOMENT_KEYS = frozenset({"start", "end", "moment", "reference"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    date_format: str | None = None,
    milliseconds: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    fmt = _MomentFormat(date_format, milliseconds)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, fmt, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one value per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(v for v in (_primary_value(item) for item in items) if v)

    d = result.data
    if "contains" in d:
        return "true" if d["contains"] else "false"
    if "start" in d and "end" in d and "quarter" not in d:
        return f"{d['start']}\n{d['end']}"
    value = _primary_value(d)
    return value or f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


class _MomentFormat:
    """Reformats ISO moment strings with the configured strftime pattern."""

    def __init__(self, date_format: str | None, milliseconds: bool) -> None:
        self.date_format = date_format
        self.milliseconds = milliseconds

    def __call__(self, value: Any) -> str:
        if self.date_format is None or not isinstance(value, str):
            return str(value)
        try:
            moment = datetime.fromisoformat(value)
        except ValueError:
            return value
        pattern = self.date_format
        if self.milliseconds:
            pattern = pattern.replace("%f", f"{moment.microsecond // 1000:03d}")
        return moment.strftime(pattern)


def _primary_value(item: Any) -> str:
    """Pick the value that identifies an item (moment, quarter, or name)."""
    if isinstance(item, dict):
        for key in ("moment", "quarter", "name"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dr.ok")
    op = Text(f"  {result.op}", style="dr.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dr.key")
    if not style and key in _MOMENT_KEYS:
        style = "dr.moment"
    console.print(Text.assemble(k, Text(str(value), style=style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _span(seconds: float) -> str:
    try:
        return str(timedelta(seconds=seconds))
    except OverflowError:
        return f"{seconds:.0f}s"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dr.error")
    op = Text(f"  {result.op}", style="dr.op")
    sep = Text(" — ")
    console.print(Text.assemble(label, op, sep, msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Range renderers ───────────────────────────────────────────────────


def _render_range(
    result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
) -> None:
    """Render any result whose data is a single concrete range."""
    d = result.data
    _status_line(console, result)
    for key in ("name", "period", "relative", "vector", "reference"):
        if key in d:
            _field(console, key, d[key])
    if d.get("open_start"):
        _field(console, "start", "open", style="dr.open")
    else:
        _field(console, "start", fmt(d.get("start")))
    if d.get("open_end"):
        _field(console, "end", "open", style="dr.open")
    else:
        _field(console, "end", fmt(d.get("end")))
    _field(console, "short", d.get("short", ""))
    if "seconds" in d:
        _field(console, "span", _span(d["seconds"]))
    if verbose:
        _render_meta(console, result)


def _render_contains(
    result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    contains = bool(d.get("contains"))
    _field(console, "contains", "yes" if contains else "no", style=style_for_bool(contains))
    _field(console, "moment", fmt(d.get("moment")))
    _field(console, "range", f"{fmt(d.get('start'))} .. {fmt(d.get('end'))}")


def _render_moment(
    result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "name", result.data.get("name", ""))
    _field(console, "moment", fmt(result.data.get("moment")))


def _render_quarter(
    result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "quarter", d.get("quarter", ""))
    _field(console, "long", d.get("long", ""))
    _field(console, "start", fmt(d.get("start")))
    _field(console, "end", fmt(d.get("end")))
    if "next" in d:
        _field(console, "next", d["next"])


# ── Table renderers ───────────────────────────────────────────────────


def _item_table(
    items: list[dict[str, Any]],
    columns: tuple[str, ...],
    fmt: _MomentFormat,
) -> Table:
    """Build a Rich Table with one column per key in *columns*."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for col in columns:
        style = "dr.moment" if col in _MOMENT_KEYS else ""
        table.add_column(col.replace("_", " ").title(), style=style, no_wrap=True)
    for item in items:
        row = [
            fmt(item.get(col, "")) if col in _MOMENT_KEYS else str(item.get(col, ""))
            for col in columns
        ]
        table.add_row(*row)
    return table


def _table_renderer(*columns: str) -> Any:
    def render(
        result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
    ) -> None:
        items = result.data.get("items", [])
        console.print(_item_table(items, columns, fmt))
        console.print(f"\n{result.data.get('count', len(items))} items")
        if verbose:
            _render_meta(console, result)

    return render


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult, console: Console, fmt: _MomentFormat, *, verbose: bool = False
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        elif key in _MOMENT_KEYS:
            _field(console, key, fmt(value))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Ranges
    "parse_range": _render_range,
    "predefined_range": _render_range,
    "period_range": _render_range,
    "offset_range": _render_range,
    "intersect_ranges": _render_range,
    "contains_moment": _render_contains,
    "list_predefined": _table_renderer("name", "start", "end"),
    "enumerate_range": _table_renderer("moment"),
    # Relative
    "list_relative": _table_renderer("name", "moment"),
    "resolve_relative": _render_moment,
    "resolve_relative_range": _render_range,
    # Vectors
    "parse_vector": _render_range,
    "resolve_vector": _render_range,
    # Quarters
    "parse_quarter": _render_quarter,
    "quarters_between": _table_renderer("quarter", "start", "end"),
}
