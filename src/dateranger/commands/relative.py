"""Command group: named relative dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dateranger.commands._base import DrGroup
from dateranger.services.relative import RelativeService

if TYPE_CHECKING:
    from dateranger.commands._context import AppContext

_RELATIVE_EXAMPLES = """\
  dateranger relative list
  dateranger relative resolve "start of last week"
  dateranger relative range "14 Days Ago_Now\""""


@click.group(cls=DrGroup, examples=_RELATIVE_EXAMPLES)
@click.pass_obj
def relative(app: AppContext) -> None:
    """Named anchors such as "Start of Yesterday" or "7 Days Ago"."""


@relative.command(
    name="list",
    examples="""\
  dateranger relative list
  dateranger -q relative list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every relative name with its current value."""
    app.emit(app.service(RelativeService).list_names())


@relative.command(
    examples="""\
  dateranger relative resolve now
  dateranger relative resolve "End of This Month\""""
)
@click.argument("name")
@click.pass_obj
def resolve(app: AppContext, name: str) -> None:
    """Evaluate relative NAME (case-insensitive) against the clock."""
    app.emit(app.service(RelativeService).resolve(name))


@relative.command(
    name="range",
    examples="""\
  dateranger relative range "14 Days Ago_Now"
  dateranger --json relative range "Start of This Year_End of This Year\"""",
)
@click.argument("text")
@click.pass_obj
def range_cmd(app: AppContext, text: str) -> None:
    """Resolve a '<name>_<name>' relative range."""
    app.emit(app.service(RelativeService).resolve_range(text))
