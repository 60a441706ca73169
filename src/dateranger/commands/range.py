"""Command group: concrete date ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dateranger.commands._base import DrGroup
from dateranger.domain.moments import TimeUnit
from dateranger.services.ranges import PERIOD_FACTORIES, RangeService

if TYPE_CHECKING:
    from dateranger.commands._context import AppContext

_RANGE_EXAMPLES = """\
  dateranger range show 2024-01-01_2024-03-31
  dateranger range predefined last_month
  dateranger range period quarter 2024-05-17
  dateranger range offset now --by -3 --unit hour
  dateranger range intersect this_month "14 Days Ago_Now"
  dateranger range contains this_week 2024-05-17T12:00
  dateranger range enumerate this_year --step month"""

_UNIT_CHOICE = click.Choice([u.value for u in TimeUnit], case_sensitive=False)


@click.group(name="range", cls=DrGroup, examples=_RANGE_EXAMPLES)
@click.pass_obj
def range_group(app: AppContext) -> None:
    """Resolve, combine, and enumerate date ranges."""


@range_group.command(
    examples="""\
  dateranger range show 2024-01-01_2024-03-31
  dateranger range show "last week"
  dateranger range show "Start of Yesterday_Now"
  dateranger --json range show Next_2_Weeks"""
)
@click.argument("text")
@click.pass_obj
def show(app: AppContext, text: str) -> None:
    """Resolve TEXT as a short, predefined, relative, or vector range."""
    app.emit(app.service(RangeService).parse(text))


@range_group.command(
    examples="""\
  dateranger range predefined today
  dateranger range predefined "next year"
  dateranger range predefined
  dateranger -q range predefined the_past"""
)
@click.argument("name", required=False)
@click.pass_obj
def predefined(app: AppContext, name: str | None) -> None:
    """Evaluate predefined range NAME, or list them all when omitted."""
    svc = app.service(RangeService)
    app.emit(svc.list_predefined() if name is None else svc.predefined(name))


@range_group.command(
    examples="""\
  dateranger range period week now
  dateranger range period quarter 2024-05-17
  dateranger range period month "start of next month\""""
)
@click.argument("period", type=click.Choice(list(PERIOD_FACTORIES), case_sensitive=False))
@click.argument("moment", default="now")
@click.pass_obj
def period(app: AppContext, period: str, moment: str) -> None:
    """The PERIOD (day, week, month, quarter, year) containing MOMENT."""
    app.emit(app.service(RangeService).period(period, moment))


@range_group.command(
    examples="""\
  dateranger range offset now --by 5 --unit minute
  dateranger range offset 2024-01-31 --by 1 --unit month
  dateranger range offset today --by -2 --unit week"""
)
@click.argument("reference", default="now")
@click.option("--by", "magnitude", type=int, required=True, help="Signed number of units.")
@click.option("--unit", type=_UNIT_CHOICE, default="day", help="Time unit.")
@click.pass_obj
def offset(app: AppContext, reference: str, magnitude: int, unit: str) -> None:
    """Range between REFERENCE and REFERENCE shifted by --by units."""
    app.emit(app.service(RangeService).offset(reference, magnitude, unit))


@range_group.command(
    examples="""\
  dateranger range intersect this_month last_week
  dateranger range intersect 2024-01-01_2024-06-30 2024-03-01_2024-12-31"""
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def intersect(app: AppContext, first: str, second: str) -> None:
    """Overlap of FIRST and SECOND; fails when they are disjoint."""
    app.emit(app.service(RangeService).intersect(first, second))


@range_group.command(
    examples="""\
  dateranger range contains today now
  dateranger -q range contains this_year 2023-12-31"""
)
@click.argument("range_text", metavar="RANGE")
@click.argument("moment", default="now")
@click.pass_obj
def contains(app: AppContext, range_text: str, moment: str) -> None:
    """Whether MOMENT lies inside RANGE (bounds included)."""
    app.emit(app.service(RangeService).contains(range_text, moment))


@range_group.command(
    name="enumerate",
    examples="""\
  dateranger range enumerate this_year --step month
  dateranger range enumerate today --step hour
  dateranger range enumerate the_future --step year --limit 5""",
)
@click.argument("range_text", metavar="RANGE")
@click.option("--step", type=_UNIT_CHOICE, default=None, help="Step unit [default: config].")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Max moments to print [default: config].",
)
@click.pass_obj
def enumerate_cmd(app: AppContext, range_text: str, step: str | None, limit: int | None) -> None:
    """Step through RANGE one unit at a time."""
    app.emit(app.service(RangeService).enumerate(range_text, step=step, limit=limit))
