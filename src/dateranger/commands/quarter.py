"""Command group: calendar quarters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dateranger.commands._base import DrGroup
from dateranger.services.quarters import QuarterService

if TYPE_CHECKING:
    from dateranger.commands._context import AppContext

_QUARTER_EXAMPLES = """\
  dateranger quarter parse 2014Q1
  dateranger quarter between 2023-02-01 2024-01-01"""


@click.group(cls=DrGroup, examples=_QUARTER_EXAMPLES)
@click.pass_obj
def quarter(app: AppContext) -> None:
    """Quarters of the calendar year."""


@quarter.command(
    examples="""\
  dateranger quarter parse 2014Q1
  dateranger --json quarter parse 2009Q4"""
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse a 'YYYYQ#' quarter."""
    app.emit(app.service(QuarterService).parse(text))


@quarter.command(
    examples="""\
  dateranger quarter between 2023-02-01 2024-01-01
  dateranger -q quarter between "start of last year" now"""
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def between(app: AppContext, start: str, end: str) -> None:
    """Quarters from START's quarter up to, not including, END's."""
    app.emit(app.service(QuarterService).between(start, end))
