"""Command group: time vectors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dateranger.commands._base import DrGroup
from dateranger.services.vectors import VectorService

if TYPE_CHECKING:
    from dateranger.commands._context import AppContext

_VECTOR_EXAMPLES = """\
  dateranger vector parse Next_5_Days
  dateranger vector parse last_3_hours --from 2024-05-17T09:00"""


@click.group(cls=DrGroup, examples=_VECTOR_EXAMPLES)
@click.pass_obj
def vector(app: AppContext) -> None:
    """'<Last|Next>_<n>_<interval>' offsets."""


@vector.command(
    examples="""\
  dateranger vector parse Next_5_Days
  dateranger vector parse "Last_1_Month(s)"
  dateranger --json vector parse last_3_hours --from "start of today\""""
)
@click.argument("text")
@click.option(
    "--from",
    "reference",
    default=None,
    help="Reference moment [default: now].",
)
@click.pass_obj
def parse(app: AppContext, text: str, reference: str | None) -> None:
    """Parse vector TEXT and resolve it into a range."""
    svc = app.service(VectorService)
    app.emit(svc.parse(text) if reference is None else svc.resolve(text, reference))
