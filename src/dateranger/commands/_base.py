"""Click base classes that add an eager ``--examples`` flag.

``--help`` stays short; ``--examples`` prints sample invocations for the
command (or group) and exits before any callback runs.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class DrCommand(click.Command):
    """Command accepting an ``examples=`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class DrGroup(click.Group):
    """Group accepting an ``examples=`` keyword.

    Subcommands default to :class:`DrCommand`, so ``@group.command(examples=...)``
    works without passing ``cls=``.
    """

    command_class = DrCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))
