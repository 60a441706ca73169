"""Subcommand modules for dateranger.

Provides register_commands(), which attaches every command group to the
root CLI group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the four command groups on the root CLI group."""
    from dateranger.commands.quarter import quarter
    from dateranger.commands.range import range_group
    from dateranger.commands.relative import relative
    from dateranger.commands.vector import vector

    cli.add_command(range_group)
    cli.add_command(relative)
    cli.add_command(vector)
    cli.add_command(quarter)
