"""Subcommand modules for txtfmt.

Provides register_commands() which uses deferred imports to keep
``txtfmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from txtfmt.commands.columns import columns
    from txtfmt.commands.format_cmd import format_cmd
    from txtfmt.commands.plan import plan

    cli.add_command(format_cmd)
    cli.add_command(plan)
    cli.add_command(columns)
