"""Click base classes that carry usage examples.

``--help`` stays short; worked invocations (widths, alignments, drop cap
files) are printed by an eager ``--examples`` flag that exits before any
settings are loaded or text is read.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an ``examples`` keyword and the matching ``--examples`` flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class TxtCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class TxtGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; subcommands default to :class:`TxtCommand`."""

    command_class = TxtCommand
