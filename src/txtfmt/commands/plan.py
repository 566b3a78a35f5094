"""Command: show the wrapping zones a layout would use."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from txtfmt.commands._base import TxtCommand
from txtfmt.commands._options import layout_options

if TYPE_CHECKING:
    from txtfmt.commands._context import AppContext


@click.command(
    cls=TxtCommand,
    examples="""\
  txtfmt plan -w 40 -f hanging
  txtfmt plan -w 40 -f first-line-and-hanging --first-line-indent 2
  txtfmt --json plan -f drop-cap --drop-cap-file A.txt""",
)
@layout_options
@click.pass_obj
def plan(app: AppContext, **options: Any) -> None:
    """Show top/bottom zone widths and the top line count."""
    from txtfmt.services.layout import LayoutService

    config = app.layout_config("plan", **options)
    app.emit(LayoutService().plan(config))
