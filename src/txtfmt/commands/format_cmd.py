"""Command: lay out text as fixed-width lines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TextIO

import click

from txtfmt.commands._base import TxtCommand
from txtfmt.commands._options import layout_options

if TYPE_CHECKING:
    from txtfmt.commands._context import AppContext


@click.command(
    "format",
    cls=TxtCommand,
    examples="""\
  txtfmt format "The quick brown fox" --width 10 --align left
  txtfmt format --input README.txt -w 60 -a justify
  cat notes.txt | txtfmt format -w 72 -f hanging --hanging-indent 2
  txtfmt format "Hello" -w 9 -a center --left-pad '*' --right-pad '-'
  txtfmt format --input story.txt -f drop-cap-padded --drop-cap-file A.txt
  txtfmt --json format "some text" -w 20""",
)
@click.argument("text", nargs=-1)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read text from a file ('-' for stdin).",
)
@layout_options
@click.option("--ruler", is_flag=True, help="Print a column ruler above the text.")
@click.pass_obj
def format_cmd(
    app: AppContext,
    text: tuple[str, ...],
    input_file: TextIO | None,
    ruler: bool,
    **options: Any,
) -> None:
    """Lay out TEXT (or --input, or stdin) as fixed-width lines."""
    from txtfmt.services.layout import LayoutService

    if text:
        source = " ".join(text)
    elif input_file is not None:
        source = input_file.read()
    else:
        source = click.get_text_stream("stdin").read()

    config = app.layout_config("layout", **options)
    app.emit(LayoutService().layout(source, config), ruler=ruler)
