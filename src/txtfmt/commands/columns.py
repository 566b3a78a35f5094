"""Command: render KEY=VALUE pairs as a definition list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from txtfmt.commands._base import TxtCommand

if TYPE_CHECKING:
    from txtfmt.commands._context import AppContext


def _parse_entry(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        msg = f"expected KEY=VALUE, got {raw!r}"
        raise click.BadParameter(msg, param_hint="ENTRIES")
    return key.strip(), value


@click.command(
    cls=TxtCommand,
    examples="""\
  txtfmt columns TXTFMT_CONFIG="Path of the config file to use" -w 50
  txtfmt columns b="second entry" a="first entry" --sort""",
)
@click.argument("entries", nargs=-1, required=True)
@click.option(
    "-w", "--width", type=int, default=None, help="Total width (default: [layout] width)."
)
@click.option("--sort", is_flag=True, help="Sort entries by key.")
@click.pass_obj
def columns(app: AppContext, entries: tuple[str, ...], width: int | None, sort: bool) -> None:
    """Render KEY=VALUE ENTRIES as an aligned definition list."""
    from txtfmt.services.layout import LayoutService

    pairs = [_parse_entry(raw) for raw in entries]
    total = width if width is not None else app.settings.layout.width
    app.emit(LayoutService().definitions(pairs, total, sort=sort))
