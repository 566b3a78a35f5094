"""Layout options shared by the ``format`` and ``plan`` commands.

Every option defaults to None so that unset flags fall through to the
``[layout]`` section of txtfmt.toml (or the ``TXTFMT_LAYOUT__*`` env vars).
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from txtfmt.domain.dropcaps import load_drop_cap
from txtfmt.domain.types import Alignment, Format

_F = TypeVar("_F", bound=Callable[..., Any])

_LAYOUT_OPTIONS = [
    click.option("-w", "--width", type=int, default=None, help="Line width in columns."),
    click.option(
        "-a",
        "--align",
        "alignment",
        type=click.Choice([a.value for a in Alignment]),
        default=None,
        help="Line alignment.",
    ),
    click.option(
        "-f",
        "--format",
        "fmt",
        type=click.Choice([f.value for f in Format]),
        default=None,
        help="Paragraph format.",
    ),
    click.option("--left-pad", default=None, help="Fill character on the left."),
    click.option("--right-pad", default=None, help="Fill character on the right."),
    click.option("--inner-ws", default=None, help="Character between words."),
    click.option("--hanging-indent", type=int, default=None, help="Hanging paragraph indent."),
    click.option("--first-line-indent", type=int, default=None, help="First line indent."),
    click.option(
        "--drop-cap-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Text file holding the drop cap glyph.",
    ),
    click.option(
        "--drop-cap-spacing",
        type=int,
        default=None,
        help="Columns between drop cap and text (drop-cap-padded).",
    ),
    click.option(
        "--lines-after-drop-cap",
        type=int,
        default=None,
        help="Indented lines kept under the drop cap.",
    ),
]


def layout_options(func: _F) -> _F:
    """Apply all layout options to a Click command function."""
    for option in reversed(_LAYOUT_OPTIONS):
        func = option(func)
    return func


def layout_overrides(
    *,
    width: int | None,
    alignment: str | None,
    fmt: str | None,
    left_pad: str | None,
    right_pad: str | None,
    inner_ws: str | None,
    hanging_indent: int | None,
    first_line_indent: int | None,
    drop_cap_file: Path | None,
    drop_cap_spacing: int | None,
    lines_after_drop_cap: int | None,
) -> dict[str, Any]:
    """Map command options onto ``[layout]`` section field names.

    A glyph file is read here so it replaces any inline ``drop_cap`` from
    the config file.
    """
    return {
        "width": width,
        "alignment": alignment,
        "format": fmt,
        "left_pad": left_pad,
        "right_pad": right_pad,
        "inner_ws": inner_ws,
        "hanging_indent": hanging_indent,
        "first_line_indent": first_line_indent,
        "drop_cap": list(load_drop_cap(drop_cap_file)) if drop_cap_file else None,
        "chars_between_drop_cap_and_text": drop_cap_spacing,
        "lines_after_drop_cap": lines_after_drop_cap,
    }
