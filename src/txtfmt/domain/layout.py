"""Layout orchestration: text in, fixed-width lines out.

:func:`layout` runs the full pipeline: break marking, whitespace
normalization, zone planning, zoned wrapping, alignment and paragraph
decoration.  The alignment helpers below it (:func:`left`,
:func:`center`, ...) are presets that fix the format to ``none``.
"""

from __future__ import annotations

import logging

from txtfmt.domain.alignment import align, align_left, align_right
from txtfmt.domain.breaks import BR, to_break_marked
from txtfmt.domain.models import LayoutConfig, ZonePlan, validate_config
from txtfmt.domain.types import Alignment, Format
from txtfmt.domain.whitespace import is_blank, normalize
from txtfmt.domain.wrapping import RawLine, wrap_zoned
from txtfmt.domain.zones import drop_cap_spacing, plan_zones

logger = logging.getLogger(__name__)


def layout(text: str, config: LayoutConfig | None = None) -> list[str]:
    """Lay out *text* as a list of lines, each ``config.width`` wide.

    Blank input yields a single line of spaces.  Lines are only wider than
    the target width when a single word does not fit.

    Raises:
        LayoutConfigError: *config* violates a constraint.
        LayoutInternalError: Wrapping hit its iteration guard.
    """
    if config is None:
        config = LayoutConfig()

    validate_config(config)
    if is_blank(text):
        return [" " * config.width]

    plan = plan_zones(config)

    body = normalize(to_break_marked(text))
    if config.format.uses_drop_cap:
        body = _drop_initial(body)

    top_raw, bottom_raw = wrap_zoned(
        body,
        plan.bottom_width,
        top_line_count=plan.top_line_count,
        top_width=plan.top_width,
    )
    if config.format.uses_drop_cap and config.drop_cap:
        # Short text still shows every glyph row.
        top_raw += [()] * (len(config.drop_cap) - len(top_raw))
    top, bottom = _align_zones(top_raw, bottom_raw, plan, config)
    lines = _decorate(top, bottom, config)
    logger.debug(
        "Laid out %d line(s) at width %d (%s, %s)",
        len(lines),
        config.width,
        config.alignment,
        config.format,
    )
    return lines


def _drop_initial(body: str) -> str:
    """Remove the letter the drop cap glyph stands for.

    Leading whitespace and break markers are skipped first, so the letter
    is always the first character of the first non-empty segment.
    """
    body = body.lstrip()
    while body.startswith(BR):
        body = body[len(BR) :].lstrip()
    return body[1:]


def _align_zones(
    top_raw: list[RawLine],
    bottom_raw: list[RawLine],
    plan: ZonePlan,
    config: LayoutConfig,
) -> tuple[list[str], list[str]]:
    pads = {
        "inner_ws": config.inner_ws,
        "left_pad": config.left_pad,
        "right_pad": config.right_pad,
    }
    top = align(top_raw, plan.top_width, config.alignment, **pads)
    bottom = align(bottom_raw, plan.bottom_width, config.alignment, **pads)

    # The closing line of a justified-left/right paragraph is not stretched.
    if bottom and config.alignment == Alignment.JUSTIFY_LEFT:
        bottom[-1] = align_left(
            bottom_raw[-1], plan.bottom_width, pad=config.right_pad, inner_ws=config.inner_ws
        )
    elif bottom and config.alignment == Alignment.JUSTIFY_RIGHT:
        bottom[-1] = align_right(
            bottom_raw[-1], plan.bottom_width, pad=config.left_pad, inner_ws=config.inner_ws
        )
    return top, bottom


def _decorate(top: list[str], bottom: list[str], config: LayoutConfig) -> list[str]:
    fmt = config.format
    if fmt in (Format.FIRST_LINE, Format.FIRST_LINE_AND_HANGING):
        indent = config.left_pad * config.first_line_indent
        top = [indent + line for line in top]
    if fmt in (Format.HANGING, Format.FIRST_LINE_AND_HANGING):
        indent = config.left_pad * config.hanging_indent
        bottom = [indent + line for line in bottom]
    if fmt.uses_drop_cap and config.drop_cap:
        glyph = config.drop_cap
        spacing = " " * drop_cap_spacing(config)
        blank = " " * len(glyph[0])
        top = [
            (glyph[i] if i < len(glyph) else blank) + spacing + line
            for i, line in enumerate(top)
        ]
    return [*top, *bottom]


# --- Alignment presets (format defaults to none) ---


def left(
    text: str,
    width: int,
    pad: str | None = None,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Left-aligned lines, right side filled with *pad*."""
    return layout(
        text,
        _preset(width, Alignment.LEFT, format, right_pad=pad, inner_ws=inner_ws),
    )


def right(
    text: str,
    width: int,
    pad: str | None = None,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Right-aligned lines, left side filled with *pad*."""
    return layout(
        text,
        _preset(width, Alignment.RIGHT, format, left_pad=pad, inner_ws=inner_ws),
    )


def center(
    text: str,
    width: int,
    left_pad: str | None = None,
    right_pad: str | None = None,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Centered lines; *right_pad* defaults to *left_pad* when only one is given."""
    if right_pad is None:
        right_pad = left_pad
    return layout(
        text,
        _preset(
            width,
            Alignment.CENTER,
            format,
            left_pad=left_pad,
            right_pad=right_pad,
            inner_ws=inner_ws,
        ),
    )


def justified(
    text: str,
    width: int,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Fully justified lines, the last one included."""
    return layout(text, _preset(width, Alignment.JUSTIFY, format, inner_ws=inner_ws))


def justified_left(
    text: str,
    width: int,
    pad: str | None = None,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Justified lines with a left-aligned last line padded by *pad*."""
    return layout(
        text,
        _preset(width, Alignment.JUSTIFY_LEFT, format, right_pad=pad, inner_ws=inner_ws),
    )


def justified_right(
    text: str,
    width: int,
    pad: str | None = None,
    inner_ws: str | None = None,
    *,
    format: Format = Format.NONE,
) -> list[str]:
    """Justified lines with a right-aligned last line padded by *pad*."""
    return layout(
        text,
        _preset(width, Alignment.JUSTIFY_RIGHT, format, left_pad=pad, inner_ws=inner_ws),
    )


def _preset(
    width: int,
    alignment: Alignment,
    format: Format,
    **chars: str | None,
) -> LayoutConfig:
    """Build a config, dropping unset characters so defaults apply."""
    return LayoutConfig(
        width=width,
        alignment=alignment,
        format=format,
        **{name: value for name, value in chars.items() if value is not None},
    )
