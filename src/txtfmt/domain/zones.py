"""Zone planning — translate a paragraph format into wrapping zones."""

from __future__ import annotations

from txtfmt.domain.errors import LayoutConfigError
from txtfmt.domain.models import LayoutConfig, ZonePlan
from txtfmt.domain.types import Format


def drop_cap_spacing(config: LayoutConfig) -> int:
    """Columns between the drop cap glyph and the text."""
    if config.format == Format.DROP_CAP_PADDED:
        return config.chars_between_drop_cap_and_text
    return 1


def plan_zones(config: LayoutConfig) -> ZonePlan:
    """Compute top/bottom widths and the top line count for *config*.

    Raises:
        LayoutConfigError: An indent or glyph leaves no room for text.
    """
    width = config.width
    fmt = config.format

    if fmt == Format.HANGING:
        plan = ZonePlan(
            top_width=width,
            bottom_width=width - config.hanging_indent,
            top_line_count=1,
        )
    elif fmt == Format.FIRST_LINE:
        plan = ZonePlan(
            top_width=width - config.first_line_indent,
            bottom_width=width,
            top_line_count=1,
        )
    elif fmt == Format.FIRST_LINE_AND_HANGING:
        plan = ZonePlan(
            top_width=width - config.first_line_indent,
            bottom_width=width - config.hanging_indent,
            top_line_count=1,
        )
    elif fmt.uses_drop_cap:
        if not config.drop_cap:
            msg = f"format <{fmt}> requires a drop cap"
            raise LayoutConfigError(msg)
        plan = ZonePlan(
            top_width=width - len(config.drop_cap[0]) - drop_cap_spacing(config),
            bottom_width=width,
            top_line_count=len(config.drop_cap) + config.lines_after_drop_cap,
        )
    else:
        plan = ZonePlan(top_width=width, bottom_width=width)

    if plan.top_width < 1 or plan.bottom_width < 1:
        msg = (
            f"format <{fmt}> leaves no room for text at width {width} "
            f"(top {plan.top_width}, bottom {plan.bottom_width})"
        )
        raise LayoutConfigError(msg)
    return plan
