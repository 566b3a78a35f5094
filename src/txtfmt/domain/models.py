"""Layout configuration and zone plan models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, field_validator, model_validator

from txtfmt.domain.errors import LayoutConfigError
from txtfmt.domain.types import Alignment, Format

DEFAULT_WIDTH = 80
DEFAULT_INDENT = 4
DEFAULT_CHARS_BETWEEN_DROP_CAP_AND_TEXT = 3
DEFAULT_LINES_AFTER_DROP_CAP = 1


class LayoutConfig(BaseModel):
    """Immutable options for one layout run.

    Validated on construction; the layout engine re-checks it with
    :func:`validate_config` before doing any work, so instances built via
    ``model_construct`` cannot slip through.
    """

    model_config = {"frozen": True}

    width: int = DEFAULT_WIDTH
    alignment: Alignment = Alignment.JUSTIFY_LEFT
    format: Format = Format.NONE
    left_pad: str = " "
    right_pad: str = " "
    inner_ws: str = " "
    hanging_indent: int = DEFAULT_INDENT
    first_line_indent: int = DEFAULT_INDENT
    drop_cap: tuple[str, ...] | None = None
    chars_between_drop_cap_and_text: int = DEFAULT_CHARS_BETWEEN_DROP_CAP_AND_TEXT
    lines_after_drop_cap: int = DEFAULT_LINES_AFTER_DROP_CAP

    @field_validator("left_pad", "right_pad", "inner_ws")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"padding characters must be exactly one character, got {value!r}"
            raise LayoutConfigError(msg)
        return value

    @model_validator(mode="after")
    def _check(self) -> LayoutConfig:
        validate_config(self)
        return self


@dataclass(frozen=True)
class ZonePlan:
    """Widths and sizes of the two wrapping zones."""

    top_width: int
    bottom_width: int
    top_line_count: int = 0


_POSITIVE_FIELDS = (
    ("width", "text width"),
    ("hanging_indent", "hanging paragraph indentation"),
    ("first_line_indent", "first line indentation"),
    ("chars_between_drop_cap_and_text", "characters between drop cap and text"),
    ("lines_after_drop_cap", "lines after drop cap"),
)


def validate_config(config: LayoutConfig) -> None:
    """Raise :class:`LayoutConfigError` for the first violated constraint."""
    for name, label in _POSITIVE_FIELDS:
        value = getattr(config, name)
        if value < 1:
            msg = f"{label} must be greater than 0, was <{value}>"
            raise LayoutConfigError(msg)

    for name in ("left_pad", "right_pad", "inner_ws"):
        value = getattr(config, name)
        if len(value) != 1:
            msg = f"{name} must be exactly one character, got {value!r}"
            raise LayoutConfigError(msg)

    if config.drop_cap is not None:
        if not config.drop_cap:
            msg = "drop cap must have at least one line"
            raise LayoutConfigError(msg)
        lengths = {len(line) for line in config.drop_cap}
        if len(lengths) > 1:
            msg = f"drop cap lines must all have the same length, got lengths {sorted(lengths)}"
            raise LayoutConfigError(msg)
    elif config.format.uses_drop_cap:
        msg = f"format <{config.format}> requires a drop cap"
        raise LayoutConfigError(msg)
