"""Alignment and paragraph-format enums.

Both are closed sets. Their string values are what the CLI and
config files accept.
"""

from __future__ import annotations

from enum import StrEnum


class Alignment(StrEnum):
    """How each line is padded to the target width."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"
    JUSTIFY_LEFT = "justify-left"
    JUSTIFY_RIGHT = "justify-right"

    @property
    def is_justified(self) -> bool:
        return self in (Alignment.JUSTIFY, Alignment.JUSTIFY_LEFT, Alignment.JUSTIFY_RIGHT)


class Format(StrEnum):
    """Paragraph decoration applied after alignment."""

    NONE = "none"
    FIRST_LINE = "first-line"
    HANGING = "hanging"
    FIRST_LINE_AND_HANGING = "first-line-and-hanging"
    DROP_CAP = "drop-cap"
    DROP_CAP_PADDED = "drop-cap-padded"

    @property
    def uses_drop_cap(self) -> bool:
        return self in (Format.DROP_CAP, Format.DROP_CAP_PADDED)
