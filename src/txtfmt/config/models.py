"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, txtfmt.toml only contains
overrides.  An empty file (or none at all) lays out text at 80 columns,
justified with a left-aligned last line.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from txtfmt.domain.dropcaps import load_drop_cap
from txtfmt.domain.models import (
    DEFAULT_CHARS_BETWEEN_DROP_CAP_AND_TEXT,
    DEFAULT_INDENT,
    DEFAULT_LINES_AFTER_DROP_CAP,
    DEFAULT_WIDTH,
    LayoutConfig,
)
from txtfmt.domain.types import Alignment, Format

# --- txtfmt.toml sections ---


class LayoutSection(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    width: int = DEFAULT_WIDTH
    alignment: Alignment = Alignment.JUSTIFY_LEFT
    format: Format = Format.NONE
    left_pad: str = " "
    right_pad: str = " "
    inner_ws: str = " "
    hanging_indent: int = DEFAULT_INDENT
    first_line_indent: int = DEFAULT_INDENT
    drop_cap: list[str] | None = None
    drop_cap_file: Path | None = None
    chars_between_drop_cap_and_text: int = DEFAULT_CHARS_BETWEEN_DROP_CAP_AND_TEXT
    lines_after_drop_cap: int = DEFAULT_LINES_AFTER_DROP_CAP

    def to_layout_config(self, base_dir: Path | None = None) -> LayoutConfig:
        """Build the engine config, loading the glyph file if one is set.

        A relative ``drop_cap_file`` resolves against *base_dir* (the
        directory holding the config file).
        """
        drop_cap: tuple[str, ...] | None = None
        if self.drop_cap is not None:
            drop_cap = tuple(self.drop_cap)
        elif self.drop_cap_file is not None:
            path = self.drop_cap_file
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            drop_cap = load_drop_cap(path)

        return LayoutConfig(
            width=self.width,
            alignment=self.alignment,
            format=self.format,
            left_pad=self.left_pad,
            right_pad=self.right_pad,
            inner_ws=self.inner_ws,
            hanging_indent=self.hanging_indent,
            first_line_indent=self.first_line_indent,
            drop_cap=drop_cap,
            chars_between_drop_cap_and_text=self.chars_between_drop_cap_and_text,
            lines_after_drop_cap=self.lines_after_drop_cap,
        )


class OutputSection(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    ruler: bool = False
