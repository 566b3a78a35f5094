"""txtfmt — fixed-width text layout for terminal output."""

from __future__ import annotations

from txtfmt.domain.errors import LayoutConfigError, LayoutError, LayoutInternalError
from txtfmt.domain.layout import (
    center,
    justified,
    justified_left,
    justified_right,
    layout,
    left,
    right,
)
from txtfmt.domain.models import LayoutConfig
from txtfmt.domain.types import Alignment, Format

__version__ = "0.3.0"

__all__ = [
    "Alignment",
    "Format",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutError",
    "LayoutInternalError",
    "__version__",
    "center",
    "justified",
    "justified_left",
    "justified_right",
    "layout",
    "left",
    "right",
]
