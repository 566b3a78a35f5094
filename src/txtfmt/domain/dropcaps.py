"""Drop cap glyph loading.

A glyph file is plain text, one glyph row per line.  Blank rows at the
top and bottom are dropped; the remaining rows are right-padded to the
widest one so every row has the same length.
"""

from __future__ import annotations

from pathlib import Path

from txtfmt.domain.errors import LayoutConfigError


def parse_drop_cap(raw: str) -> tuple[str, ...]:
    """Turn glyph text into equal-length rows.

    Examples:
        >>> parse_drop_cap("\\n XX\\nX  X\\n")
        (' XX ', 'X  X')
    """
    rows = [row.rstrip() for row in raw.splitlines()]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        msg = "drop cap glyph is empty"
        raise LayoutConfigError(msg)
    width = max(len(row) for row in rows)
    return tuple(row.ljust(width) for row in rows)


def load_drop_cap(path: Path) -> tuple[str, ...]:
    """Read and parse a glyph file."""
    if not path.is_file():
        msg = f"drop cap file not found: {path}"
        raise LayoutConfigError(msg)
    return parse_drop_cap(path.read_text(encoding="utf-8"))
