"""Definition lists — key/description blocks for usage and help screens.

Keys sit in a left column padded to the longest key; descriptions are
laid out left-aligned in the remaining width, with continuation lines
indented under the description column::

    TXTFMT_WIDTH    - line width used when no
                      --width flag is given
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from txtfmt.domain.errors import LayoutConfigError
from txtfmt.domain.layout import layout
from txtfmt.domain.models import LayoutConfig
from txtfmt.domain.types import Alignment

SEPARATOR = "  - "
KEY_GAP = 2


def render_definitions(
    entries: Mapping[str, str] | Iterable[tuple[str, str]],
    width: int,
    *,
    sort: bool = False,
    alignment: Alignment = Alignment.LEFT,
) -> list[str]:
    """Render *entries* as a two-column definition list *width* columns wide.

    Raises:
        LayoutConfigError: The key column leaves no room for descriptions.
    """
    pairs = list(entries.items()) if isinstance(entries, Mapping) else list(entries)
    if not pairs:
        return []
    if sort:
        pairs.sort(key=lambda pair: pair[0])

    key_width = max(len(key) for key, _ in pairs) + KEY_GAP
    value_width = width - key_width - len(SEPARATOR)
    if value_width < 1:
        msg = f"keys need {key_width + len(SEPARATOR)} columns, width <{width}> leaves none"
        raise LayoutConfigError(msg)

    config = LayoutConfig(width=value_width, alignment=alignment)
    continuation = " " * (key_width + len(SEPARATOR))
    lines: list[str] = []
    for key, value in pairs:
        head = key.ljust(key_width) + SEPARATOR
        for i, line in enumerate(layout(value, config)):
            lines.append((head if i == 0 else continuation) + line)
    return lines
