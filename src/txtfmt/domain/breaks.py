"""Mandatory line-break recognition.

Line endings (CRLF, CR, LF) and the HTML-ish ``<br>`` / ``<br/>`` markers
all collapse to one canonical marker, :data:`BR`.  Segments are the
stretches of text between markers.
"""

from __future__ import annotations

import re

BR = "<br />"

_BREAKS = re.compile(r"\r\n|\r|\n|<br>|<br/>|<br />")


def to_break_marked(text: str) -> str:
    """Rewrite every recognised line break to :data:`BR`.

    Examples:
        >>> to_break_marked("one\\r\\ntwo<br>three")
        'one<br />two<br />three'
    """
    return _BREAKS.sub(BR, text)


def split_breaks(text: str) -> list[str]:
    """Split *text* into break-delimited segments.

    Unmarked breaks are recognised too. Empty segments between two
    consecutive breaks are kept, so a blank line survives as ``""``.

    Examples:
        >>> split_breaks("paragraph 1\\n\\nparagraph 2")
        ['paragraph 1', '', 'paragraph 2']
        >>> split_breaks("")
        ['']
    """
    return to_break_marked(text).split(BR)


def paragraph_segments(text: str) -> list[str]:
    """Segments of *text* as consumed by the wrapper.

    Surrounding whitespace is stripped from every segment. A break at the
    very start or the very end of the text does not open a blank line.
    An empty interior segment is kept, so ``"a\\n\\nb"`` yields a blank line
    between ``a`` and ``b`` in every zone. Stripping one leading break per
    segment instead would drop that line once wrapping reaches the bottom
    zone.
    """
    segments = [segment.strip() for segment in split_breaks(text)]
    if len(segments) > 1 and not segments[0]:
        segments.pop(0)
    if len(segments) > 1 and not segments[-1]:
        segments.pop()
    return segments
