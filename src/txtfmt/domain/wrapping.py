"""Greedy word wrapping, plain and zoned.

A zoned wrap fills a bounded number of *top* lines at one width and
continues with the rest of the text at a second, *bottom* width.  That
split is what paragraph formats (indents, drop caps) build on.
"""

from __future__ import annotations

import logging
from collections import deque

from txtfmt.domain.breaks import paragraph_segments
from txtfmt.domain.errors import LayoutInternalError

logger = logging.getLogger(__name__)

RawLine = tuple[str, ...]

MAX_ZONE_ITERATIONS = 200


def wrap_words(words: list[str], width: int) -> list[RawLine]:
    """Greedily pack *words* into lines of at most *width* characters.

    A word longer than *width* is placed alone on its own line and is
    never split.  No words yields a single blank line.
    """
    if not words:
        return [()]

    lines: list[RawLine] = []
    current: list[str] = []
    length = 0
    for word in words:
        if current and length + 1 + len(word) <= width:
            current.append(word)
            length += 1 + len(word)
            continue
        if current:
            lines.append(tuple(current))
        current = [word]
        length = len(word)
    lines.append(tuple(current))
    return lines


def wrap(text: str, width: int) -> list[RawLine]:
    """Wrap *text* at *width*, starting a new line at every break marker."""
    _, bottom = wrap_zoned(text, width)
    return bottom


def wrap_zoned(
    text: str,
    bottom_width: int,
    top_line_count: int = 0,
    top_width: int | None = None,
) -> tuple[list[RawLine], list[RawLine]]:
    """Wrap *text* into a top zone and a bottom zone.

    The top zone takes up to *top_line_count* lines wrapped at *top_width*.
    Segments keep filling it until the count is reached; the words left over
    from the segment that completed it are wrapped at *bottom_width*, as is
    every following segment.

    Returns:
        ``(top, bottom)`` lists of raw lines.

    Raises:
        LayoutInternalError: The top-zone loop exceeded its iteration guard.
    """
    if top_width is None:
        top_width = bottom_width

    pending = deque(segment.split() for segment in paragraph_segments(text))
    top: list[RawLine] = []
    bottom: list[RawLine] = []

    count = 0
    while pending and len(top) < top_line_count:
        count += 1
        if count > MAX_ZONE_ITERATIONS:
            msg = f"top zone wrapping exceeded {MAX_ZONE_ITERATIONS} iterations"
            raise LayoutInternalError(msg)
        words = pending.popleft()
        lines = wrap_words(words, top_width)
        room = top_line_count - len(top)
        top.extend(lines[:room])
        leftover = [word for line in lines[room:] for word in line]
        if leftover:
            pending.appendleft(leftover)

    for words in pending:
        bottom.extend(wrap_words(words, bottom_width))

    logger.debug(
        "Wrapped %d top line(s) at %d, %d bottom line(s) at %d",
        len(top),
        top_width,
        len(bottom),
        bottom_width,
    )
    return top, bottom
