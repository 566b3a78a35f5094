"""Line alignment — pad raw lines to an exact width.

Every aligned line is exactly ``width`` characters long, except lines
holding a single word that is already wider than ``width``: those pass
through unpadded.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial

from txtfmt.domain.types import Alignment
from txtfmt.domain.wrapping import RawLine


def align_left(line: RawLine, width: int, *, pad: str = " ", inner_ws: str = " ") -> str:
    """Join words with *inner_ws* and fill the right side with *pad*."""
    text = inner_ws.join(line)
    return text + pad * (width - len(text))


def align_right(line: RawLine, width: int, *, pad: str = " ", inner_ws: str = " ") -> str:
    """Join words with *inner_ws* and fill the left side with *pad*."""
    text = inner_ws.join(line)
    return pad * (width - len(text)) + text


def align_center(
    line: RawLine,
    width: int,
    *,
    left_pad: str = " ",
    right_pad: str = " ",
    inner_ws: str = " ",
) -> str:
    """Center the line; odd fill puts the extra column on the right.

    Examples:
        >>> align_center(("Hello",), 9, left_pad="*", right_pad="-")
        '**Hello--'
    """
    text = inner_ws.join(line)
    total = max(width - len(text), 0)
    left_fill = total // 2
    return left_pad * left_fill + text + right_pad * (total - left_fill)


def justify(line: RawLine, width: int, *, inner_ws: str = " ") -> str:
    """Stretch the line to *width* by growing the gaps between words.

    The fill is handed out in two passes.  The first pass deals
    ``(gap // (n - 1)) * (n - 1)`` characters one at a time across every
    word but the last.  The second pass deals the remainder one at a time
    from the second-to-last word backwards, never touching the first or
    the last word.  With two words the second pass has no slot to fill;
    the trailing space pad covers whatever is left.

    Examples:
        >>> justify(("a", "b", "c"), 7)
        'a  b  c'
        >>> justify(("one", "two", "three", "four"), 20, inner_ws="~")
        'one~two~~three~~four'
    """
    words = list(line)
    if not words:
        return " " * width
    if len(words) == 1:
        return words[0] + inner_ws * (width - len(words[0]))

    gap = width - sum(len(word) for word in words)
    slots = len(words) - 1

    first = (gap // slots) * slots
    while first > 0:
        for i in range(slots):
            if first == 0:
                break
            words[i] += inner_ws
            first -= 1

    second = gap % slots
    while second > 0 and slots > 1:
        for i in range(slots - 1, 0, -1):
            if second == 0:
                break
            words[i] += inner_ws
            second -= 1

    text = "".join(words)
    return text + " " * (width - len(text))


def align(
    lines: Iterable[RawLine],
    width: int,
    alignment: Alignment,
    *,
    inner_ws: str = " ",
    left_pad: str = " ",
    right_pad: str = " ",
) -> list[str]:
    """Align every raw line in *lines* to *width*.

    The justified variants treat every line the same here; replacing the
    last line of a paragraph is left to the layout orchestrator.
    """
    aligner: Callable[[RawLine], str]
    if alignment == Alignment.LEFT:
        aligner = partial(align_left, width=width, pad=right_pad, inner_ws=inner_ws)
    elif alignment == Alignment.RIGHT:
        aligner = partial(align_right, width=width, pad=left_pad, inner_ws=inner_ws)
    elif alignment == Alignment.CENTER:
        aligner = partial(
            align_center, width=width, left_pad=left_pad, right_pad=right_pad, inner_ws=inner_ws
        )
    else:
        aligner = partial(justify, width=width, inner_ws=inner_ws)
    return [aligner(line) for line in lines]
