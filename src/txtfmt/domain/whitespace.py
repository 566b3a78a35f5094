"""Whitespace normalization."""

from __future__ import annotations

import re

_WS_RUN = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Collapse every run of whitespace to a single space.

    Leading and trailing whitespace is kept (collapsed, not trimmed);
    wrapping takes care of it.

    Examples:
        >>> normalize("a \\t  b\\u2003c")
        'a b c'
        >>> normalize("  padded  ")
        ' padded '
    """
    return _WS_RUN.sub(" ", text)


def is_blank(text: str) -> bool:
    """Return True for empty or whitespace-only text."""
    return not text or text.isspace()
