"""Rich Console factory and theme for txtfmt output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TXT_THEME = Theme(
    {
        "txt.ok": "bold green",
        "txt.error": "bold red",
        "txt.op": "bold cyan",
        "txt.key": "dim",
        "txt.value": "bold",
        "txt.timing.fast": "green",
        "txt.timing.slow": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TXT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def ruler(width: int) -> str:
    """Column ruler ``1234567890123...`` exactly *width* characters long."""
    return "".join(str(i % 10) for i in range(1, width + 1))
