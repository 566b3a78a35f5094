"""Output mode dispatch.

The CLI renders ServiceResult for humans (laid-out lines, Rich-styled
status and key/value blocks) or machines (--json).  The formatter layer
picks the mode; :mod:`txtfmt.output.renderers` does the human rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from txtfmt.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags derived from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    ruler: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; defaults to human-readable output.
    """
    from txtfmt.output.renderers import render_quiet, render_result

    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, ruler=settings.ruler)
