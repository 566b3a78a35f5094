"""Operation-specific renderers for ServiceResult.

Laid-out text (``layout`` and ``definitions`` results) is emitted
verbatim: every column matters, so those lines never pass through Rich.
Everything else is written to a Rich Console (backed by StringIO) and
extracted via ``get_output(console)``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from txtfmt.output.console import create_console, get_output
from txtfmt.output.console import ruler as column_ruler

if TYPE_CHECKING:
    from rich.console import Console

    from txtfmt.services.result import ServiceResult

LINE_OPS = frozenset({"layout", "definitions"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, ruler: bool = False) -> str:
    """Render a ServiceResult for humans.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op in LINE_OPS:
        return _render_lines(result, verbose=verbose, show_ruler=ruler)

    console = create_console()
    if result.ok:
        _render_generic(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op in LINE_OPS:
        return "\n".join(result.data.get("lines", []))
    return f"OK: {result.op}"


# ── Line output ───────────────────────────────────────────────────────


def _render_lines(result: ServiceResult, *, verbose: bool, show_ruler: bool) -> str:
    lines: list[str] = list(result.data.get("lines", []))
    if show_ruler:
        lines.insert(0, column_ruler(int(result.data.get("width", 0))))
    text = "\n".join(lines)
    if verbose and result.meta:
        console = create_console()
        _render_meta(console, result)
        text += "\n" + get_output(console).rstrip("\n")
    return text


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="txt.ok")
    op = Text(f"  {result.op}", style="txt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="txt.key")
    v = Text(str(value), style="txt.value" if key.endswith("width") else "")
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "txt.timing.slow" if duration > 100 else "txt.timing.fast"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line += f"  ({extras})"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="txt.error")
    op = Text(f"  {result.op}", style="txt.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)
