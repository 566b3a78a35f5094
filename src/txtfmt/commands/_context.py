"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds layout configs from settings plus command
options and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from txtfmt.domain.errors import LayoutConfigError
from txtfmt.output.formatters import OutputSettings, format_result
from txtfmt.services.result import ServiceResult

if TYPE_CHECKING:
    from txtfmt.config.settings import TxtfmtSettings
    from txtfmt.domain.models import LayoutConfig


def _describe(exc: ValidationError | LayoutConfigError) -> str:
    """One-line description of the first violated constraint."""
    if isinstance(exc, ValidationError):
        err = exc.errors()[0]
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = str(err.get("msg", "invalid value")).removeprefix("Value error, ")
        return f"{loc}: {msg}" if loc else msg
    return str(exc)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: TxtfmtSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from txtfmt.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from txtfmt.services.telemetry import enable_telemetry

            enable_telemetry()

    def layout_config(self, op: str, **options: Any) -> LayoutConfig:
        """Build a LayoutConfig from layout command options.

        Emits an ``INVALID_CONFIG`` failure (and exits) when the options,
        the config file or the glyph file are invalid.
        """
        from txtfmt.commands._options import layout_overrides

        try:
            return self.settings.layout_config(**layout_overrides(**options))
        except (ValidationError, LayoutConfigError) as exc:
            self.emit(ServiceResult.failure(op, "INVALID_CONFIG", _describe(exc)))
            raise  # emit() exits on failure; kept for type checkers

    def emit(self, result: ServiceResult, *, ruler: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            ruler=ruler or self.settings.output.ruler,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
