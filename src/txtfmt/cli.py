"""Root CLI group for txtfmt with global flags and command registration."""

from __future__ import annotations

import click

from txtfmt import __version__
from txtfmt.commands import register_commands
from txtfmt.commands._base import TxtGroup
from txtfmt.commands._context import AppContext
from txtfmt.config.settings import TxtfmtSettings


@click.group(
    cls=TxtGroup,
    invoke_without_command=True,
    examples="""\
  txtfmt format "Some long paragraph ..." -w 40 -a justify
  txtfmt plan -f hanging -w 60
  txtfmt columns KEY="description" -w 50""",
)
@click.version_option(version=__version__, prog_name="txtfmt")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only the laid-out lines, no status.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """txtfmt — fixed-width text layout for the terminal."""
    ctx.ensure_object(dict)
    settings = TxtfmtSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
