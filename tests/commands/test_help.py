"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from txtfmt.cli import cli
from txtfmt.commands._base import TxtCommand, TxtGroup

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["format", "plan", "columns", "--json", "--config"]),
    (["format", "--help"], ["TEXT", "--input", "--width", "--align", "--format", "--ruler"]),
    (["format", "--help"], ["--left-pad", "--right-pad", "--inner-ws", "--drop-cap-file"]),
    (["plan", "--help"], ["--width", "--format", "--hanging-indent", "--first-line-indent"]),
    (["columns", "--help"], ["ENTRIES", "--width", "--sort"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["txtfmt format", "txtfmt plan"]),
    (["format", "--examples"], ["txtfmt format", "--drop-cap-file"]),
    (["plan", "--examples"], ["txtfmt plan -w 40 -f hanging"]),
    (["columns", "--examples"], ["--sort"]),
]


def _args_id(item: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = item
    return "_".join(a.lstrip("-") for a in args)


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_args_id(item) for item in HELP_COMMANDS],
)
def test_command_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_args_id(item) for item in EXAMPLES_COMMANDS],
)
def test_command_examples(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


def test_command_without_examples_has_no_flag() -> None:
    cmd = TxtCommand("bare", callback=lambda: None)
    assert all(param.name != "examples" for param in cmd.params)


def test_examples_exit_before_callback(cli_runner: CliRunner) -> None:
    calls: list[int] = []
    cmd = TxtCommand("demo", callback=lambda: calls.append(1), examples="  demo -w 20")
    result = cli_runner.invoke(cmd, ["--examples"])
    assert result.exit_code == 0
    assert result.output == "Examples for 'demo':\n\n  demo -w 20\n"
    assert calls == []


def test_group_subcommands_default_to_txt_command() -> None:
    assert TxtGroup.command_class is TxtCommand
