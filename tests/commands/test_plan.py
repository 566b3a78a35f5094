"""Tests for the plan command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from txtfmt.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestPlan:
    def test_hanging(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "-w", "40", "-f", "hanging"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "top_width: 40" in result.stdout
        assert "bottom_width: 36" in result.stdout
        assert "top_line_count: 1" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        args = ["--json", "plan", "-w", "40", "-f", "first-line-and-hanging"]
        args += ["--first-line-indent", "2"]
        result = cli_runner.invoke(cli, args)
        data = json.loads(result.stdout)["data"]
        assert data == {
            "format": "first-line-and-hanging",
            "width": 40,
            "top_line_count": 1,
            "top_width": 38,
            "bottom_width": 36,
        }

    def test_drop_cap(self, cli_runner: CliRunner) -> None:
        Path("glyph.txt").write_text("AAA\nAAA\nAAA\n", encoding="utf-8")
        args = ["--json", "plan", "-w", "40", "-f", "drop-cap", "--drop-cap-file", "glyph.txt"]
        args += ["--lines-after-drop-cap", "2"]
        data = json.loads(cli_runner.invoke(cli, args).stdout)["data"]
        assert data["top_width"] == 36
        assert data["top_line_count"] == 5

    def test_no_room(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "-w", "3", "-f", "first-line"])
        assert result.exit_code == 1
        assert "no room" in result.stderr

    def test_uses_toml(self, cli_runner: CliRunner) -> None:
        Path("txtfmt.toml").write_text(
            '[layout]\nwidth = 50\nformat = "hanging"\nhanging_indent = 8\n'
        )
        data = json.loads(cli_runner.invoke(cli, ["--json", "plan"]).stdout)["data"]
        assert data["bottom_width"] == 42
