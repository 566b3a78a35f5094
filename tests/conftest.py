"""Shared pytest fixtures and test helpers for txtfmt tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from txtfmt.services.telemetry import _current_span, disable_telemetry

LOREM = (
    "Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy "
    "eirmod tempor invidunt ut labore et dolore magna aliquyam erat, sed diam "
    "voluptua. At vero eos et accusam et justo duo dolores et ea rebum. Stet "
    "clita kasd gubergren, no sea takimata sanctus est Lorem ipsum dolor sit amet."
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def lorem() -> str:
    """A paragraph of filler text whose longest word fits in 20 columns."""
    return LOREM


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config-related env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so config discovery never picks up a stray txtfmt.toml.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TXTFMT_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo the logging and telemetry setup each CLI invocation performs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    txt_level = logging.getLogger("txtfmt").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("txtfmt").setLevel(txt_level)
    disable_telemetry()
    _current_span.set(None)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def words_of(lines: list[str]) -> list[str]:
    """All whitespace-separated words across *lines*, in order."""
    return " ".join(lines).split()
