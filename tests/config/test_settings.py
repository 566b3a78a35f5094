"""Tests for TxtfmtSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from txtfmt.config.settings import TxtfmtSettings
from txtfmt.domain.types import Alignment, Format


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TXTFMT_CONFIG", raising=False)
    monkeypatch.delenv("TXTFMT_LAYOUT__WIDTH", raising=False)


class TestTxtfmtSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = TxtfmtSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.layout.width == 80
        assert settings.layout.alignment == Alignment.JUSTIFY_LEFT
        assert settings.output.ruler is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TxtfmtSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "txtfmt.toml"
        toml.write_text('[layout]\nwidth = 60\nalignment = "center"\n[output]\nruler = true\n')
        settings = TxtfmtSettings.from_cli(cwd=tmp_path)
        assert settings.config_path == toml
        assert settings.layout.width == 60
        assert settings.layout.alignment == Alignment.CENTER
        assert settings.output.ruler is True
        assert settings.layout.hanging_indent == 4  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[layout]\nwidth = 42\n")
        settings = TxtfmtSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.layout.width == 42
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "txtfmt.toml").write_text("[layout\nwidth = \n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TxtfmtSettings.from_cli(cwd=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = TxtfmtSettings.from_cli(cwd=tmp_path, json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "txtfmt.toml").write_text("quiet = true\n")
        settings = TxtfmtSettings.from_cli(cwd=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TXTFMT_QUIET", "true")
        settings = TxtfmtSettings.from_cli(cwd=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "txtfmt.toml").write_text('[layout]\nwidth = 60\nalignment = "right"\n')
        monkeypatch.setenv("TXTFMT_LAYOUT__WIDTH", "33")
        settings = TxtfmtSettings.from_cli(cwd=tmp_path)
        assert settings.layout.width == 33
        assert settings.layout.alignment == Alignment.RIGHT


class TestLayoutConfig:
    def test_from_section(self, tmp_path: Path) -> None:
        (tmp_path / "txtfmt.toml").write_text('[layout]\nwidth = 60\nformat = "hanging"\n')
        config = TxtfmtSettings.from_cli(cwd=tmp_path).layout_config()
        assert config.width == 60
        assert config.format == Format.HANGING

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "txtfmt.toml").write_text("[layout]\nwidth = 60\n")
        config = TxtfmtSettings.from_cli(cwd=tmp_path).layout_config(width=20)
        assert config.width == 20

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "txtfmt.toml").write_text("[layout]\nwidth = 60\n")
        config = TxtfmtSettings.from_cli(cwd=tmp_path).layout_config(width=None, alignment=None)
        assert config.width == 60
        assert config.alignment == Alignment.JUSTIFY_LEFT

    def test_drop_cap_file_relative_to_config(self, tmp_path: Path) -> None:
        project = tmp_path / "project"
        (project / "glyphs").mkdir(parents=True)
        (project / "glyphs" / "a.txt").write_text("/\\\n||\n", encoding="utf-8")
        (project / "txtfmt.toml").write_text(
            '[layout]\nformat = "drop-cap"\ndrop_cap_file = "glyphs/a.txt"\n'
        )
        sub = project / "chapter"
        sub.mkdir()
        config = TxtfmtSettings.from_cli(cwd=sub).layout_config()
        assert config.drop_cap == ("/\\", "||")
