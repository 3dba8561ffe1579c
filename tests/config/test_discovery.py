"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from adschema.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ConfigFileError,
    find_config,
    load_config,
    read_config,
    resolve_config_path,
)
from adschema.config.models import SchemaConfig


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output]\nwidth = 80\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "gone.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[validation]\nreport_ignored_fields = false\n")
        cfg = load_config(config_file)
        assert cfg.validation.report_ignored_fields is False
        assert cfg.validation.coerce_numeric_strings is True

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == SchemaConfig()

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[output]\nwidth = 80\n")
        assert load_config(cwd=tmp_path).output.width == 80

    def test_ignores_cli_keys(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("quiet = true\n[output]\nwidth = 90\n")
        assert load_config(config_file).output.width == 90

    def test_bad_section_value(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output]\nwidth = 10\n")
        with pytest.raises(ConfigFileError) as exc_info:
            load_config(config_file)
        assert exc_info.value.path == config_file


class TestResolveConfigPath:
    def test_explicit_beats_walk_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        custom = tmp_path / "other.toml"
        custom.write_text("")
        assert resolve_config_path(custom, tmp_path) == custom

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config_path(tmp_path / "nope.toml", tmp_path) is None

    def test_falls_back_to_discovery(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert resolve_config_path(None, tmp_path) == config_file


class TestReadConfig:
    def test_parses_tables(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("verbose = true\n[validation]\nreport_ignored_fields = false\n")
        assert read_config(config_file) == {
            "verbose": True,
            "validation": {"report_ignored_fields": False},
        }

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output\nwidth = ")
        with pytest.raises(ConfigFileError, match="bad TOML"):
            read_config(config_file)
