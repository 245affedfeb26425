"""Tests for BrowselSettings — CLI flags, env vars, and TOML in one object."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from browsel.config.settings import BrowselSettings


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("BROWSEL_CONFIG", "BROWSEL_DATA_DIR", "BROWSEL_LAUNCH__DETACH", "APPDATA"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.data_dir == tmp_path
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.config_path is None
        assert settings.store.filename == "browsel.db"
        assert settings.launch.detach is True
        assert settings.launch.default_browser is None

    def test_db_path(self, tmp_path: Path) -> None:
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.db_path == tmp_path / "browsel.db"

    def test_default_data_dir_is_home(self) -> None:
        settings = BrowselSettings.from_cli()
        assert settings.data_dir == Path.home() / ".browsel"

    def test_default_data_dir_under_appdata(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
        settings = BrowselSettings.from_cli()
        assert settings.data_dir == tmp_path / "Roaming" / "browsel"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "browsel.toml").write_text(
            '[store]\nfilename = "rules.db"\n[launch]\ndefault_browser = "firefox"\n'
        )
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.store.filename == "rules.db"
        assert settings.launch.default_browser == "firefox"
        assert settings.launch.detach is True  # default preserved
        assert settings.config_path == (tmp_path / "browsel.toml").resolve()

    def test_walk_up_discovery(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "browsel.toml").write_text("[launch]\ndetach = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.launch.detach is False

    def test_data_dir_from_toml(self, tmp_path: Path) -> None:
        target = tmp_path / "store-here"
        (tmp_path / "browsel.toml").write_text(f'data_dir = "{target.as_posix()}"\n')
        settings = BrowselSettings.from_cli()
        assert settings.data_dir == target

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text('[store]\nfilename = "custom.db"\n')
        settings = BrowselSettings.from_cli(config_path=str(custom), data_dir=tmp_path)
        assert settings.store.filename == "custom.db"
        assert settings.config_path == custom

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[store]\nfilename = "env.db"\n')
        monkeypatch.setenv("BROWSEL_CONFIG", str(custom))
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.store.filename == "env.db"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "browsel.toml").write_text("[store\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BrowselSettings.from_cli(data_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "browsel.toml").write_text("[launch]\ndetach = false\n")
        monkeypatch.setenv("BROWSEL_LAUNCH__DETACH", "true")
        settings = BrowselSettings.from_cli(data_dir=tmp_path)
        assert settings.launch.detach is True

    def test_env_data_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BROWSEL_DATA_DIR", str(tmp_path / "env"))
        settings = BrowselSettings.from_cli()
        assert settings.data_dir == tmp_path / "env"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BROWSEL_DATA_DIR", str(tmp_path / "env"))
        settings = BrowselSettings.from_cli(data_dir=tmp_path / "cli")
        assert settings.data_dir == tmp_path / "cli"

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = BrowselSettings.from_cli(
            data_dir=tmp_path, json_output=True, quiet=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True
