"""Tests for DateRangerSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from dateranger.config.settings import DateRangerSettings
from dateranger.domain.moments import TimeUnit


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATERANGER_CONFIG", raising=False)


class TestDateRangerSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.enumerate.default_step is TimeUnit.DAY
        assert settings.enumerate.max_items == 1000
        assert settings.resolve.order == ("short", "predefined", "relative", "vector")
        assert settings.output.milliseconds is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "dateranger.toml"
        toml.write_text('[enumerate]\ndefault_step = "Month"\nmax_items = 50\n')
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.config_path == toml
        assert settings.enumerate.default_step is TimeUnit.MONTH
        assert settings.enumerate.max_items == 50
        assert settings.resolve.order[0] == "short"  # default preserved

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "dateranger.toml").write_text('[resolve]\norder = ["vector", "short"]\n')
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = DateRangerSettings.from_cli(search_root=child)
        assert settings.resolve.order == ("vector", "short")

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "dateranger.toml").write_text("")
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.enumerate.max_items == 1000

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[output]\ndate_format = "%d/%m/%Y"\n')
        settings = DateRangerSettings.from_cli(config_path=str(custom))
        assert settings.output.date_format == "%d/%m/%Y"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = DateRangerSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml_is_a_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "dateranger.toml").write_text("[enumerate\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DateRangerSettings.from_cli(search_root=tmp_path)

    def test_invalid_section_value_is_a_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "dateranger.toml").write_text('[resolve]\norder = ["soon"]\n')
        with pytest.raises(click.ClickException, match="Invalid config"):
            DateRangerSettings.from_cli(search_root=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = DateRangerSettings.from_cli(
            search_root=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "dateranger.toml").write_text("quiet = true\n")
        settings = DateRangerSettings.from_cli(search_root=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATERANGER_QUIET", "true")
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DATERANGER_ENUMERATE__MAX_ITEMS", "7")
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.enumerate.max_items == 7

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "dateranger.toml").write_text("[enumerate]\nmax_items = 50\n")
        monkeypatch.setenv("DATERANGER_ENUMERATE__MAX_ITEMS", "7")
        settings = DateRangerSettings.from_cli(search_root=tmp_path)
        assert settings.enumerate.max_items == 7
