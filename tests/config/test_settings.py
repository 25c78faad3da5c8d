"""Tests for GarageNetSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from garagenet.config.settings import GarageNetSettings

pytestmark = pytest.mark.usefixtures("_isolated_config")


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = GarageNetSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.no_interact is False
        assert settings.api.endpoint == "http://localhost:20002/graphql"
        assert settings.auth.id_token is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GarageNetSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "garagenet.toml"
        toml.write_text('[api]\nendpoint = "https://api.example.com/graphql"\napi_key = "k"\n')
        settings = GarageNetSettings.from_cli(start=tmp_path)
        assert settings.api.endpoint == "https://api.example.com/graphql"
        assert settings.api.api_key == "k"
        assert settings.api.timeout == 10.0  # default preserved
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "garagenet.toml").write_text('[auth]\nusername = "jsmith"\n')
        child = tmp_path / "events" / "2026"
        child.mkdir(parents=True)
        settings = GarageNetSettings.from_cli(start=child)
        assert settings.auth.username == "jsmith"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[api]\ntimeout = 2.5\n")
        settings = GarageNetSettings.from_cli(config_path=str(custom))
        assert settings.api.timeout == 2.5
        assert settings.config_path == custom

    def test_invalid_toml_is_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "garagenet.toml").write_text("[api\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GarageNetSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = GarageNetSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "garagenet.toml").write_text("no_interact = true\n")
        settings = GarageNetSettings.from_cli(start=tmp_path, no_interact=False)
        assert settings.no_interact is False

    def test_endpoint_flag_keeps_rest_of_api_section(self, tmp_path: Path) -> None:
        (tmp_path / "garagenet.toml").write_text(
            '[api]\nendpoint = "https://file.example/graphql"\napi_key = "da2-file"\n'
        )
        settings = GarageNetSettings.from_cli(
            start=tmp_path, endpoint="https://flag.example/graphql"
        )
        assert settings.api.endpoint == "https://flag.example/graphql"
        assert settings.api.api_key == "da2-file"


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GARAGENET_QUIET", "true")
        settings = GarageNetSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "garagenet.toml").write_text('[api]\napi_key = "from-toml"\n')
        monkeypatch.setenv("GARAGENET_API__API_KEY", "from-env")
        monkeypatch.setenv("GARAGENET_AUTH__ID_TOKEN", "tok")

        settings = GarageNetSettings.from_cli(start=tmp_path)

        assert settings.api.api_key == "from-env"
        assert settings.auth.id_token == "tok"


class TestInvalidConfiguration:
    def test_unknown_keys_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "garagenet.toml").write_text('colour = "blue"\n[api]\ntimeout = 4\n')
        with caplog.at_level("WARNING", logger="garagenet.config.settings"):
            settings = GarageNetSettings.from_cli(start=tmp_path)
        assert settings.api.timeout == 4.0
        assert "colour" in caplog.text

    def test_bad_endpoint(self, tmp_path: Path) -> None:
        (tmp_path / "garagenet.toml").write_text('[api]\nendpoint = "localhost:20002"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            GarageNetSettings.from_cli(start=tmp_path)
