"""Tests for CivSettings — flags, env vars, TOML, and zone resolution."""

from pathlib import Path

import click
import pytest

from civtime.config.settings import CivSettings
from civtime.domain.zone import UTC, Era, custom_zone
from civtime.infrastructure import host

ERA_TOML = """\
[zone]
default_offset = 60

[[zone.eras]]
start = 2000
offset = 120

[[zone.eras]]
start = 1000
offset = 90
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CIVTIME_CONFIG", "CIVTIME_OFFSET", "CIVTIME_UTC", "CIVTIME_ZONE__DEFAULT_OFFSET"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CivSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.utc is False
        assert settings.offset is None
        assert settings.zone.default_offset is None
        assert settings.zone.eras == []

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CivSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_zone_section(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text(ERA_TOML)
        settings = CivSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / "civtime.toml"
        assert settings.zone.default_offset == 60
        assert [e.start for e in settings.zone.eras] == [2000, 1000]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[zone]\ndefault_offset = -60\n")
        settings = CivSettings.from_cli(config_path=str(custom))
        assert settings.zone.default_offset == -60
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text("[zone\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CivSettings.from_cli(start=tmp_path)


class TestPrecedence:
    def test_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text("offset = 15\n")
        assert CivSettings.from_cli(start=tmp_path, offset=30).offset == 30

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "civtime.toml").write_text("offset = 15\n")
        monkeypatch.setenv("CIVTIME_OFFSET", "45")
        assert CivSettings.from_cli(start=tmp_path).offset == 45

    def test_unset_flag_does_not_mask_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CIVTIME_OFFSET", "90")
        assert CivSettings.from_cli(start=tmp_path, offset=None).offset == 90

    def test_nested_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CIVTIME_ZONE__DEFAULT_OFFSET", "-420")
        assert CivSettings.from_cli(start=tmp_path).zone.default_offset == -420


class TestResolveZone:
    def test_utc_flag_wins(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text(ERA_TOML)
        settings = CivSettings.from_cli(start=tmp_path, utc=True, offset=30)
        assert settings.resolve_zone() == UTC

    def test_offset_flag_is_flat(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text(ERA_TOML)
        settings = CivSettings.from_cli(start=tmp_path, offset=-300)
        assert settings.resolve_zone() == custom_zone(-300, [])

    def test_zone_section(self, tmp_path: Path) -> None:
        (tmp_path / "civtime.toml").write_text(ERA_TOML)
        settings = CivSettings.from_cli(start=tmp_path)
        assert settings.resolve_zone() == custom_zone(60, [Era(2000, 120), Era(1000, 90)])

    def test_host_zone_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(host, "local_offset_minutes", lambda: -180)
        settings = CivSettings.from_cli(start=tmp_path)
        assert settings.resolve_zone() == custom_zone(-180, [])

    def test_host_offset_with_configured_eras(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(host, "local_offset_minutes", lambda: 600)
        (tmp_path / "civtime.toml").write_text("[[zone.eras]]\nstart = 0\noffset = 660\n")
        settings = CivSettings.from_cli(start=tmp_path)
        assert settings.resolve_zone() == custom_zone(600, [Era(0, 660)])


class TestInvalidConfiguration:
    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            CivSettings.from_cli(config_path=str(tmp_path / "absent.toml"))

    def test_bad_toml_value_names_file_and_field(self, tmp_path: Path) -> None:
        toml = tmp_path / "civtime.toml"
        toml.write_text('[zone]\ndefault_offset = "abc"\n')
        with pytest.raises(click.ClickException) as excinfo:
            CivSettings.from_cli(start=tmp_path)
        message = excinfo.value.message
        assert "zone.default_offset" in message
        assert str(toml.resolve()) in message
        assert "CIVTIME_ZONE__DEFAULT_OFFSET" in message

    def test_bad_env_value_names_variable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CIVTIME_OFFSET", "abc")
        with pytest.raises(click.ClickException) as excinfo:
            CivSettings.from_cli(start=tmp_path)
        assert "offset (CIVTIME_OFFSET)" in excinfo.value.message
