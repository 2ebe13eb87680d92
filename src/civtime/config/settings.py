"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CIVTIME_*`` prefix
  3. TOML file    — ``civtime.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
resolves its file through ``locate_config`` in
:mod:`civtime.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from civtime.config.discovery import locate_config
from civtime.config.models import ZoneConfig

if TYPE_CHECKING:
    from civtime.domain.zone import Zone


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``civtime.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


def _describe_invalid(exc: ValidationError, toml_path: Path | None) -> str:
    """One line per bad setting, naming the env var and TOML file it may come from."""
    source = f"{toml_path} or " if toml_path else ""
    lines = ["Invalid configuration:"]
    for error in exc.errors():
        dotted = ".".join(str(part) for part in error["loc"])
        env_var = "CIVTIME_" + "__".join(str(part) for part in error["loc"]).upper()
        lines.append(f"  {dotted} ({source}{env_var}): {error['msg']}")
    return "\n".join(lines)


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CivSettings(BaseSettings):
    """Unified settings for the civtime CLI.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        utc: Force the UTC zone regardless of other zone settings.
        offset: Force a flat zone with this offset (minutes east of UTC).
        zone: The ``[zone]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CIVTIME_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    utc: bool = False
    offset: int | None = None

    # --- TOML sections ---
    zone: ZoneConfig = Field(default_factory=ZoneConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CivSettings:
        """Construct settings from a CLI invocation.

        Discovers ``civtime.toml`` via walk-up from *start* (or uses an
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.  Flags left as None do not mask env or TOML values.

        Raises:
            click.ClickException: An explicit *config_path* is missing, the
                TOML is malformed, or a TOML/env value fails validation.
        """
        toml_path = locate_config(config_path, start)
        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        except ValidationError as exc:
            import click

            raise click.ClickException(_describe_invalid(exc, toml_path)) from exc
        finally:
            _tls.toml_path = None

    def resolve_zone(self) -> Zone:
        """The effective zone: ``--utc``, then ``--offset``, then ``[zone]``, then host."""
        from civtime.domain.zone import UTC, custom_zone
        from civtime.infrastructure.host import here, local_offset_minutes

        if self.utc:
            return UTC
        if self.offset is not None:
            return custom_zone(self.offset, ())
        if self.zone.default_offset is not None:
            return self.zone.to_zone(self.zone.default_offset)
        if not self.zone.eras:
            return here()
        return self.zone.to_zone(local_offset_minutes())
