"""Locating civtime.toml.

An explicit ``--config`` path must exist.  Otherwise ``CIVTIME_CONFIG``
names the file, and failing that the nearest ``civtime.toml`` above the
working directory is used.  Having no file at all is fine.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "civtime.toml"
CONFIG_ENV_VAR = "CIVTIME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the file named by CIVTIME_CONFIG, else the nearest civtime.toml at or above *start*.

    A CIVTIME_CONFIG pointing at a missing file yields None without walking up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for folder in (directory, *directory.parents):
        candidate = folder / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(config_path: str | None, start: Path | None = None) -> Path | None:
    """Resolve the TOML file a CLI invocation should read.

    Raises:
        click.ClickException: *config_path* was given but is not a file.
    """
    if not config_path:
        return find_config(start)

    explicit = Path(config_path)
    if not explicit.is_file():
        import click

        msg = f"Config file not found: {explicit}"
        raise click.ClickException(msg)
    return explicit
