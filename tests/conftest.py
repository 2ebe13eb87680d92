"""Shared pytest fixtures for civtime tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    civ = logging.getLogger("civtime")
    civ_level = civ.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    civ.setLevel(civ_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no CIVTIME_* environment.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    for name in ("CIVTIME_CONFIG", "CIVTIME_OFFSET", "CIVTIME_UTC", "CIVTIME_ZONE__DEFAULT_OFFSET"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
