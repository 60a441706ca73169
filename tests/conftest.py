"""Shared pytest fixtures for dateranger tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from dateranger.config.logging import LOGGER_NAME
from dateranger.config.settings import DateRangerSettings
from dateranger.domain import moments

# Wednesday, mid-quarter, in a leap year.
FIXED_NOW = datetime(2024, 5, 15, 10, 30, 45, 123000)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None]:
    """Drop the handler a CLI invocation installed on the package logger."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the wall clock to :data:`FIXED_NOW`.

    Every clock read in the domain layer goes through ``moments.now``, so
    patching the module attribute freezes ``today()``, the period helpers,
    the relative anchors, and the predefined ranges together.
    """
    monkeypatch.setattr(moments, "now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray dateranger.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("DATERANGER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DateRangerSettings:
    """Default settings with no TOML file in reach."""
    monkeypatch.delenv("DATERANGER_CONFIG", raising=False)
    return DateRangerSettings.from_cli(search_root=tmp_path)
