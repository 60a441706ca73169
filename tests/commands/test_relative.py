"""Tests for the relative CLI command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from dateranger.cli import cli


@pytest.mark.usefixtures("_isolated_cwd", "fixed_now")
class TestRelativeCommands:
    def test_list_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["relative", "list"])
        assert result.exit_code == 0
        assert "Start of Last Week" in result.output
        assert "31 items" in result.output

    def test_list_quiet_sorted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "relative", "list"])
        lines = result.output.splitlines()
        assert len(lines) == 31
        assert lines == sorted(lines, key=str.lower)

    def test_resolve(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "relative", "resolve", "START OF NEXT MONTH"])
        assert result.exit_code == 0
        assert result.output.strip() == "2024-06-01T00:00:00.000"

    def test_resolve_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "relative", "resolve", "last tuesday"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "UNKNOWN_NAME"

    def test_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "relative", "range", "Now_7 Days Ago"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["relative"] == "7 Days Ago_Now"
        assert data["start"] == "2024-05-08T10:30:45.123"
