"""Tests for the templates CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from adschema.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestTemplatesCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["templates"])
        assert result.exit_code == 0
        assert "electronics" in result.output
        assert "7 templates" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "templates"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "list_templates"
        assert data["data"]["count"] == 7

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "templates"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "electronics"
