"""Tests for the disjoint CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from finset.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDisjointCommand:
    def test_all_disjoint(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "disjoint", "[1,2]", '["a","b"]', "[true]"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"] == {"result": True, "domains": 3}

    def test_overlap(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "disjoint", "[1]", "[2]", "[1]"])
        assert result.stdout.strip() == "false"

    def test_no_domains(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "disjoint"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "true"
