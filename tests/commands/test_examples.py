"""Tests for the --examples flag on commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from finset.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")

COMMANDS = ["op", "check", "disjoint", "product", "powerset", "logic", "sumtype"]


@pytest.mark.parametrize("command", COMMANDS)
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cli {command}'" in result.stdout
    assert "finset " in result.stdout


@pytest.mark.parametrize("command", COMMANDS)
def test_help_mentions_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.stdout
