"""Shared pytest fixtures for finset tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from finset.config.settings import FinsetSettings
from finset.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop FINSET_* variables so the host environment never leaks in."""
    for name in list(os.environ):
        if name.startswith("FINSET_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    finset_logger = logging.getLogger("finset")
    finset_level = finset_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    finset_logger.setLevel(finset_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> FinsetSettings:
    """Settings with code defaults (no finset.toml above tmp_path)."""
    return FinsetSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so config discovery never picks up a stray finset.toml.
    """
    monkeypatch.chdir(tmp_path)
