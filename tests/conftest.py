"""Shared pytest fixtures and test helpers for adschema tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from adschema.config.discovery import CONFIG_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run from an empty temp directory with no config file in reach.

    Also restores the root logger, which every CLI invocation reconfigures.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"ADSCHEMA_{name}", raising=False)

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield tmp_path
    root.handlers = handlers
    root.setLevel(level)
