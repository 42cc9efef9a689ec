"""Shared pytest fixtures for utilkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from utilkit.config.settings import UtilSettings
from utilkit.services.toolkit import ToolkitService


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no UTILKIT_* overrides.

    Config discovery walks up from CWD, so this keeps a developer's own
    utilkit.toml out of the tests.
    """
    for key in (
        "UTILKIT_CONFIG",
        "UTILKIT_JSON_OUTPUT",
        "UTILKIT_QUIET",
        "UTILKIT_VERBOSE",
        "UTILKIT_LOG_JSON",
        "UTILKIT_SQUARE__DELAY_SECONDS",
        "UTILKIT_RATINGS__MIN_RATING",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> UtilSettings:
    """Default settings with no TOML file."""
    return UtilSettings.from_cli(start=tmp_path)


@pytest.fixture
def fast_config(tmp_path: Path) -> Path:
    """Write a utilkit.toml into CWD that disables the square delay."""
    toml = tmp_path / "utilkit.toml"
    toml.write_text("[square]\ndelay_seconds = 0\n")
    return toml


@pytest.fixture
def toolkit(fast_config: Path) -> ToolkitService:
    """Toolkit service whose delayed square does not wait."""
    return ToolkitService(UtilSettings.from_cli(start=fast_config.parent))
