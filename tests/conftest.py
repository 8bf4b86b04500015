"""Shared pytest fixtures and test helpers for rangepick tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from rangepick.config.settings import RangepickSettings
from rangepick.services.picker import PickerService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings."""
    monkeypatch.delenv("RANGEPICK_CONFIG", raising=False)
    monkeypatch.delenv("RANGEPICK_PICKER__TIMEZONE", raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> RangepickSettings:
    """Settings with code defaults only (no TOML in reach)."""
    return RangepickSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def service(settings: RangepickSettings) -> PickerService:
    return PickerService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty directory so no rangepick.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def dt(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM`` into a naive datetime."""
    return datetime.fromisoformat(text)


def fields(errors: list[Any]) -> list[str]:
    """Field tags of a violation list, in order."""
    return [str(e.field) if hasattr(e, "field") else e["field"] for e in errors]
