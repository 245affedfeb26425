"""Shared pytest fixtures and test helpers for browsel tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from browsel.infrastructure.database.engine import init_database
from browsel.infrastructure.store import Store


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Generator[None]:
    """CLI runs install a stderr handler on the root logger; drop it afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created and settings seeded."""
    engine = init_database(tmp_path / "browsel.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(tmp_path: Path) -> Generator[Store]:
    """Store on a temp database file."""
    s = Store(tmp_path / "browsel.db")
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a temp data dir and keep real config out of reach.

    Use via ``@pytest.mark.usefixtures("_isolated_data_dir")`` on command
    test classes.
    """
    data_dir = tmp_path / "data"
    monkeypatch.setenv("BROWSEL_DATA_DIR", str(data_dir))
    monkeypatch.delenv("BROWSEL_CONFIG", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.chdir(tmp_path)
    return data_dir


class PopenRecorder:
    """Stand-in for ``subprocess.Popen`` that records instead of spawning."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], dict[str, Any]]] = []
        self.error: OSError | None = None

    def __call__(self, command: list[str], **kwargs: Any) -> object:
        if self.error is not None:
            raise self.error
        self.calls.append((command, kwargs))
        return object()


@pytest.fixture
def popen(monkeypatch: pytest.MonkeyPatch) -> PopenRecorder:
    """Capture browser launches."""
    recorder = PopenRecorder()
    monkeypatch.setattr("browsel.infrastructure.launcher.subprocess.Popen", recorder)
    return recorder


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_browser(
    store: Store,
    browser_id: str,
    name: str | None = None,
    exe_path: str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """Register a browser via BrowserService, asserting success."""
    from browsel.services.browsers import BrowserService

    result = BrowserService(store).add_browser(
        browser_id,
        name or browser_id.title(),
        exe_path or f"/usr/bin/{browser_id}",
        **kwargs,
    )
    assert result.ok, result.error
    return result.data


def add_rule(store: Store, pattern: str, browser_id: str, priority: int = 0) -> dict[str, Any]:
    """Store a rule via RuleService, asserting success."""
    from browsel.services.rules import RuleService

    result = RuleService(store).add_rule(pattern, browser_id, priority=priority)
    assert result.ok, result.error
    return result.data
