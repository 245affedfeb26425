"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from browsel.config.logging import ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger(ROOT_LOGGER)
    our_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(our_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("browsel").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("browsel").level == logging.WARNING

    def test_json_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("browsel.test").info("rule_saved", rule_id=3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "rule_saved"
        assert parsed["rule_id"] == 3
        assert parsed["level"] == "info"
        assert parsed["logger"] == "browsel.test"
        assert "timestamp" in parsed

    def test_stdlib_records_share_the_format(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("browsel.infrastructure.launcher").debug("Launched %s", "firefox")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Launched firefox"
        assert parsed["level"] == "debug"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        get_logger("browsel.test").debug("url_routed")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("sqlalchemy.engine").info("SELECT 1")
        logging.getLogger("urllib3").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        assert len(logging.getLogger().handlers) == 1
