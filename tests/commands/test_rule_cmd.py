"""Tests for the ``rule`` command group."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from browsel.cli import cli


def _json(runner: CliRunner, *args: str) -> dict[str, Any]:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


@pytest.fixture
def runner(cli_runner: CliRunner, _isolated_data_dir: Path) -> CliRunner:
    """CLI runner with firefox and chrome registered."""
    for browser_id, name in (("firefox", "Firefox"), ("chrome", "Chrome")):
        cli_runner.invoke(cli, ["browser", "add", browser_id, name, f"/usr/bin/{browser_id}"])
    return cli_runner


class TestRuleAdd:
    def test_add(self, runner: CliRunner) -> None:
        data = _json(runner, "rule", "add", "*.google.com", "chrome", "--priority", "5")
        assert data["ok"] is True
        assert data["data"]["pattern"] == "*.google.com"
        assert data["data"]["priority"] == 5

    def test_human_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rule", "add", "example.com", "firefox"])
        assert result.exit_code == 0
        assert "add_rule" in result.stdout
        assert "pattern: example.com" in result.stdout

    def test_invalid_pattern(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--json", "rule", "add", "**", "firefox"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_PATTERN"

    def test_unknown_browser(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rule", "add", "example.com", "safari"])
        assert result.exit_code == 1
        assert "No browser with ID: safari" in result.stderr

    def test_replace_warns_on_stderr(self, runner: CliRunner) -> None:
        runner.invoke(cli, ["rule", "add", "example.com", "firefox"])
        result = runner.invoke(cli, ["rule", "add", "example.com", "chrome"])
        assert result.exit_code == 0
        assert "WARNING: Replaced rule" in result.stderr


class TestRuleList:
    def test_order(self, runner: CliRunner) -> None:
        _json(runner, "rule", "add", "a.com", "firefox")
        _json(runner, "rule", "add", "b.com", "chrome", "-p", "3")
        data = _json(runner, "rule", "list")
        assert [i["pattern"] for i in data["data"]["items"]] == ["b.com", "a.com"]

    def test_quiet_ids(self, runner: CliRunner) -> None:
        first = _json(runner, "rule", "add", "a.com", "firefox")["data"]["id"]
        second = _json(runner, "rule", "add", "b.com", "firefox")["data"]["id"]
        result = runner.invoke(cli, ["-q", "rule", "list"])
        assert result.stdout.split() == [str(first), str(second)]

    def test_empty(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rule", "list"])
        assert result.exit_code == 0
        assert "No rules" in result.stdout


class TestRuleEdit:
    def test_priority(self, runner: CliRunner) -> None:
        rule_id = _json(runner, "rule", "add", "a.com", "firefox")["data"]["id"]
        data = _json(runner, "rule", "priority", str(rule_id), "9")
        assert data["data"]["priority"] == 9

    def test_negative_priority(self, runner: CliRunner) -> None:
        rule_id = _json(runner, "rule", "add", "a.com", "firefox")["data"]["id"]
        data = _json(runner, "rule", "priority", str(rule_id), "--", "-2")
        assert data["data"]["priority"] == -2

    def test_swap(self, runner: CliRunner) -> None:
        a = _json(runner, "rule", "add", "a.com", "firefox", "-p", "1")["data"]["id"]
        b = _json(runner, "rule", "add", "b.com", "firefox", "-p", "2")["data"]["id"]
        _json(runner, "rule", "swap", str(a), str(b))
        items = _json(runner, "rule", "list")["data"]["items"]
        assert [i["id"] for i in items] == [a, b]

    def test_remove(self, runner: CliRunner) -> None:
        rule_id = _json(runner, "rule", "add", "a.com", "firefox")["data"]["id"]
        assert _json(runner, "rule", "remove", str(rule_id))["data"] == {"id": rule_id}
        assert _json(runner, "rule", "list")["data"]["count"] == 0

    def test_remove_missing(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rule", "remove", "77"])
        assert result.exit_code == 1

    def test_clear_for_browser(self, runner: CliRunner) -> None:
        _json(runner, "rule", "add", "a.com", "firefox")
        _json(runner, "rule", "add", "b.com", "chrome")
        data = _json(runner, "rule", "clear", "firefox", "--yes")
        assert data["data"]["rules_removed"] == 1
        assert _json(runner, "rule", "list")["data"]["count"] == 1

    def test_clear_asks_first(self, runner: CliRunner) -> None:
        _json(runner, "rule", "add", "a.com", "firefox")
        result = runner.invoke(cli, ["rule", "clear", "firefox"], input="n\n")
        assert result.exit_code == 1
        assert _json(runner, "rule", "list")["data"]["count"] == 1

    def test_non_integer_id(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rule", "remove", "abc"])
        assert result.exit_code == 2
