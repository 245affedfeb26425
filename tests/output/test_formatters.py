"""Tests for output mode selection."""

from __future__ import annotations

import json

from browsel.output.formatters import OutputSettings, format_result
from browsel.services.result import ErrorCode, ServiceResult

ROUTED = ServiceResult(
    ok=True,
    op="route",
    data={
        "url": "https://github.com",
        "domain": "github.com",
        "path": "",
        "matched": True,
        "source": "rule",
        "rule": {"id": 1, "pattern": "github.com", "priority": 0},
        "browser": {"id": "firefox", "name": "Firefox"},
    },
)


class TestFormatResult:
    def test_json_mode(self) -> None:
        out = format_result(ROUTED, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["ok"] is True
        assert parsed["data"]["browser"]["id"] == "firefox"

    def test_json_beats_quiet(self) -> None:
        out = format_result(ROUTED, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "route"

    def test_quiet_mode(self) -> None:
        assert format_result(ROUTED, settings=OutputSettings(quiet=True)) == "firefox"

    def test_default_is_human(self) -> None:
        out = format_result(ROUTED)
        assert "https://github.com" in out
        assert "Firefox (firefox)" in out

    def test_error_human(self) -> None:
        result = ServiceResult.failure("remove_rule", ErrorCode.NOT_FOUND, "No rule with ID: 9")
        out = format_result(result)
        assert "ERROR" in out
        assert "No rule with ID: 9" in out

    def test_error_json(self) -> None:
        result = ServiceResult.failure("remove_rule", ErrorCode.NOT_FOUND, "gone", rule_id=9)
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["error"]["code"] == "NOT_FOUND"
        assert parsed["error"]["detail"] == {"rule_id": 9}
