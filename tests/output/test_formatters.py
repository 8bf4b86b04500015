"""Tests for output mode selection."""

import json

from rangepick.output.formatters import OutputSettings, format_result
from rangepick.services.result import ServiceResult


def _result() -> ServiceResult:
    return ServiceResult(ok=True, op="timezone_info", data={"timezone": "UTC"})


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        output = format_result(_result())
        assert "OK" in output
        assert "timezone: UTC" in output

    def test_json(self) -> None:
        output = format_result(_result(), settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"] == {"timezone": "UTC"}

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_result(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "timezone_info"

    def test_quiet(self) -> None:
        assert format_result(_result(), settings=OutputSettings(quiet=True)) == "OK: timezone_info"
