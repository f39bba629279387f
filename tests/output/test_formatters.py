"""Tests for output mode dispatch."""

import json

from finset.output.formatters import OutputSettings, format_result
from finset.services.result import ServiceResult

RESULT = ServiceResult(
    ok=True,
    op="union",
    data={"result": ["a", "b"], "mode": "sequence", "count": 2},
)


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["result"] == ["a", "b"]

    def test_json_beats_quiet(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "union"

    def test_quiet_mode(self) -> None:
        assert format_result(RESULT, settings=OutputSettings(quiet=True)) == '["a","b"]'

    def test_default_is_rich(self) -> None:
        output = format_result(RESULT)
        assert "OK" in output
        assert "union" in output
        assert "sequence" in output
