"""Tests for the format_result dispatcher and OutputSettings."""

import json

from proptour.output.formatters import OutputSettings, format_result
from proptour.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("tour", count=8), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "tour"
        assert data["data"]["count"] == 8

    def test_json_mode_error(self) -> None:
        output = format_result(_err("tour", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["data"]["key"] == "val"

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"), settings=OutputSettings(), json_output=True
        )
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("something"), settings=OutputSettings(quiet=True))
        assert output == "OK: something"

    def test_quiet_error(self) -> None:
        output = format_result(_err("tour", "Bad input"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: tour — Bad input"


class TestFormatResultHuman:
    def test_human_success(self) -> None:
        output = format_result(_ok("something", answer=42))
        assert "OK" in output
        assert "something" in output
        assert "answer: 42" in output

    def test_json_takes_priority_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True
