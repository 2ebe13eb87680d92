"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from civtime.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="breakdown", data={"year": 1970})
        assert result.ok is True
        assert result.op == "breakdown"
        assert result.data == {"year": 1970}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("breakdown", "INVALID_INSTANT", "bad", value="'x'")
        assert result.ok is False
        assert result.error == ServiceError(
            code="INVALID_INSTANT", message="bad", detail={"value": "'x'"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="resolve", data={"offset": 60})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["offset"] == 60

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestSuccessHelper:
    def test_defaults_to_no_warnings(self) -> None:
        result = ServiceResult.success("zone", {"utc": True})
        assert result == ServiceResult(ok=True, op="zone", data={"utc": True})

    def test_carries_warnings(self) -> None:
        result = ServiceResult.success("resolve", {"offset": 30}, ["out of order"])
        assert result.ok
        assert result.warnings == ["out of order"]
        assert result.error is None
