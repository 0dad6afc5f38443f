"""Tests for Violation and ModelResult."""

import json

import pytest

from structmodel.domain.results import ModelResult, Violation


class TestViolation:
    def test_construction(self) -> None:
        violation = Violation(field_path="favoriteFood", message="must not be 'Revenge'")
        assert violation.field_path == "favoriteFood"
        assert violation.message == "must not be 'Revenge'"

    def test_frozen(self) -> None:
        violation = Violation(field_path="a", message="b")
        with pytest.raises(Exception):
            violation.message = "c"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Violation(field_path="a", message="b") == Violation(field_path="a", message="b")


class TestModelResult:
    def test_success_defaults(self) -> None:
        result = ModelResult(ok=True, model_type="ExampleUser", instance={"name": "Arthur"})
        assert result.ok is True
        assert result.violations == []

    def test_failure(self) -> None:
        result = ModelResult(
            ok=False,
            model_type="ExampleUser",
            violations=[Violation(field_path="favoriteFood", message="nope")],
        )
        assert result.instance is None
        assert result.violations[0].field_path == "favoriteFood"

    def test_json_serialization(self) -> None:
        result = ModelResult(
            ok=False,
            model_type="ExampleUser",
            violations=[Violation(field_path="name", message="must not be blank")],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["model_type"] == "ExampleUser"
        assert parsed["violations"] == [{"field_path": "name", "message": "must not be blank"}]
