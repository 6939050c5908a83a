"""Unit tests for the Result type."""

import pytest

from storefront.domain.result import ErrorKind, Result


class TestResult:

    def test_ok_without_value(self):
        result = Result.ok()
        assert result.is_success
        assert not result.is_failure
        assert result.error is None
        assert result.kind is None

    def test_ok_carries_value(self):
        assert Result.ok(42).value == 42

    def test_fail_carries_kind_and_message(self):
        result = Result.fail(ErrorKind.INVALID_STATE, "boom")
        assert result.is_failure
        assert result.error == "boom"
        assert result.kind is ErrorKind.INVALID_STATE
        assert result.value is None

    def test_is_immutable(self):
        result = Result.ok()
        with pytest.raises(AttributeError):
            result.is_success = False  # type: ignore[misc]

    def test_str(self):
        assert str(Result.ok()) == "Ok"
        assert str(Result.fail(ErrorKind.NOT_FOUND, "Order #1 not found")) == (
            "NOT_FOUND: Order #1 not found"
        )
