"""Tests for hxattrs.result: AttrsResult."""

import pytest

from hxattrs.errors import EmptyAttrs, InvalidUri
from hxattrs.result import AttrsResult


class TestAttrsResult:
    def test_ok_is_truthy(self) -> None:
        result = AttrsResult.ok("hx-get=/x")
        assert result
        assert result.is_ok is True
        assert result.value == "hx-get=/x"
        assert result.error is None

    def test_fail_is_falsy(self) -> None:
        result = AttrsResult.fail(EmptyAttrs())
        assert not result
        assert result.is_ok is False
        assert result.value is None

    def test_empty_string_value_is_still_ok(self) -> None:
        assert AttrsResult.ok("")

    def test_unwrap_ok(self) -> None:
        assert AttrsResult.ok("hx-get=/x").unwrap() == "hx-get=/x"

    def test_unwrap_raises_carried_error(self) -> None:
        error = InvalidUri(uri="/a b", reason="invalid uri character")
        with pytest.raises(InvalidUri) as exc_info:
            AttrsResult.fail(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_or(self) -> None:
        assert AttrsResult.fail(EmptyAttrs()).unwrap_or("") == ""
        assert AttrsResult.ok("x=1").unwrap_or("") == "x=1"

    def test_frozen(self) -> None:
        result = AttrsResult.ok("x=1")
        with pytest.raises(AttributeError):
            result.value = "y"  # type: ignore[misc]

    def test_unwrap_empty_string(self) -> None:
        assert AttrsResult.ok("").unwrap() == ""
        assert AttrsResult.ok("").unwrap_or("fallback") == ""
