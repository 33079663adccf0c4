"""Tests for hxattrs.errors: exception hierarchy and error messages."""

import pytest

from hxattrs.errors import EmptyAttrs, HtmxError, InvalidUri


class TestHierarchy:
    def test_empty_attrs_is_htmx_error(self) -> None:
        assert issubclass(EmptyAttrs, HtmxError)

    def test_invalid_uri_is_htmx_error(self) -> None:
        assert issubclass(InvalidUri, HtmxError)

    def test_htmx_error_is_exception(self) -> None:
        assert issubclass(HtmxError, Exception)


class TestEmptyAttrs:
    def test_message(self) -> None:
        assert str(EmptyAttrs()) == "No attributes provided!"

    def test_custom_detail(self) -> None:
        assert str(EmptyAttrs("nothing here")) == "nothing here"

    def test_catchable_as_htmx_error(self) -> None:
        with pytest.raises(HtmxError):
            raise EmptyAttrs()


class TestInvalidUri:
    def test_fields(self) -> None:
        err = InvalidUri(uri="/a b", reason="invalid uri character")
        assert err.uri == "/a b"
        assert err.reason == "invalid uri character"

    def test_str(self) -> None:
        err = InvalidUri(uri="", reason="empty string")
        assert str(err) == "Invalid uri provided: empty string"

    def test_frozen(self) -> None:
        err = InvalidUri(uri="/a b", reason="invalid uri character")
        with pytest.raises(AttributeError):
            err.uri = "/ok"  # type: ignore[misc]

    def test_catchable_as_htmx_error(self) -> None:
        with pytest.raises(HtmxError, match="Invalid uri provided"):
            raise InvalidUri(uri="/a b", reason="invalid uri character")


class TestErrorExports:
    """Error types are importable from the top-level hxattrs package."""

    def test_import_htmx_error(self) -> None:
        import hxattrs

        assert hxattrs.HtmxError is HtmxError
        assert hxattrs.InvalidUri is InvalidUri
        assert hxattrs.EmptyAttrs is EmptyAttrs
