"""Serialization result: the attribute string, or the error that stopped it."""

from dataclasses import dataclass
from typing import cast

from hxattrs.errors import HtmxError


@dataclass(frozen=True, slots=True)
class AttrsResult:
    """The outcome of serializing an ``HtmxAttrs`` collection.

    Exactly one of ``value`` and ``error`` is set. The result is falsy
    on failure, so you can write::

        result = attrs.serialize()
        if not result:
            log.warning("bad attrs: %s", result.error)
            return ""
        return result.value

    Serialization is all-or-nothing: a failed result never carries a
    partially joined string.
    """

    value: str | None = None
    error: HtmxError | None = None

    @classmethod
    def ok(cls, value: str) -> AttrsResult:
        return cls(value=value)

    @classmethod
    def fail(cls, error: HtmxError) -> AttrsResult:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        """True if serialization produced a string."""
        return self.error is None

    def __bool__(self) -> bool:
        """Falsy on failure, enabling the ``if not result:`` pattern."""
        return self.is_ok

    def unwrap(self) -> str:
        """Return the string, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return cast(str, self.value)

    def unwrap_or(self, default: str) -> str:
        """Return the string, or *default* on failure."""
        if self.error is not None:
            return default
        return cast(str, self.value)
