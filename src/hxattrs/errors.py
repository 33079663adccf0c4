"""hxattrs exception hierarchy.

Closed taxonomy: every failure of attribute serialization is one of
these types, so callers can catch ``HtmxError`` and be done.
"""

from dataclasses import dataclass


class HtmxError(Exception):
    """Base for all hxattrs errors."""


class EmptyAttrs(HtmxError):
    """The attribute collection held nothing to serialize."""

    def __init__(self, detail: str = "No attributes provided!") -> None:
        super().__init__(detail)


@dataclass(frozen=True, slots=True)
class InvalidUri(HtmxError):
    """A request attribute carried a URI the validator rejected.

    ``reason`` is the validator's diagnostic, passed through untouched.
    No correction is attempted (no percent-encoding, no default scheme).
    """

    uri: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid uri provided: {self.reason}"
