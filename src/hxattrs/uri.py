"""URI syntax checking for request attributes.

``parse_uri`` accepts the request-target forms an HTTP client would
send and rejects anything else with a ``UriError`` whose message names
the problem::

    >>> parse_uri("/items?page=2").path
    '/items'
    >>> parse_uri("https://example.com:8443/x").authority
    'example.com:8443'
    >>> parse_uri("/has space")
    Traceback (most recent call last):
    ...
    hxattrs.uri.UriError: invalid uri character

Accepted forms:

- origin-form (``/a/b?q=1#frag``)
- absolute-form (``scheme://authority[/path][?query][#fragment]``)
- authority-form (``host`` or ``host:port``, nothing after it)
- asterisk-form (``*``)

Scheme-less relative references (``a/b``, ``?q=1``, ``#frag``) are
rejected. Path and query characters follow what HTTP servers accept in
practice: besides the RFC 3986 set, ``"``, ``{``, ``}``, ``|``, ``\\``
and ``^`` pass so JSON values and ``{placeholder}`` segments work.
Percent escapes are not decoded or checked, and the fragment is not
inspected. Nothing is normalized, resolved, or fetched.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

DEFAULT_MAX_LENGTH = 65534

# Visible ASCII minus space, "#", "<", ">", "?" and "`"
_PATH_RE = re.compile(r"[\x21\x22\x24-\x3B\x3D\x40-\x5F\x61-\x7E]*")
# Visible ASCII minus space, "#", "<" and ">"
_QUERY_RE = re.compile(r"[\x21\x22\x24-\x3B\x3D\x3F-\x7E]*")
_AUTHORITY_RE = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:@\[\]%]+")
_SCHEME_PREFIX_RE = re.compile(r"^(?P<scheme>[^/?#]*)://")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")
_PORT_RE = re.compile(r"^[0-9]{1,5}$")


class UriError(ValueError):
    """Raised by ``parse_uri`` when a string is not a valid URI."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ParsedUri:
    """Components of a successfully parsed URI. Empty string when absent."""

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""


def parse_uri(value: str, *, max_length: int = DEFAULT_MAX_LENGTH) -> ParsedUri:
    """Parse *value* as a URI, raising ``UriError`` on invalid syntax.

    Args:
        value: The URI string, exactly as it will appear in the attribute.
        max_length: Longest accepted input, in characters.

    Returns:
        The parsed components.

    Raises:
        UriError: With one of ``"empty string"``, ``"uri too long"``,
            ``"invalid uri character"``, ``"invalid format"``,
            ``"invalid scheme"``, ``"missing authority"``,
            ``"invalid authority"`` or ``"invalid port"``.
    """
    if not value:
        raise UriError("empty string")
    if len(value) > max_length:
        raise UriError("uri too long")

    if value == "*":
        return ParsedUri(path="*")
    if value.startswith("/"):
        return _parse_path_and_query(value)

    prefix = _SCHEME_PREFIX_RE.match(value)
    if prefix is not None:
        return _parse_absolute(value, prefix.group("scheme"))

    if any(c in value for c in "/?#"):
        raise UriError("invalid format")
    return ParsedUri(authority=_check_authority(value))


def _parse_path_and_query(value: str, **components: str) -> ParsedUri:
    before, _, fragment = value.partition("#")
    path, _, query = before.partition("?")
    if not _PATH_RE.fullmatch(path) or not _QUERY_RE.fullmatch(query):
        raise UriError("invalid uri character")
    return ParsedUri(path=path, query=query, fragment=fragment, **components)


def _parse_absolute(value: str, scheme: str) -> ParsedUri:
    if not _SCHEME_RE.match(scheme):
        raise UriError("invalid scheme")
    rest = value[len(scheme) + 3 :]
    authority = re.split(r"[/?#]", rest, maxsplit=1)[0]
    if not authority:
        raise UriError("missing authority")
    _check_authority(authority)
    return _parse_path_and_query(
        rest[len(authority) :],
        scheme=scheme,
        authority=authority,
    )


def _check_authority(authority: str) -> str:
    if not _AUTHORITY_RE.fullmatch(authority):
        raise UriError("invalid authority")
    try:
        parts = urlsplit("//" + authority)
    except ValueError as exc:
        raise UriError("invalid authority") from exc
    if not parts.hostname:
        raise UriError("invalid authority")
    host_port = authority.rpartition("@")[2]
    host_end = host_port.rfind("]") + 1
    if ":" in host_port[host_end:]:
        port = host_port.rpartition(":")[2]
        if not _PORT_RE.match(port) or int(port) > 65535:
            raise UriError("invalid port")
    return authority
