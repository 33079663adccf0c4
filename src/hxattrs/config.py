"""Serialization configuration.

AttrsConfig is a frozen dataclass: immutable after creation, all fields
defaulted, passed explicitly to ``serialize()``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AttrsConfig:
    """Serialization options. Immutable after creation.

    Override what you need::

        config = AttrsConfig(validate_uris=False)
        attrs.serialize(config)
    """

    # Run request URIs through hxattrs.uri.parse_uri before emitting them
    validate_uris: bool = True
    max_uri_length: int = 65534  # longest request target an HTTP parser accepts
