"""htmx attribute builder with a chainable, immutable API.

Start from one request verb, chain the attributes you need, then
serialize once::

    attrs = (
        HtmxAttrs.get("/htmxdemo")
        .target("#repo")
        .triggers(["change", "load"])
    )
    attrs.serialize().unwrap()
    # 'hx-get=/htmxdemo hx-target=#repo hx-trigger=change,load'

Each chained call returns a new ``HtmxAttrs``; the receiver is never
modified. Tokens come out in call order, space separated, and repeated
calls are kept as repeated tokens (two ``.target()`` calls emit two
``hx-target=`` tokens).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from hxattrs.config import AttrsConfig
from hxattrs.errors import EmptyAttrs, HtmxError, InvalidUri
from hxattrs.events import Event, Modifier
from hxattrs.result import AttrsResult
from hxattrs.uri import UriError, parse_uri

logger = logging.getLogger("hxattrs")

_DEFAULT_CONFIG = AttrsConfig()


# ---------------------------------------------------------------------------
# Attribute kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Target:
    """The ``hx-target`` attribute. The selector is not checked."""

    selector: str

    def render(self) -> str:
        return f"hx-target={self.selector}"


@dataclass(frozen=True, slots=True)
class Extension:
    """The ``hx-ext`` attribute."""

    name: str

    def render(self) -> str:
        return f"hx-ext={self.name}"


@dataclass(frozen=True, slots=True)
class Trigger:
    """One entry of an ``hx-trigger`` attribute: an event plus optional modifier.

    Renders as ``"change"`` or, with a modifier, ``"change once"``::

        Trigger.new("keyup").with_modifier("delay:500ms").render()
        # 'keyup delay:500ms'
    """

    event: Event
    modifier: Modifier | None = None

    @classmethod
    def new(cls, event: str) -> Trigger:
        """Build a trigger for *event* with no modifier."""
        return cls(Event(str(event)))

    @classmethod
    def coerce(cls, value: str | Trigger) -> Trigger:
        """Accept a plain event name wherever a trigger is expected."""
        if isinstance(value, Trigger):
            return value
        if isinstance(value, str):
            return cls.new(value)
        msg = f"Expected a Trigger or an event name, got {type(value).__name__}"
        raise TypeError(msg)

    def with_modifier(self, modifier: str) -> Trigger:
        """Return a new Trigger carrying *modifier*."""
        return replace(self, modifier=Modifier(str(modifier)))

    def render(self) -> str:
        if self.modifier is None:
            return self.event.name
        return f"{self.event.name} {self.modifier.value}"


@dataclass(frozen=True, slots=True)
class TriggerList:
    """The ``hx-trigger`` attribute: triggers comma-joined in order.

    Rendering cannot fail; individual triggers have no error path.
    """

    triggers: tuple[Trigger, ...]

    def render(self) -> str:
        return "hx-trigger=" + ",".join(t.render() for t in self.triggers)


class RequestVerb(Enum):
    """The request attributes htmx issues, valued by their attribute name."""

    GET = "hx-get"
    PUT = "hx-put"
    POST = "hx-post"
    DELETE = "hx-delete"

    @property
    def prefix(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Request:
    """A request attribute such as ``hx-get=/items``.

    Built only by ``HtmxAttrs.get/post/put/delete``. The URI is checked
    when rendered, not when stored, and is emitted exactly as given.
    """

    verb: RequestVerb
    uri: str

    def render(self, config: AttrsConfig = _DEFAULT_CONFIG) -> str:
        """Render the token, raising ``InvalidUri`` for a malformed URI."""
        if config.validate_uris:
            try:
                parse_uri(self.uri, max_length=config.max_uri_length)
            except UriError as exc:
                raise InvalidUri(uri=self.uri, reason=exc.reason) from exc
        return f"{self.verb.prefix}={self.uri}"


@dataclass(frozen=True, slots=True)
class Misc:
    """A pre-formatted attribute string, emitted verbatim."""

    raw: str

    def render(self) -> str:
        return self.raw


type Attr = Request | TriggerList | Target | Extension | Misc


def render_attr(attr: Attr, config: AttrsConfig = _DEFAULT_CONFIG) -> str:
    """Render one attribute to its token.

    Only ``Request`` can fail (``InvalidUri``); every other kind is
    infallible.
    """
    match attr:
        case Request():
            return attr.render(config)
        case TriggerList() | Target() | Extension() | Misc():
            return attr.render()
    msg = f"Unknown attribute kind: {type(attr).__name__}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HtmxAttrs:
    """An ordered collection of htmx attributes.

    Create one with ``get``, ``post``, ``put`` or ``delete``; each seeds
    the collection with its request attribute. ``HtmxAttrs()`` is the
    empty collection, which serializes to ``EmptyAttrs``.
    """

    attrs: tuple[Attr, ...] = ()

    # -- Entry points --

    @classmethod
    def get(cls, uri: str) -> HtmxAttrs:
        """Start a collection with ``hx-get=<uri>``."""
        return cls((Request(RequestVerb.GET, str(uri)),))

    @classmethod
    def post(cls, uri: str) -> HtmxAttrs:
        """Start a collection with ``hx-post=<uri>``."""
        return cls((Request(RequestVerb.POST, str(uri)),))

    @classmethod
    def put(cls, uri: str) -> HtmxAttrs:
        """Start a collection with ``hx-put=<uri>``."""
        return cls((Request(RequestVerb.PUT, str(uri)),))

    @classmethod
    def delete(cls, uri: str) -> HtmxAttrs:
        """Start a collection with ``hx-delete=<uri>``."""
        return cls((Request(RequestVerb.DELETE, str(uri)),))

    # -- Chainable additions --

    def _with(self, attr: Attr) -> HtmxAttrs:
        return replace(self, attrs=(*self.attrs, attr))

    def target(self, selector: str) -> HtmxAttrs:
        """Return a new collection with an ``hx-target`` attribute appended."""
        return self._with(Target(str(selector)))

    def extension(self, name: str) -> HtmxAttrs:
        """Return a new collection with an ``hx-ext`` attribute appended."""
        return self._with(Extension(str(name)))

    def trigger(self, trigger: str | Trigger) -> HtmxAttrs:
        """Return a new collection with a single-trigger ``hx-trigger`` appended."""
        return self._with(TriggerList((Trigger.coerce(trigger),)))

    def triggers(self, triggers: Iterable[str | Trigger]) -> HtmxAttrs:
        """Return a new collection with one ``hx-trigger`` holding all *triggers*.

        Iteration order is kept: ``triggers(["change", "load"])`` renders
        ``hx-trigger=change,load``. A bare string or ``Trigger`` is refused
        rather than split into characters; use ``trigger()`` for one.
        """
        if isinstance(triggers, (str, Trigger)):
            msg = (
                f"triggers() expects an iterable of triggers, got {type(triggers).__name__}; "
                "use trigger() for a single one"
            )
            raise TypeError(msg)
        return self._with(TriggerList(tuple(Trigger.coerce(t) for t in triggers)))

    def misc(self, raw: str) -> HtmxAttrs:
        """Return a new collection with *raw* appended verbatim, no prefix."""
        return self._with(Misc(str(raw)))

    # -- Serialization --

    def serialize(self, config: AttrsConfig | None = None) -> AttrsResult:
        """Render every attribute in order and join them with single spaces.

        Returns a failed ``AttrsResult`` carrying ``EmptyAttrs`` when the
        collection is empty, or the first attribute error (``InvalidUri``).
        No partial string is ever returned.
        """
        cfg = config or _DEFAULT_CONFIG
        if not self.attrs:
            logger.debug("Refusing to serialize an empty attribute collection")
            return AttrsResult.fail(EmptyAttrs())

        first, *rest = self.attrs
        try:
            out = render_attr(first, cfg)
            for attr in rest:
                out = f"{out} {render_attr(attr, cfg)}"
        except HtmxError as exc:
            logger.debug("Attribute serialization failed: %s", type(exc).__name__)
            return AttrsResult.fail(exc)

        logger.debug("Serialized %d htmx attributes", len(self.attrs))
        return AttrsResult.ok(out.strip())

    def render(self, config: AttrsConfig | None = None) -> str:
        """Serialize, raising the ``HtmxError`` on failure."""
        return self.serialize(config).unwrap()

    def __len__(self) -> int:
        return len(self.attrs)
