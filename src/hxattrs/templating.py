"""kida template helpers for htmx attributes.

Register them on an Environment and build attributes inline::

    from kida import Environment
    from hxattrs.templating import register

    env = Environment(autoescape=True)
    register(env)

    <select name="repo" {{ hx_get("/htmxdemo").target("#repo").trigger("change") | hx_attrs }}>

The filter raises the serialization error instead of rendering an
empty string, so a bad URI fails the render rather than shipping a
broken element.
"""

import logging
from typing import Any

from kida import Environment
from kida.template import Markup

from hxattrs.attributes import HtmxAttrs, Trigger
from hxattrs.config import AttrsConfig

logger = logging.getLogger("hxattrs.templating")


def hx_attrs(attrs: HtmxAttrs, validate: bool = True) -> Markup:
    """Render an attribute collection for direct use inside a tag.

    Example:
        <button {{ hx_post("/save").target("#form") | hx_attrs }}>Save</button>
        → <button hx-post=/save hx-target=#form>Save</button>

    ``validate=False`` skips URI checking for placeholder URIs.
    """
    if not isinstance(attrs, HtmxAttrs):
        msg = f"hx_attrs expects HtmxAttrs, got {type(attrs).__name__}"
        raise TypeError(msg)
    config = AttrsConfig(validate_uris=validate)
    return Markup(attrs.render(config))


def hx_trigger(event: str, modifier: str = "") -> Trigger:
    """Build a Trigger from a template: ``hx_trigger("keyup", "changed")``."""
    trigger = Trigger.new(event)
    if modifier:
        trigger = trigger.with_modifier(modifier)
    return trigger


BUILTIN_GLOBALS: dict[str, Any] = {
    "hx_delete": HtmxAttrs.delete,
    "hx_get": HtmxAttrs.get,
    "hx_post": HtmxAttrs.post,
    "hx_put": HtmxAttrs.put,
    "hx_trigger": hx_trigger,
}

BUILTIN_FILTERS: dict[str, Any] = {
    "hx_attrs": hx_attrs,
}


def register(env: Environment) -> Environment:
    """Install hxattrs filters and globals on *env* and return it."""
    env.update_filters(BUILTIN_FILTERS)
    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)
    logger.debug("Registered %d hxattrs template globals", len(BUILTIN_GLOBALS))
    return env
