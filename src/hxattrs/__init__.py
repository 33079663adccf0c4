"""hxattrs: typed builder for htmx attribute strings.

Compose request, trigger, target and extension attributes through a
chainable API and serialize them into a single attribute string.

Basic usage::

    from hxattrs import HtmxAttrs, Trigger

    attrs = (
        HtmxAttrs.get("/htmxdemo")
        .target("#repo")
        .triggers(["change", Trigger.new("load").with_modifier("once")])
    )
    result = attrs.serialize()
    if result:
        print(result.value)
        # hx-get=/htmxdemo hx-target=#repo hx-trigger=change,load once

Template helpers (kida)::

    from hxattrs.templating import register
    register(env)
"""

__version__ = "0.1.0"
__all__ = [
    "AttrsConfig",
    "AttrsResult",
    "EmptyAttrs",
    "Event",
    "Extension",
    "HtmxAttrs",
    "HtmxError",
    "InvalidUri",
    "Modifier",
    "RequestVerb",
    "Target",
    "Trigger",
]


# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AttrsConfig": "hxattrs.config",
    "AttrsResult": "hxattrs.result",
    "EmptyAttrs": "hxattrs.errors",
    "Event": "hxattrs.events",
    "Extension": "hxattrs.attributes",
    "HtmxAttrs": "hxattrs.attributes",
    "HtmxError": "hxattrs.errors",
    "InvalidUri": "hxattrs.errors",
    "Modifier": "hxattrs.events",
    "RequestVerb": "hxattrs.attributes",
    "Target": "hxattrs.attributes",
    "Trigger": "hxattrs.attributes",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hxattrs`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
