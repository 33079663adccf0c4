"""``hxattrs <verb>``: assemble and print one attribute string."""

import argparse
import sys

from hxattrs.attributes import HtmxAttrs, Trigger
from hxattrs.config import AttrsConfig


def parse_trigger(value: str) -> Trigger:
    """Split ``"EVENT MODIFIER"`` at the first space; the modifier is optional."""
    event, _, modifier = value.strip().partition(" ")
    trigger = Trigger.new(event)
    if modifier.strip():
        trigger = trigger.with_modifier(modifier.strip())
    return trigger


def build_attrs(args: argparse.Namespace) -> HtmxAttrs:
    """Turn parsed CLI arguments into a collection.

    Order: request, targets, triggers (one attribute), extensions, misc.
    """
    attrs = getattr(HtmxAttrs, args.command)(args.uri)
    for selector in args.target:
        attrs = attrs.target(selector)
    if args.trigger:
        attrs = attrs.triggers(parse_trigger(t) for t in args.trigger)
    for name in args.ext:
        attrs = attrs.extension(name)
    for raw in args.misc:
        attrs = attrs.misc(raw)
    return attrs


def run_build(args: argparse.Namespace) -> None:
    """Print the serialized attributes, or the error and exit 1."""
    config = AttrsConfig(validate_uris=not args.no_validate)
    result = build_attrs(args).serialize(config)
    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        raise SystemExit(1)
    print(result.value)
