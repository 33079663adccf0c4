"""hxattrs CLI: build an htmx attribute string from the command line.

Entry point registered as ``hxattrs`` in ``pyproject.toml``::

    [project.scripts]
    hxattrs = "hxattrs.cli:main"

Example::

    $ hxattrs get /htmxdemo --target '#repo' --trigger change --trigger load
    hx-get=/htmxdemo hx-target=#repo hx-trigger=change,load
"""

import argparse
import sys

_VERBS = ("get", "post", "put", "delete")


def _add_verb_parser(subparsers: argparse._SubParsersAction, verb: str) -> None:
    parser = subparsers.add_parser(verb, help=f"Start from hx-{verb}=URI")
    parser.add_argument("uri", help="Request URI (e.g. /items?page=2)")
    parser.add_argument(
        "--target",
        action="append",
        default=[],
        metavar="SELECTOR",
        help="Add an hx-target attribute (repeatable)",
    )
    parser.add_argument(
        "--trigger",
        action="append",
        default=[],
        metavar="EVENT[ MODIFIER]",
        help="Add a trigger; all --trigger flags form one hx-trigger attribute",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        metavar="NAME",
        help="Add an hx-ext attribute (repeatable)",
    )
    parser.add_argument(
        "--misc",
        action="append",
        default=[],
        metavar="RAW",
        help="Append a raw attribute string verbatim (repeatable)",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip URI syntax validation",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``hxattrs`` command."""
    parser = argparse.ArgumentParser(
        prog="hxattrs",
        description="Build htmx attribute strings.",
    )
    subparsers = parser.add_subparsers(dest="command")
    for verb in _VERBS:
        _add_verb_parser(subparsers, verb)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from hxattrs.cli._build import run_build

    run_build(args)
