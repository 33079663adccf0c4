"""Event and modifier value types used by ``hx-trigger``."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Event:
    """An event name such as ``click`` or ``load``. Stored verbatim."""

    name: str


@dataclass(frozen=True, slots=True)
class Modifier:
    """A trigger modifier such as ``once`` or ``delay:1s``. Stored verbatim."""

    value: str
