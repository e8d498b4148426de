"""Per-object events carrying a single int or float argument."""

from __future__ import annotations

from typing import Any, Callable

from .event_manager import EventKind

_SUPPORTED = (EventKind.INT, EventKind.FLOAT)


class UnsupportedEventType(TypeError):
    """Raised when an event uses a signature other than (int) or (float)."""

    code = 7


def _kind_of(args: tuple) -> EventKind:
    if len(args) == 1:
        (value,) = args
        if isinstance(value, int):
            return EventKind.INT
        if isinstance(value, float):
            return EventKind.FLOAT
    raise UnsupportedEventType(
        "events take one int or one float argument, got ("
        + ", ".join(type(a).__name__ for a in args)
        + ")"
    )


class InternalEventManager:
    """Events local to one object, keyed by name and argument type."""

    def __init__(self) -> None:
        self._events: dict[EventKind, dict[str, list[Callable[[Any], Any]]]] = {
            kind: {} for kind in _SUPPORTED
        }

    def _events_of(self, kind: EventKind, event_name: str) -> dict:
        if kind not in self._events:
            raise UnsupportedEventType(
                f"event {event_name} uses unsupported type ({kind.value})"
            )
        return self._events[kind]

    def add_listener(
        self, event_name: str, function: Callable[[Any], Any], kind: EventKind
    ) -> None:
        """Register ``function`` for the event of the given kind."""
        self._events_of(kind, event_name).setdefault(event_name, []).append(function)

    def remove_listeners(self, event_name: str, kind: EventKind) -> None:
        """Drop every listener of the event of the given kind."""
        self._events_of(kind, event_name).pop(event_name, None)

    def invoke(self, event_name: str, *args: Any) -> int:
        """Call the listeners matching the argument's type; return how many ran."""
        kind = _kind_of(args)
        listeners = tuple(self._events[kind].get(event_name, ()))
        for listener in listeners:
            listener(*args)
        return len(listeners)