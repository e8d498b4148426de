"""Named events with listeners grouped by argument signature."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, NamedTuple

log = logging.getLogger(__name__)


class EventKind(enum.Enum):
    """Argument signature of an event's listeners."""

    VOID = "void"
    INT = "int"
    INT_INT = "int, int"
    FLOAT = "float"
    FLOAT_FLOAT = "float, float"


class _Listener(NamedTuple):
    callback_id: int
    callback: Callable[..., Any]


def _kind_of(args: tuple) -> EventKind:
    if not args:
        return EventKind.VOID
    if len(args) > 2:
        raise TypeError(f"events take at most two arguments, got {len(args)}")
    if all(isinstance(a, int) for a in args):
        return EventKind.INT if len(args) == 1 else EventKind.INT_INT
    if all(isinstance(a, float) for a in args):
        return EventKind.FLOAT if len(args) == 1 else EventKind.FLOAT_FLOAT
    raise TypeError(
        "event arguments must be all ints or all floats: "
        + ", ".join(type(a).__name__ for a in args)
    )


class EventManager:
    """Registry of listeners keyed by event name and signature."""

    def __init__(self) -> None:
        self._listeners: dict[EventKind, dict[str, list[_Listener]]] = {
            kind: {} for kind in EventKind
        }

    def add_listener(
        self,
        event_name: str,
        listener: Callable[..., Any],
        kind: EventKind = EventKind.VOID,
    ) -> int:
        """Register ``listener`` and return its id within the event."""
        entries = self._listeners[kind].setdefault(event_name, [])
        callback_id = entries[-1].callback_id + 1 if entries else 1
        entries.append(_Listener(callback_id, listener))
        return callback_id

    def remove_listener(
        self,
        event_name: str,
        callback_id: int,
        kind: EventKind = EventKind.VOID,
    ) -> bool:
        """Remove a listener by id; return whether one was removed."""
        events = self._listeners[kind]
        entries = events.get(event_name)
        if entries is None:
            log.warning("Event %s of type (%s) does not exist", event_name, kind.value)
            return False
        for position, entry in enumerate(entries):
            if entry.callback_id == callback_id:
                del entries[position]
                if not entries:
                    del events[event_name]
                return True
        log.warning(
            "Listener %d of event %s of type (%s) does not exist",
            callback_id,
            event_name,
            kind.value,
        )
        return False

    def invoke(self, event_name: str, *args: Any) -> int:
        """Call every listener of the event matching the arguments' types.

        Returns the number of listeners called. Raises TypeError if the
        arguments match no supported signature.
        """
        kind = _kind_of(args)
        entries = self._listeners[kind].get(event_name)
        if entries is None:
            log.info("Event %s of type (%s) does not exist", event_name, kind.value)
            return 0
        snapshot = tuple(entries)
        for entry in snapshot:
            entry.callback(*args)
        return len(snapshot)

    def cleanup(self) -> None:
        """Drop every registered listener."""
        for events in self._listeners.values():
            events.clear()