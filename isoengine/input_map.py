"""Key bindings loaded from a simple comma-separated file.

Each line is ``<kind>,<key name>,<event name>`` where kind ``0`` binds a
key release and ``1`` a key press.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

log = logging.getLogger(__name__)

KeyFromName = Callable[[str], int]

_UNKNOWN_KEY = 0


def _pygame_key_from_name(name: str) -> int:
    import pygame

    try:
        return pygame.key.key_code(name)
    except ValueError:
        return _UNKNOWN_KEY


@dataclass
class InputMap:
    """Maps key codes to event names for presses and releases."""

    key_down_events: dict[int, str] = field(default_factory=dict)
    key_up_events: dict[int, str] = field(default_factory=dict)


def _cells(line: str) -> list[str]:
    cells = line.split(",")
    if cells[-1] == "":
        cells.pop()
    return cells


def parse_input_map(
    lines: Iterable[str], key_from_name: Optional[KeyFromName] = None
) -> InputMap:
    """Build an InputMap from binding lines.

    Lines with an unknown kind are logged and skipped; a line lacking the
    key or event field raises ValueError.
    """
    resolve = key_from_name or _pygame_key_from_name
    input_map = InputMap()
    for number, raw in enumerate(lines, start=1):
        row = _cells(raw.rstrip("\r\n"))
        if not row:
            continue
        kind = row[0][:1]
        if kind not in ("0", "1"):
            log.error("Error on assigning key map at line %d", number)
            continue
        if len(row) < 3:
            raise ValueError(f"line {number}: expected kind, key and event name")
        key, event_name = resolve(row[1]), row[2]
        target = input_map.key_up_events if kind == "0" else input_map.key_down_events
        target[key] = event_name
    return input_map


def load_input_map(
    csv_path: Union[str, Path], key_from_name: Optional[KeyFromName] = None
) -> InputMap:
    """Read an InputMap from a file; raises OSError if it cannot be opened."""
    with open(csv_path, encoding="utf-8") as handle:
        return parse_input_map(handle, key_from_name)