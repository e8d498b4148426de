"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional

_TICK_MASK = 0xFFFFFFFF


class Clock:
    """Measures the seconds elapsed between successive ticks.

    Tick values are 32-bit millisecond counts, so the difference wraps.
    """

    INITIAL_DELTATIME = 1.0

    def __init__(self, source: Optional[Callable[[], int]] = None) -> None:
        if source is None:
            start = time.monotonic()

            def source() -> int:
                return int((time.monotonic() - start) * 1000)

        self._source = source
        self.previous_ms = 0
        self.deltatime = self.INITIAL_DELTATIME

    def tick(self, now_ms: Optional[int] = None) -> float:
        """Record a new frame time and return the elapsed seconds."""
        current = (self._source() if now_ms is None else int(now_ms)) & _TICK_MASK
        self.deltatime = ((current - self.previous_ms) & _TICK_MASK) / 1000.0
        self.previous_ms = current
        return self.deltatime