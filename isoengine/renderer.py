"""Shared drawing state: the window, its surface and the frame lightness."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Renderer:
    """Holds the display handles and the per-frame collision lightness."""

    window: Any = None
    surface: Any = None
    lightness: float = 0.0

    def reset_lightness(self) -> None:
        """Start a new frame with no accumulated lightness."""
        self.lightness = 0.0

    def brighten(self, amount: float = 1.0) -> None:
        """Raise the frame lightness by ``amount``."""
        self.lightness += amount