"""Axis-aligned box colliders in the plane and their broad-phase sweep."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .renderer import Renderer
from .vector2d import Vector2D

log = logging.getLogger(__name__)

_AXES = 2
_MIN_BRUTE_FORCE_SIZE = 3
_INITIAL_END_COUNT = 2
_MAX_REDUNDANT_SPLITS = 2


class ColliderType(enum.Enum):
    """Shape of a planar collider."""

    CIRCLE_COLLIDER = 0
    BOX_COLLIDER = 1


@dataclass(eq=False)
class Collider2D:
    """A box anchored at ``position`` extending by ``reference``."""

    position: Vector2D = field(default_factory=Vector2D)
    reference: Vector2D = field(default_factory=Vector2D)
    type: ColliderType = ColliderType.BOX_COLLIDER

    def central_value(self, axis: int) -> float:
        """Centre of the box along ``axis``."""
        return self.position[axis] + self.reference[axis] / 2

    def extreme_value(self, axis: int) -> Vector2D:
        """Lower and upper bound of the box along ``axis``."""
        start = self.position[axis]
        return Vector2D(start, start + self.reference[axis])


def is_colliding(collider1: Collider2D, collider2: Collider2D) -> bool:
    """Whether two boxes overlap strictly on both axes."""
    for axis in range(_AXES):
        low1, high1 = collider1.extreme_value(axis)
        low2, high2 = collider2.extreme_value(axis)
        if not (low1 < high2 and low2 < high1):
            return False
    return True


def _brute_force_size(colliders: list[Collider2D]) -> float:
    size = len(colliders)
    spread = 0.0
    for axis in range(2):
        centres = [c.central_value(axis) for c in colliders]
        mean = sum(centres) / size
        spread += sum(abs(mean - value) for value in centres) / size
    if spread == 0:
        return math.inf
    estimate = (0.113 * size / spread) ** 2
    return max(estimate, _MIN_BRUTE_FORCE_SIZE)


class Collider2DWorld:
    """Owns every planar collider and finds the overlapping pairs."""

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self.renderer = renderer
        self._colliders: list[Collider2D] = []

    def create(self) -> Collider2D:
        """Create, register and return a new collider."""
        collider = Collider2D()
        self._colliders.append(collider)
        return collider

    def cleanup(self) -> None:
        """Forget every collider."""
        self._colliders.clear()

    def __len__(self) -> int:
        return len(self._colliders)

    def __iter__(self) -> Iterator[Collider2D]:
        return iter(self._colliders)

    def check_all_collisions(self) -> list[tuple[Collider2D, Collider2D]]:
        """Return each overlapping pair once, brightening the renderer per pair."""
        if not self._colliders:
            return []
        limit = _brute_force_size(self._colliders)
        found: dict[tuple[int, int], tuple[Collider2D, Collider2D]] = {}
        self._sweep(list(self._colliders), 0, _INITIAL_END_COUNT, limit, found)
        pairs = list(found.values())
        if self.renderer is not None:
            self.renderer.brighten(len(pairs))
        return pairs

    def _sweep(self, group, axis, end_count, limit, found) -> None:
        size = len(group)
        if size <= limit or end_count > _MAX_REDUNDANT_SPLITS:
            if size > 1:
                self._brute_force(group, found)
            return
        centres = [c.central_value(axis) for c in group]
        average = (max(centres) + min(centres)) / 2
        lower = [c for c in group if c.extreme_value(axis)[0] <= average]
        upper = [c for c in group if c.extreme_value(axis)[1] > average]
        log.debug("Split at %f: %d - %d - %d", average, len(lower), len(upper), size)
        next_axis = (axis + 1) % _AXES
        if len(lower) == size or len(upper) == size:
            self._sweep(group, next_axis, end_count + 1, limit, found)
            return
        self._sweep(lower, next_axis, 0, limit, found)
        self._sweep(upper, next_axis, 0, limit, found)

    @staticmethod
    def _brute_force(group, found) -> None:
        for i, first in enumerate(group):
            for second in group[i + 1:]:
                key = (id(first), id(second))
                if key not in found and is_colliding(first, second):
                    found[key] = (first, second)