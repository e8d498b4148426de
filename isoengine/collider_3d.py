"""Axis-aligned box colliders in space, with collision callbacks."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .renderer import Renderer
from .vector2d import Vector2D
from .vector3d import Vector3D

log = logging.getLogger(__name__)

_AXES = 3
_MIN_BRUTE_FORCE_SIZE = 50
_INITIAL_END_COUNT = 2
_MAX_REDUNDANT_SPLITS = 2

CollisionCallback = Callable[["Collider3D"], None]


@dataclass(eq=False)
class Collider3D:
    """A box anchored at ``position`` extending by ``reference``."""

    position: Vector3D = field(default_factory=Vector3D)
    reference: Vector3D = field(default_factory=Vector3D)
    _callbacks: list[CollisionCallback] = field(
        default_factory=list, init=False, repr=False
    )

    def central_value(self, axis: int) -> float:
        """Centre of the box along ``axis``."""
        return self.position[axis] + self.reference[axis] / 2

    def extreme_value(self, axis: int) -> Vector2D:
        """Lower and upper bound of the box along ``axis``."""
        start = self.position[axis]
        return Vector2D(start, start + self.reference[axis])

    def add_callback(self, callback: CollisionCallback) -> None:
        """Call ``callback`` with the other collider on every collision."""
        self._callbacks.append(callback)

    def on_collision(self, other: Collider3D) -> int:
        """Run every callback with ``other``; return how many ran."""
        callbacks = tuple(self._callbacks)
        for callback in callbacks:
            callback(other)
        return len(callbacks)


def is_colliding(collider1: Collider3D, collider2: Collider3D) -> bool:
    """Whether two boxes overlap strictly on all three axes."""
    for axis in range(_AXES):
        low1, high1 = collider1.extreme_value(axis)
        low2, high2 = collider2.extreme_value(axis)
        if not (low1 < high2 and low2 < high1):
            return False
    return True


def _brute_force_size(colliders: list[Collider3D]) -> float:
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


class Collider3DWorld:
    """Owns every spatial collider, finds overlaps and fires callbacks."""

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self.renderer = renderer
        self._colliders: list[Collider3D] = []

    def create(self) -> Collider3D:
        """Create, register and return a new collider."""
        collider = Collider3D()
        self._colliders.append(collider)
        return collider

    def remove(self, collider: Collider3D) -> None:
        """Unregister ``collider`` by swapping it with the last one.

        Raises ValueError if the collider is not registered.
        """
        for position, candidate in enumerate(self._colliders):
            if candidate is collider:
                self._colliders[position] = self._colliders[-1]
                self._colliders.pop()
                return
        raise ValueError("collider is not registered in this world")

    def cleanup(self) -> None:
        """Forget every collider."""
        self._colliders.clear()

    def __len__(self) -> int:
        return len(self._colliders)

    def __iter__(self) -> Iterator[Collider3D]:
        return iter(self._colliders)

    def check_all_collisions(self) -> list[tuple[Collider3D, Collider3D]]:
        """Find each overlapping pair once and notify both colliders.

        The renderer is brightened once per pair and once per callback run.
        """
        if not self._colliders:
            return []
        limit = _brute_force_size(self._colliders)
        found: dict[tuple[int, int], tuple[Collider3D, Collider3D]] = {}
        self._sweep(list(self._colliders), 0, _INITIAL_END_COUNT, limit, found)
        return list(found.values())

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
        next_axis = (axis + 1) % _AXES
        if len(lower) == size or len(upper) == size:
            self._sweep(group, next_axis, end_count + 1, limit, found)
            return
        self._sweep(lower, next_axis, 0, limit, found)
        self._sweep(upper, next_axis, 0, limit, found)

    def _brute_force(self, group, found) -> None:
        for i, first in enumerate(group):
            for second in group[i + 1:]:
                key = (id(first), id(second))
                if key in found or not is_colliding(first, second):
                    continue
                found[key] = (first, second)
                ran = first.on_collision(second) + second.on_collision(first)
                if self.renderer is not None:
                    self.renderer.brighten(ran + 1)