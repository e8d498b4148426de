"""Two-dimensional vector used by the planar collision code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector2D:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def unit_vector(self) -> Vector2D:
        """Return the vector scaled to length one.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.magnitude
        return Vector2D(self.x / length, self.y / length)

    def dot_product(self, other: Vector2D) -> Vector2D:
        """Return the component-wise product of the two vectors."""
        return Vector2D(self.x * other.x, self.y * other.y)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Index not in range [0,1]")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: object) -> Vector2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x / scalar, self.y / scalar)