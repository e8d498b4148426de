"""Three-dimensional vector used for positions, sizes and collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector3D:
    """A mutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def unit_vector(self) -> Vector3D:
        """Return the vector scaled to length one; the zero vector stays zero."""
        length = self.magnitude
        if length == 0:
            return Vector3D()
        return Vector3D(self.x / length, self.y / length, self.z / length)

    def dot_product(self, other: Vector3D) -> float:
        """Return the scalar product of the two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_product(self, other: Vector3D) -> Vector3D:
        """Return the engine's cross product of the two vectors."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.y,
            self.x * other.y - self.y * other.z,
        )

    @staticmethod
    def projection(v1: Vector3D, v2: Vector3D) -> Vector3D:
        """Project ``v1`` onto ``v2``; zero if either vector is zero."""
        if not v1.magnitude or not v2.magnitude:
            return Vector3D()
        factor = v1.dot_product(v2) / (v2.x * v2.x + v2.y * v2.y + v2.z * v2.z)
        return v2 * factor

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("Maximum index in a Vector3D is 2")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, scalar: object) -> Vector3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__