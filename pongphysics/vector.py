"""Three-component vector used for positions, velocities and forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1e-5


@dataclass
class Vector3:
    """A mutable 3D vector with the usual arithmetic operators."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def copy(self) -> Vector3:
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def dot(self, other: Vector3) -> float:
        """Scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Vector product with ``other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: Vector3) -> float:
        return (self - other).length_squared()

    def distance(self, other: Vector3) -> float:
        return math.sqrt(self.distance_squared(other))

    def is_zero(self) -> bool:
        """True when every component is within EPSILON of zero."""
        return all(-EPSILON <= c <= EPSILON for c in self)

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for a zero-length vector.
        """
        length = self.length()
        if length <= EPSILON:
            raise ZeroDivisionError("cannot normalize a zero vector")
        return self / length


def rotate_vector(vec: Vector3, radian: float) -> Vector3:
    """Rotate ``vec`` about the z axis by ``radian``; the result has z = 0."""
    cos_r = math.cos(radian)
    sin_r = math.sin(radian)
    return Vector3(
        vec.x * cos_r - vec.y * sin_r,
        vec.x * sin_r + vec.y * cos_r,
        0.0,
    )