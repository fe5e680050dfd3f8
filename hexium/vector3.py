"""Three-component vector used throughout the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector3:
    """A mutable three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vector3) -> Vector3:
        """Return the component-wise sum of this vector and ``other``."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        """Return the component-wise difference ``self - other``."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> Vector3:
        """Return this vector scaled by ``scalar``."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vector3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        """Return a unit vector pointing the same way.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        if length == 0.0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def perpendicular(self) -> Vector3:
        """Return a vector perpendicular to this one.

        The component of smallest magnitude is dropped to keep the result
        well conditioned.
        """
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax <= ay and ax <= az:
            return Vector3(0.0, -self.z, self.y)
        if ay <= ax and ay <= az:
            return Vector3(-self.z, 0.0, self.x)
        return Vector3(-self.y, self.x, 0.0)

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: object) -> Vector3:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: object) -> Vector3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))