"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector is normalised."""

    def __init__(self) -> None:
        super().__init__("Error 0")


@dataclass(frozen=True, slots=True)
class Vec:
    """An immutable 3D vector."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * (1 / scalar)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def hadamard(self, other: Vec) -> Vec:
        """Component-wise product."""
        return Vec(self.x * other.x, self.y * other.y, self.z * other.z)

    def minimum(self, other: Vec) -> Vec:
        """Component-wise minimum."""
        return Vec(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec:
        """Return the vector scaled to length one."""
        length = self.length()
        if length == 0:
            raise ZeroVectorError()
        return Vec(self.x / length, self.y / length, self.z / length)

    def reflect(self, normal: Vec) -> Vec:
        """Reflect this vector about a surface normal."""
        return self - normal * (self.dot(normal) * 2)

    def describe(self, name: str) -> str:
        """A one-line human-readable description of the vector."""
        return f"{name:>6} is...x is {self.x:.2f} y is {self.y:.2f} z is {self.z:.2f} "


Point = Vec
Color = Vec