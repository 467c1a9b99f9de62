"""Rays and the record of where a ray meets a surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Color, Point, Vec

EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line from an origin along a direction."""

    origin: Point
    direction: Vec

    def at(self, t: float) -> Point:
        """The point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t


def make_ray(origin: Point, direction: Vec) -> Ray:
    """Build a ray whose direction is normalised."""
    return Ray(origin, direction.unit())


def _zero() -> Vec:
    return Vec(0.0, 0.0, 0.0)


@dataclass(slots=True)
class HitRecord:
    """The nearest intersection found so far, and the accepted t range."""

    p: Point = field(default_factory=_zero)
    normal: Vec = field(default_factory=_zero)
    tmin: float = 0.0
    tmax: float = math.inf
    t: float = 0.0
    front_face: bool = False
    albedo: Color = field(default_factory=_zero)

    @classmethod
    def fresh(cls) -> HitRecord:
        """A record accepting hits from EPSILON to infinity."""
        return cls(tmin=EPSILON, tmax=math.inf)

    def set_face_normal(self, ray: Ray) -> None:
        """Orient the normal against the ray and note which face was hit."""
        if ray.direction.dot(self.normal) < 0:
            self.front_face = True
        else:
            self.front_face = False
            self.normal = -self.normal