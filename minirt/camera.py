"""Canvas size and the pinhole camera that produces primary rays."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from .ray import Ray
from .vector import Point, Vec


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True, slots=True)
class Canvas:
    """The size of the rendered image in pixels."""

    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(slots=True)
class Camera:
    """A camera described by its origin and viewport geometry."""

    origin: Point
    direction: Vec
    fov: float
    aspect: float
    vup: Vec
    viewport_h: float
    viewport_w: float
    focal_len: float
    horizontal: Vec
    vertical: Vec
    left_bottom: Point

    @classmethod
    def look(cls, lookfrom: Point, lookat: Point, fov: float, aspect: float) -> Camera:
        """Build a camera at ``lookfrom`` aimed at ``lookat`` with a fov in degrees."""
        theta = _as_float32(fov * math.pi / 180)
        vup = Vec(0.0, 1.0, 0.0)
        viewport_h = math.tan(theta / 2) * 2
        viewport_w = aspect * viewport_h
        cam = cls(
            origin=lookfrom,
            direction=lookat,
            fov=fov,
            aspect=aspect,
            vup=vup,
            viewport_h=viewport_h,
            viewport_w=viewport_w,
            focal_len=1 / math.tan(fov / 2),
            horizontal=Vec(0.0, 0.0, 0.0),
            vertical=Vec(0.0, 0.0, 0.0),
            left_bottom=lookfrom,
        )
        cam._orient(vup)
        return cam

    def _orient(self, up: Vec) -> None:
        w = (self.origin - self.direction).unit()
        u = up.cross(w).unit()
        v = w.cross(u)
        self.left_bottom = (
            self.origin - u * (self.viewport_w / 2) - v * (self.viewport_h / 2) - w
        )
        self.horizontal = u * self.viewport_w
        self.vertical = v * self.viewport_h

    def move(self, new_origin: Point) -> None:
        """Place the camera at a new origin, still aimed at the same target."""
        self.origin = new_origin
        self.focal_len = 1 / math.tan(self.fov / 2)
        self._orient(new_origin)

    def primary_ray(self, u: float, v: float) -> Ray:
        """The ray through viewport coordinates ``u``, ``v`` in [0, 1]."""
        target = self.left_bottom + self.horizontal * u + self.vertical * v
        return Ray(self.origin, (target - self.origin).unit())