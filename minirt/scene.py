"""The scene: canvas, camera, objects, lights and ambient colour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .camera import Camera, Canvas
from .vector import Color, Point, Vec


def _white() -> Vec:
    return Vec(1.0, 1.0, 1.0)


def _black() -> Vec:
    return Vec(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class PointLight:
    """A point light with a colour and a brightness ratio."""

    origin: Point
    color: Color
    bright_ratio: float
    albedo: Color = field(default_factory=_white)


def _default_canvas() -> Canvas:
    return Canvas(600, 400)


@dataclass(slots=True)
class Scene:
    """Everything needed to render one image."""

    canvas: Canvas = field(default_factory=_default_canvas)
    camera: Camera | None = None
    objects: list[Any] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)
    ambient: Color = field(default_factory=_black)

    def add_object(self, obj: Any) -> None:
        """Append an object to the world."""
        self.objects.append(obj)

    def add_light(self, light: PointLight) -> None:
        """Append a light to the scene."""
        self.lights.append(light)

    def clear(self) -> None:
        """Drop the camera, the objects and the lights."""
        self.camera = None
        self.objects.clear()
        self.lights.clear()