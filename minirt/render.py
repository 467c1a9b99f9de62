"""Tracing primary rays into pixels and saving the result."""

from __future__ import annotations

from .errors import ErrorCode, MiniRTError
from .lighting import phong_lighting
from .ray import HitRecord, Ray
from .scene import Scene
from .shapes import hit_world
from .vector import Color, Vec


def pack_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and channels into a 32-bit pixel value."""
    return (t << 24 | r << 16 | g << 8 | b) & 0xFFFFFFFF


def ray_color(scene: Scene, ray: Ray) -> Color:
    """The colour seen along ``ray``: shaded surface or a sky gradient."""
    rec = HitRecord.fresh()
    if hit_world(scene.objects, ray, rec):
        return phong_lighting(scene, ray, rec)
    t = 0.5 * (ray.direction.y + 1.0)
    return Vec(1.0, 1.0, 1.0) * (1.0 - t) + Vec(0.5, 0.7, 1.0) * t


def _channel(value: float) -> int:
    return int(value * 255.999)


def _fraction(index: int, size: int) -> float:
    return index / (size - 1) if size > 1 else 0.0


def render(scene: Scene) -> list[list[int]]:
    """Render the scene into rows of packed pixels, top row first."""
    camera = scene.camera
    if camera is None:
        raise MiniRTError(ErrorCode.NO_ELEMENT)
    width, height = scene.canvas.width, scene.canvas.height
    rows = []
    for j in range(height - 1, -1, -1):
        v = _fraction(j, height)
        row = []
        for i in range(width):
            color = ray_color(scene, camera.primary_ray(_fraction(i, width), v))
            row.append(pack_trgb(0, _channel(color.x), _channel(color.y), _channel(color.z)))
        rows.append(row)
    return rows


def write_ppm(pixels: list[list[int]], width: int, height: int, path: str) -> None:
    """Save packed pixels as a binary PPM image."""
    if len(pixels) != height or any(len(row) != width for row in pixels):
        raise ValueError("pixel rows do not match the image size")
    body = bytearray()
    for row in pixels:
        for pixel in row:
            body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    with open(path, "wb") as handle:
        handle.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
        handle.write(body)