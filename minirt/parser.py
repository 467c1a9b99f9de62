"""Reading scene descriptions: one element per line, fields separated by spaces."""

from __future__ import annotations

import struct
from typing import Callable, Iterable

from .camera import Camera, Canvas
from .errors import ErrorCode, MiniRTError
from .scene import PointLight, Scene
from .shapes import Cylinder, Plane, Sphere
from .vector import Color, Point, Vec

_WHITESPACE = "\t\n\v\f\r "
_MISSING_CAMERA = 10


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _tokens(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def _fields(line: str, count: int) -> list[str]:
    fields = _tokens(line, " ")
    if len(fields) != count:
        raise MiniRTError(ErrorCode.PARSE)
    return fields


def _leading_int(text: str) -> int:
    """Leading optionally signed integer after whitespace; 0 if there is none."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for char in stripped:
        if not char.isascii() or not char.isdigit():
            break
        value = value * 10 + int(char)
    return sign * value


def _fraction(text: str) -> float:
    """Digits after the decimal point, accumulated as the scene format reads them."""
    value = 0.0
    for char in text.lstrip(_WHITESPACE):
        if not char.isascii() or not char.isdigit():
            break
        value = (value + int(char)) / 10
    return value


def parse_double(text: str) -> float:
    """Parse a decimal number the way scene files are read."""
    whole, dot, frac = text.partition(".")
    if not whole:
        raise MiniRTError(ErrorCode.PARSE)
    integral = float(_leading_int(whole))
    fraction = _fraction(frac) if dot else 0.0
    if integral < 0:
        return integral - fraction
    return integral + fraction


def normalize_whitespace(line: str) -> str:
    """Turn every whitespace character into a plain space."""
    return "".join(" " if char in _WHITESPACE else char for char in line)


def parse_point(text: str) -> Point:
    """Parse ``x,y,z`` into a vector."""
    parts = _tokens(text, ",")
    if len(parts) != 3:
        raise MiniRTError(ErrorCode.PARSE)
    x, y, z = (parse_double(part) for part in parts)
    return Vec(x, y, z)


def parse_direction(text: str) -> Vec:
    """Parse ``x,y,z`` and normalise it."""
    return parse_point(text).unit()


def parse_color(text: str) -> Color:
    """Parse ``r,g,b`` in 0..255 into a colour in 0..1."""
    return parse_point(text) / 255


def check_triplet(text: str) -> str:
    """Return ``text`` if it holds exactly two commas."""
    if text.count(",") != 2:
        raise MiniRTError(ErrorCode.PARSE)
    return text


def _ambient(scene: Scene, line: str) -> None:
    _, ratio, color = _fields(line, 3)
    scene.ambient = parse_color(color) * parse_double(ratio)


def _camera(scene: Scene, line: str) -> None:
    _, origin, target, fov = _fields(line, 4)
    lookfrom = parse_point(check_triplet(origin))
    lookat = parse_point(check_triplet(target))
    aspect = _f32(_f32(scene.canvas.width) / _f32(scene.canvas.height))
    scene.camera = Camera.look(lookfrom, lookat, parse_double(fov), aspect)


def _light(scene: Scene, line: str) -> None:
    _, origin, ratio, color = _fields(line, 4)
    scene.add_light(
        PointLight(
            origin=parse_direction(origin),
            color=Vec(1.0, 1.0, 1.0),
            bright_ratio=parse_double(ratio),
            albedo=parse_color(color),
        )
    )


def _plane(scene: Scene, line: str) -> None:
    _, center, direction, color = _fields(line, 4)
    center_vec = parse_point(check_triplet(center))
    direction_vec = parse_direction(check_triplet(direction))
    color_text = check_triplet(color)
    # A plane that opens an empty world keeps its colour unscaled.
    albedo = parse_point(color_text) if not scene.objects else parse_color(color_text)
    scene.add_object(Plane(center_vec, direction_vec, albedo))


def _sphere(scene: Scene, line: str) -> None:
    _, center, diameter, color = _fields(line, 4)
    center_vec = parse_point(check_triplet(center))
    size = parse_double(diameter)
    albedo = parse_color(check_triplet(color))
    scene.add_object(Sphere(center_vec, size, albedo))


def _cylinder(scene: Scene, line: str) -> None:
    _, center, direction, diameter, height, color = _fields(line, 6)
    scene.add_object(
        Cylinder(
            center=parse_point(center),
            direction=parse_direction(direction),
            diameter=parse_double(diameter),
            height=parse_double(height),
            albedo=parse_color(color),
        )
    )


def _canvas(scene: Scene, line: str) -> None:
    _, width, height = _fields(line, 3)
    scene.canvas = Canvas(_leading_int(width), _leading_int(height))


_HANDLERS: tuple[tuple[str, Callable[[Scene, str], None]], ...] = (
    ("A", _ambient),
    ("C", _camera),
    ("L", _light),
    ("pl", _plane),
    ("sp", _sphere),
    ("cy", _cylinder),
    ("map", _canvas),
)


def parse_line(scene: Scene, line: str) -> None:
    """Apply one line of a scene description to ``scene``; unknown lines are ignored."""
    line = normalize_whitespace(line)
    for prefix, handler in _HANDLERS:
        if line.startswith(prefix):
            handler(scene, line)
            return


def read_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a description."""
    scene = Scene()
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        raise MiniRTError(ErrorCode.NO_INPUT)
    parse_line(scene, first)
    for line in iterator:
        parse_line(scene, line)
    if scene.camera is None:
        raise MiniRTError(_MISSING_CAMERA)
    return scene


def load_scene(path: str) -> Scene:
    """Read a scene description from a file."""
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        raise MiniRTError(ErrorCode.FILE_TYPE) from None
    with handle:
        return read_scene(handle)