"""Command line entry point: load a scene, render it and save the image."""

from __future__ import annotations

import argparse
from typing import Sequence

from .camera import Camera
from .errors import ErrorCode, MiniRTError
from .parser import read_scene
from .render import render, write_ppm
from .vector import Point, Vec, ZeroVectorError

_STEP = 5
_OFFSETS = {
    13: Vec(0.0, _STEP, 0.0),
    1: Vec(0.0, -_STEP, 0.0),
    0: Vec(_STEP, 0.0, 0.0),
    2: Vec(-_STEP, 0.0, 0.0),
}
_KEYS = {"w": 13, "s": 1, "a": 0, "d": 2}


def check_extension(path: str) -> bool:
    """Whether the file name ends in ``.rt``."""
    return path.endswith(".rt")


def move_origin(camera: Camera, key: int) -> Point | None:
    """Shift the camera for a movement key; return the new origin, or None."""
    offset = _OFFSETS.get(key)
    if offset is None:
        return None
    new_origin = camera.origin + offset
    camera.move(new_origin)
    return new_origin


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minirt", description="Render a .rt scene.")
    parser.add_argument("scene", nargs="*", help="scene description file")
    parser.add_argument("-o", "--output", default="minirt.ppm", help="image to write")
    parser.add_argument(
        "--move",
        action="append",
        choices=sorted(_KEYS),
        default=[],
        help="move the camera before rendering; may be repeated",
    )
    return parser


def _run(args: argparse.Namespace) -> int:
    if len(args.scene) != 1:
        raise MiniRTError(ErrorCode.NO_INPUT)
    path = args.scene[0]
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        raise MiniRTError(ErrorCode.FILE_TYPE) from None
    with handle:
        if not check_extension(path):
            print("it's not .rt file", end="")
            return 0
        scene = read_scene(handle)
    for name in args.move:
        origin = move_origin(scene.camera, _KEYS[name])
        if origin is not None:
            print(origin.describe("cam side : "))
    pixels = render(scene)
    write_ppm(pixels, scene.canvas.width, scene.canvas.height, args.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the renderer and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return _run(args)
    except MiniRTError as exc:
        print(exc.message)
        return exc.exit_status
    except ZeroVectorError as exc:
        print(exc)
        return 0


if __name__ == "__main__":
    raise SystemExit(main())