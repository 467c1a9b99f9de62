# minirt

A small ray tracer. It reads a plain-text `.rt` scene file that holds a camera,
point lights, an ambient term, and spheres, planes and cylinders. It renders
the scene with Phong shading and hard shadows, then writes the image as a
binary PPM file.

## Installing

```
pip install .
```

## Rendering a scene

```
minirt scene.rt
```

This writes `minirt.ppm` in the current directory. Options:

- `-o PATH`, `--output PATH`: the image file to write. The default is `minirt.ppm`.
- `--move {a,d,s,w}`: move the camera by 5 units before rendering. `w` moves it
  up, `s` moves it down, `a` moves it along +x and `d` along −x. The option may
  be repeated. Each move prints the new camera position.

Exactly one scene file must be given. If the file name does not end in `.rt`,
the command prints `it's not .rt file` and renders nothing. In the following
cases the command prints an error message and exits with status 1:

- the file cannot be opened,
- the file is empty,
- a line is malformed,
- the scene has no camera.

## Scene files

A scene file has one element on each line. Whitespace separates the fields.
Triplets are comma-separated values with no spaces in them. Colours are given
in the range 0–255. A line is recognised by its first characters. Lines that
start with none of the identifiers below are ignored.

| Identifier | Fields                                          |
|------------|-------------------------------------------------|
| `A`        | ambient ratio, colour                           |
| `C`        | position, look-at point, field of view (degrees)|
| `L`        | position, brightness ratio, colour              |
| `sp`       | centre, radius, colour                          |
| `pl`       | point on the plane, normal, colour              |
| `cy`       | centre, axis, diameter, height, colour          |
| `map`      | canvas width, canvas height                     |

Some fields are handled in particular ways:

- Normals, axes and light positions are scaled to unit length when they are read.
- Lights always shine white. The colour field of an `L` line is read but does
  not tint the light.
- A plane that is the first object of the scene keeps its colour values
  unscaled. Every other colour is divided by 255.

Example:

```
map 600 400
A 0.2 255,255,255
C 0,0,10 0,0,0 70
L 5,5,5 0.6 255,255,255
sp 0,0,0 1.5 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,0,0 0,1,0 1.0 3.0 0,0,255
```

A scene must contain a camera. Without a `map` line the canvas is 600×400.
Rays that hit nothing get a white-to-blue sky gradient.

## Using it as a library

```python
from minirt.parser import load_scene
from minirt.render import render, write_ppm

scene = load_scene("scene.rt")
pixels = render(scene)
write_ppm(pixels, scene.canvas.width, scene.canvas.height, "scene.ppm")
```

`render` returns rows of packed `0x00RRGGBB` integers, with the top row first.
Parsing errors raise `minirt.errors.MiniRTError`.

The building blocks can also be used on their own:

- `minirt.vector.Vec`: 3-component vector arithmetic.
- `minirt.ray.Ray` and `minirt.ray.HitRecord`.
- `minirt.camera.Camera` and `minirt.camera.Canvas`.
- `minirt.shapes.Sphere`, `Plane` and `Cylinder`, plus `hit_world`.
- `minirt.scene.Scene` and `minirt.scene.PointLight`.
- `minirt.lighting.phong_lighting`: shading for a single hit.
- `minirt.parser.read_scene` and `parse_line`, for scene text that is already in memory.

## What it does not do

minirt does not open a window and has no interactive viewer. Each run renders
one image to a file. Camera movement is available only through `--move`, which
is applied before rendering.

## Running the tests

```
pip install ".[test]"
pytest
```