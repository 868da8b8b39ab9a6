# raytrace

A small ray tracer in pure Python, using only the standard library. It
renders scenes built from spheres lit by a point light, with Phong shading
and hard shadows, and writes images as plain-text PPM (P3) or 8-bit RGB PNG.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `raytrace`, with these subcommands:

| Subcommand   | What it does                                                   | Default output |
|--------------|----------------------------------------------------------------|----------------|
| `projectile` | prints each state of a projectile until it lands, then the tick count | none    |
| `trajectory` | draws a projectile's flight on a 900x550 canvas                | `output.ppm`   |
| `clock`      | draws twelve white dots at the hour positions of a clock face  | `clock.ppm`    |
| `sphere`     | casts rays at a single lit sphere and shades the hits          | `sphere.png`   |
| `render`     | renders the default two-sphere world at 640x360                | `render.png`   |
| `capstone`   | renders a floor, two walls and three spheres at 1000x500       | `world.png`    |

Every subcommand except `projectile` takes `-o/--output PATH`. `sphere` also
takes `--size N` (default 250), the width and height of the image in pixels.

```
raytrace render -o render.png
raytrace sphere --size 100
raytrace --help
```

## Library use

```python
import math

from raytrace.camera import Camera
from raytrace.render import render
from raytrace.transformations import view_transform
from raytrace.tuples import point, vector
from raytrace.world import default_world

camera = Camera(320, 180, math.pi / 2)
camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))

canvas = render(camera, default_world())
canvas.write_png("render.png")
```

The building blocks:

- `raytrace.tuples`: `Tuple` with `point()` and `vector()`. Tuples support
  `+`, `-`, unary `-`, and `*` and `/` by a scalar, and have the methods
  `dot`, `cross`, `magnitude`, `normalize`, `reflect`, `is_point` and
  `is_vector`. Equality compares each component within `EPSILON` (1e-5).
- `raytrace.matrix`: `Matrix`, `identity()` and `parse_matrix()`, which reads
  the `| a | b |` table notation. `m @ other` multiplies by another matrix,
  or by a `Tuple` when `m` is 4x4. `m[row, column]` reads an entry.
  `determinant`, `submatrix`, `minor`, `cofactor`, `transpose`,
  `is_invertible` and `inverse` are provided; `inverse()` raises
  `NotInvertibleError` when the determinant is zero. The methods
  `translate`, `scale`, `rotate_x`, `rotate_y`, `rotate_z` and `shear`
  return a new matrix, so transformations can be chained.
- `raytrace.transformations`: standalone `translate`, `scale`, `rotate_x`,
  `rotate_y`, `rotate_z`, `shear` and `view_transform(origin, target, up)`.
- `raytrace.colors`: `Color` with `+`, `-`, channel-wise `*` by another
  colour and `*` by a number; `to_ppm()` and `to_rgb()` clamp each channel
  to [0, 1] before scaling.
- `raytrace.canvas`: `Canvas(width, height)`, initially black, with
  `write_pixel` (returns `None` when the pixel is out of bounds),
  `pixel_at` (raises `IndexError` out of bounds), `to_ppm`, `to_png`,
  `write_ppm` and `write_png`. PPM lines are wrapped at 70 characters.
- `raytrace.shapes`: the abstract `SceneObject` and `Sphere`, created with
  `sphere()`. Each object has an `id`, a `transform` and a `material`.
- `raytrace.material`: `Material` (colour, ambient 0.1, diffuse 0.9,
  specular 0.9, shininess 200.0 by default).
- `raytrace.light`: `PointLight` and the Phong `lighting()` function.
- `raytrace.ray`: `Ray` with `position`, `transform` and `intersect`, which
  intersects a ray already in object space with the unit sphere.
- `raytrace.intersection`: `Intersection` and `Intersections`; `hit()`
  returns the intersection with the smallest positive `t`, or `None`.
- `raytrace.shading`: `intersect` (applies the object's transform),
  `intersect_world`, `prepare_computations`, `shade_hit`, `color_at` and
  `is_shadowed`.
- `raytrace.world`: `World` and `default_world()`.
- `raytrace.camera` and `raytrace.render`: `Camera` and `render()`.
- `raytrace.projectile`: `Projectile`, `Environment` and `tick()`.

## Limits

- Spheres are the only shape.
- Only the first light in a world is used for shading and shadows.
- There are no reflections, refractions or patterns.
- `render()` runs in a single thread and leaves the last row and the last
  column of the canvas black. It raises `ValueError` when the world has no
  lights.