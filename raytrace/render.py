"""Rendering a world through a camera onto a canvas."""

from __future__ import annotations

from raytrace.camera import Camera
from raytrace.canvas import Canvas
from raytrace.shading import color_at
from raytrace.world import World


def render(camera: Camera, world: World) -> Canvas:
    """Trace one ray per pixel and return the resulting image.

    The last row and the last column of the canvas are left black.
    """
    if not world.light_sources:
        raise ValueError("World doesn't have any lights")

    canvas = Canvas(camera.hsize, camera.vsize)
    for y in range(camera.vsize - 1):
        for x in range(camera.hsize - 1):
            canvas.write_pixel(x, y, color_at(world, camera.ray_for_pixel(x, y)))
    return canvas