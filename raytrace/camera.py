"""A pinhole camera mapping canvas pixels to rays."""

from __future__ import annotations

import math

from raytrace.matrix import Matrix, identity
from raytrace.ray import Ray
from raytrace.tuples import point


class Camera:
    """A camera producing ``hsize`` x ``vsize`` pixels over a field of view ``fov``."""

    def __init__(self, hsize: int, vsize: int, fov: float, transform: Matrix | None = None):
        self.hsize = hsize
        self.vsize = vsize
        self.fov = fov
        self.transform = transform if transform is not None else identity(4)

        half_view = math.tan(fov / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2.0 / hsize

    def __repr__(self) -> str:
        return f"Camera(hsize={self.hsize}, vsize={self.vsize}, fov={self.fov})"

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Ray from the camera through the centre of pixel (x, y)."""
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # The camera looks towards -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.transform.inverse()
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, (pixel - origin).normalize())