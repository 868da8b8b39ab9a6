import math

import pytest

from raytrace.camera import Camera
from raytrace.colors import Color
from raytrace.render import render
from raytrace.transformations import view_transform
from raytrace.tuples import point, vector
from raytrace.world import World, default_world


def _camera() -> Camera:
    c = Camera(11, 11, math.pi / 2.0)
    c.transform = view_transform(
        point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    return c


def test_default_render():
    image = render(_camera(), default_world())
    assert image.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)


def test_render_canvas_matches_camera_size():
    image = render(_camera(), default_world())
    assert (image.width, image.height) == (11, 11)


def test_render_without_lights_fails():
    with pytest.raises(ValueError, match="lights"):
        render(_camera(), World())