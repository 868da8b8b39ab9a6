import math

from raytrace.colors import Color
from raytrace.light import PointLight, lighting
from raytrace.material import Material
from raytrace.tuples import point, vector

WHITE = Color(1.0, 1.0, 1.0)
ORIGIN = point(0.0, 0.0, 0.0)
SQRT2_2 = math.sqrt(2.0) / 2.0


def test_point_light():
    light = PointLight(ORIGIN, WHITE)
    assert light.intensity == WHITE
    assert light.position == ORIGIN


def test_eye_between_light_and_surface():
    light = PointLight(point(0.0, 0.0, -10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0), False
    )
    assert actual == Color(1.9, 1.9, 1.9)


def test_eye_offset_45():
    light = PointLight(point(0.0, 0.0, -10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, SQRT2_2, -SQRT2_2), vector(0.0, 0.0, -1.0), False
    )
    assert actual == Color(1.0, 1.0, 1.0)


def test_light_offset_45():
    light = PointLight(point(0.0, 10.0, -10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0), False
    )
    assert actual == Color(0.7364, 0.7364, 0.7364)


def test_eye_on_reflection_vector():
    light = PointLight(point(0.0, 10.0, -10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, -SQRT2_2, -SQRT2_2), vector(0.0, 0.0, -1.0), False
    )
    assert actual == Color(1.6364, 1.6364, 1.6364)


def test_light_behind_surface():
    light = PointLight(point(0.0, 0.0, 10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0), False
    )
    assert actual == Color(0.1, 0.1, 0.1)


def test_surface_in_shadow():
    light = PointLight(point(0.0, 0.0, -10.0), WHITE)
    actual = lighting(
        Material(), light, ORIGIN, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0), True
    )
    assert actual == Color(0.1, 0.1, 0.1)