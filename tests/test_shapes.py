import dataclasses
import math

import pytest

from raytrace.material import Material
from raytrace.matrix import NotInvertibleError, identity
from raytrace.shapes import SceneObject, Sphere, sphere
from raytrace.transformations import rotate_z, scale, translate
from raytrace.tuples import point, vector


def test_sphere_default_transform():
    assert sphere().transform == identity(4)


def test_sphere_has_default_material():
    assert sphere().material == Material()


def test_sphere_can_assign_material():
    s = sphere()
    material = dataclasses.replace(Material(), ambient=1.0)
    s.material = material
    assert s.material == material
    assert s.material.ambient == 1.0


def test_sphere_can_assign_transform():
    s = sphere()
    t = translate(2.0, 3.0, 4.0)
    s.transform = t
    assert s.transform == t


def test_spheres_have_distinct_ids():
    a, b = sphere(), sphere()
    assert isinstance(a, Sphere)
    assert a.id != b.id
    assert len({sphere().id for _ in range(50)}) == 50


def test_scene_object_is_abstract():
    with pytest.raises(TypeError):
        SceneObject()


@pytest.mark.parametrize(
    "surface, expected",
    [
        (point(1.0, 0.0, 0.0), vector(1.0, 0.0, 0.0)),
        (point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
        (point(0.0, 0.0, 1.0), vector(0.0, 0.0, 1.0)),
    ],
)
def test_normal_on_axis(surface, expected):
    assert sphere().normal_at(surface) == expected


def test_normal_non_axial():
    third = math.sqrt(3.0) / 3.0
    assert sphere().normal_at(point(third, third, third)) == vector(third, third, third)


def test_normal_is_normalized():
    third = math.sqrt(3.0) / 3.0
    normal = sphere().normal_at(point(third, third, third))
    assert normal == normal.normalize()


def test_normal_translated_sphere():
    s = sphere()
    s.transform = translate(0.0, 1.0, 0.0)
    half = math.sqrt(0.5)
    assert s.normal_at(point(0.0, 1.70711, -half)) == vector(0.0, half, -half)


def test_normal_transformed_sphere():
    s = sphere()
    s.transform = rotate_z(math.pi / 5.0).scale(1.0, 0.5, 1.0)
    root = math.sqrt(2.0) / 2.0
    assert s.normal_at(point(0.0, root, -root)) == vector(0.0, 0.97014, -0.24254)


def test_normal_with_singular_transform_raises():
    s = sphere()
    s.transform = scale(0.0, 1.0, 1.0)
    with pytest.raises(NotInvertibleError):
        s.normal_at(point(0.0, 1.0, 0.0))