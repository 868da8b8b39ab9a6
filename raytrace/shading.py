"""Tracing rays through a world and shading the points they hit."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.colors import Color
from raytrace.intersection import Intersection, Intersections
from raytrace.light import lighting
from raytrace.ray import Ray
from raytrace.shapes import SceneObject
from raytrace.tuples import Tuple
from raytrace.utils import EPSILON
from raytrace.world import World

_BLACK = Color(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Computations:
    """Values derived from an intersection that shading needs."""

    t: float
    scene_object: SceneObject
    point: Tuple
    over_point: Tuple
    eye_vector: Tuple
    normal_vector: Tuple
    is_inside_object: bool


def intersect(scene_object: SceneObject, ray: Ray) -> Intersections:
    """Intersect a world-space ray with an object, honouring its transform."""
    local_ray = ray.transform(scene_object.transform.inverse())
    return local_ray.intersect(scene_object)


def intersect_world(world: World, ray: Ray) -> Intersections:
    """Intersect a ray with every object of the world, sorted by ``t``."""
    result = Intersections()
    for scene_object in world.objects:
        result.extend(intersect(scene_object, ray))
    result.sort()
    return result


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    position = ray.position(intersection.t)
    eye_vector = -ray.direction
    normal_vector = intersection.scene_object.normal_at(position)

    inside = normal_vector.dot(eye_vector) < 0.0
    if inside:
        normal_vector = -normal_vector

    return Computations(
        t=intersection.t,
        scene_object=intersection.scene_object,
        point=position,
        # Nudged off the surface so shadow rays do not hit the surface itself.
        over_point=position + normal_vector * EPSILON,
        eye_vector=eye_vector,
        normal_vector=normal_vector,
        is_inside_object=inside,
    )


def shade_hit(world: World, computations: Computations) -> Color:
    """Colour of a prepared hit, lit by the world's first light."""
    shadowed = is_shadowed(world, computations.over_point)
    return lighting(
        computations.scene_object.material,
        world.light_sources[0],
        computations.point,
        computations.eye_vector,
        computations.normal_vector,
        shadowed,
    )


def color_at(world: World, ray: Ray) -> Color:
    """Colour seen along a ray; black if it hits nothing."""
    hit = intersect_world(world, ray).hit()
    if hit is None:
        return _BLACK
    return shade_hit(world, prepare_computations(hit, ray))


def is_shadowed(world: World, point: Tuple) -> bool:
    """Whether an object lies between ``point`` and the world's first light."""
    to_light = world.light_sources[0].position - point
    distance = to_light.magnitude()
    hit = intersect_world(world, Ray(point, to_light.normalize())).hit()
    return hit is not None and hit.t < distance