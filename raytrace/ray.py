"""Rays and their intersection with unit spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytrace.intersection import Intersection, Intersections
from raytrace.matrix import Matrix
from raytrace.shapes import SceneObject
from raytrace.tuples import Tuple, point


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and running along ``direction``."""

    origin: Tuple
    direction: Tuple

    def __post_init__(self) -> None:
        if not self.direction.is_vector():
            raise ValueError("a ray's direction must be a vector")

    def position(self, t: float) -> Tuple:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def intersect(self, scene_object: SceneObject) -> Intersections:
        """Intersect this ray, already in object space, with a unit sphere at the origin."""
        result = Intersections()
        sphere_to_ray = self.origin - point(0.0, 0.0, 0.0)

        a = self.direction.dot(self.direction)
        b = 2.0 * self.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b**2 - 4.0 * a * c
        if discriminant < 0.0:
            return result

        root = math.sqrt(discriminant)
        result.append(Intersection((-b - root) / (2.0 * a), scene_object))
        result.append(Intersection((-b + root) / (2.0 * a), scene_object))
        return result

    def transform(self, matrix: Matrix) -> Ray:
        return Ray(matrix @ self.origin, matrix @ self.direction)