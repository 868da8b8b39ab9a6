"""A scene: the objects in it and the lights that illuminate them."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytrace.colors import Color
from raytrace.light import PointLight
from raytrace.material import Material
from raytrace.shapes import SceneObject, sphere
from raytrace.transformations import scale
from raytrace.tuples import point


@dataclass
class World:
    """A collection of scene objects and light sources."""

    objects: list[SceneObject] = field(default_factory=list)
    light_sources: list[PointLight] = field(default_factory=list)


def default_world() -> World:
    """Two concentric spheres lit by a single white light."""
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))

    outer = sphere()
    outer.material = Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)

    inner = sphere()
    inner.transform = scale(0.5, 0.5, 0.5)

    return World(objects=[outer, inner], light_sources=[light])