"""Objects that can be placed in a scene."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

from raytrace.material import Material
from raytrace.matrix import Matrix, identity
from raytrace.tuples import Tuple, point, vector

_next_id = itertools.count(1)


class SceneObject(ABC):
    """A shape with its own object-to-world transform and material."""

    def __init__(self, transform: Matrix | None = None, material: Material | None = None):
        self.id = next(_next_id)
        self.transform = transform if transform is not None else identity(4)
        self.material = material if material is not None else Material()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    @abstractmethod
    def normal_at(self, world_point: Tuple) -> Tuple:
        """Return the unit surface normal at a point given in world space."""


class Sphere(SceneObject):
    """A unit sphere centred on the origin in object space."""

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.transform.inverse()
        object_normal = (inverse @ world_point) - point(0.0, 0.0, 0.0)
        world_normal = inverse.transpose() @ object_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()


def sphere() -> Sphere:
    """Create a sphere with the identity transform and default material."""
    return Sphere()