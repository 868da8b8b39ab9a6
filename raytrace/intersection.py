"""Ray/object intersection records and collections of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from raytrace.shapes import SceneObject


@dataclass(eq=False)
class Intersection:
    """A ray parameter ``t`` at which a ray meets ``scene_object``."""

    t: float
    scene_object: SceneObject

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.scene_object.id == other.scene_object.id


class Intersections:
    """An ordered collection of intersections."""

    def __init__(self, values: Iterable[Intersection] = ()):
        self.values: list[Intersection] = list(values)

    def __repr__(self) -> str:
        return f"Intersections({self.values!r})"

    def append(self, intersection: Intersection) -> Intersections:
        """Add an intersection and return the collection so calls can be chained."""
        self.values.append(intersection)
        return self

    def extend(self, other: Iterable[Intersection]) -> None:
        self.values.extend(other)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Intersection:
        return self.values[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self.values)

    def hit(self) -> Intersection | None:
        """Return the intersection with the smallest positive ``t``, if any."""
        return min((i for i in self.values if i.t > 0.0), key=lambda i: i.t, default=None)

    def sort(self) -> None:
        self.values.sort(key=lambda i: i.t)