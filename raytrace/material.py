"""Surface material parameters for the Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytrace.colors import Color


def _white() -> Color:
    return Color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Material:
    """Colour and Phong coefficients of a surface."""

    color: Color = field(default_factory=_white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0