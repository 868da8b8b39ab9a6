"""Point lights and Phong shading."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.colors import Color
from raytrace.material import Material
from raytrace.tuples import Tuple

_BLACK = Color(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PointLight:
    """A light with no size, radiating ``intensity`` from ``position``."""

    position: Tuple
    intensity: Color


def lighting(
    material: Material,
    light: PointLight,
    position: Tuple,
    eye_vector: Tuple,
    normal_vector: Tuple,
    in_shadow: bool,
) -> Color:
    """Shade a surface point using the Phong reflection model."""
    effective_color = material.color * light.intensity
    light_vector = (light.position - position).normalize()
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    diffuse = _BLACK
    specular = _BLACK
    # A negative cosine means the light is on the other side of the surface.
    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal > 0.0:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_vector = (-light_vector).reflect(normal_vector)
        reflect_dot_eye = reflect_vector.dot(eye_vector)
        if reflect_dot_eye > 0.0:
            factor = reflect_dot_eye**material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular