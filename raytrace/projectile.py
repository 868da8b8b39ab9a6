"""A tiny projectile simulation driven by gravity and wind."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.tuples import Tuple


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )