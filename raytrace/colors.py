"""RGB colours with floating-point channels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from raytrace.utils import approx_eq


def _channel(value: float, max_value: float) -> int:
    # Half-away-from-zero rounding; the value is never negative after clamping.
    return int(math.floor(max_value * min(max(value, 0.0), 1.0) + 0.5))


@dataclass(frozen=True, eq=False)
class Color:
    """A colour whose channels are nominally in [0, 1] but may exceed that range."""

    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_eq(self.red, other.red)
            and approx_eq(self.green, other.green)
            and approx_eq(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        """Multiply channel-wise by another colour, or scale by a number."""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def to_ppm(self, max_value: int = 255) -> str:
        """Render as ``"r g b"`` with channels clamped and scaled to ``max_value``."""
        scale = float(max_value)
        return " ".join(str(_channel(v, scale)) for v in (self.red, self.green, self.blue))

    def to_rgb(self) -> bytes:
        """Return the colour as three 8-bit channel bytes."""
        return bytes(_channel(v, 255.0) for v in (self.red, self.green, self.blue))