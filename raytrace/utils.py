"""Numeric helpers shared across the renderer."""

EPSILON = 0.00001


def approx_eq(a: float, b: float) -> bool:
    """Return True when two floats differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def remove_suffix(text: str, suffix: str) -> str:
    """Strip a single occurrence of ``suffix`` from the end of ``text``."""
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text