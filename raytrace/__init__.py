"""A small ray tracer: tuples, matrices, spheres, a point light, shadows and PPM/PNG output."""

__version__ = "0.1.0"