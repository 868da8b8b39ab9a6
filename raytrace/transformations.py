"""Factory functions for 4x4 transformation matrices."""

from raytrace.matrix import Matrix, identity
from raytrace.tuples import Tuple


def translate(x: float, y: float, z: float) -> Matrix:
    return identity(4).translate(x, y, z)


def scale(x: float, y: float, z: float) -> Matrix:
    return identity(4).scale(x, y, z)


def rotate_x(radians: float) -> Matrix:
    return identity(4).rotate_x(radians)


def rotate_y(radians: float) -> Matrix:
    return identity(4).rotate_y(radians)


def rotate_z(radians: float) -> Matrix:
    return identity(4).rotate_z(radians)


def shear(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return identity(4).shear(xy, xz, yx, yz, zx, zy)


def view_transform(origin: Tuple, target: Tuple, up: Tuple) -> Matrix:
    """Transform placing an eye at ``origin`` looking towards ``target``."""
    forward = (target - origin).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translate(-origin.x, -origin.y, -origin.z)