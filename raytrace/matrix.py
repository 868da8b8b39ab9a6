"""Dense matrices and affine transformation builders."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from raytrace.tuples import Tuple
from raytrace.utils import approx_eq


class NotInvertibleError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """An immutable matrix of floats stored row by row."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[float]]):
        self.rows = tuple(tuple(float(value) for value in row) for row in rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.rows]!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        flat_self = (value for row in self.rows for value in row)
        flat_other = (value for row in other.rows for value in row)
        return all(approx_eq(a, b) for a, b in zip(flat_self, flat_other))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.rows[row][column]

    def __matmul__(self, other):
        if isinstance(other, Tuple):
            if self.column_count != 4 or self.row_count != 4:
                raise ValueError("only a 4x4 matrix can transform a tuple")
            return Tuple(*(sum(a * b for a, b in zip(row, other)) for row in self.rows))
        if isinstance(other, Matrix):
            if self.column_count != other.row_count:
                raise ValueError(
                    f"cannot multiply {self.row_count}x{self.column_count} "
                    f"by {other.row_count}x{other.column_count}"
                )
            columns = list(zip(*other.rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self.rows
            )
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(zip(*self.rows))

    def determinant(self) -> float:
        if self.row_count == 2:
            (a, b), (c, d) = self.rows
            return a * d - b * c
        return sum(
            value * self.cofactor(0, column) for column, value in enumerate(self.rows[0])
        )

    def submatrix(self, row: int, column: int) -> Matrix:
        return Matrix(
            (value for j, value in enumerate(values) if j != column)
            for i, values in enumerate(self.rows)
            if i != row
        )

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        return not approx_eq(self.determinant(), 0.0)

    def inverse(self) -> Matrix:
        """Return the inverse, raising NotInvertibleError for singular matrices."""
        det = self.determinant()
        if approx_eq(det, 0.0):
            raise NotInvertibleError("matrix has a zero determinant")
        return Matrix(
            [self.cofactor(column, row) / det for column in range(self.row_count)]
            for row in range(self.column_count)
        )

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return _identity_with(self.row_count, {(0, 3): x, (1, 3): y, (2, 3): z}) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return _identity_with(self.row_count, {(0, 0): x, (1, 1): y, (2, 2): z}) @ self

    def rotate_x(self, radians: float) -> Matrix:
        cos, sin = math.cos(radians), math.sin(radians)
        entries = {(1, 1): cos, (1, 2): -sin, (2, 1): sin, (2, 2): cos}
        return _identity_with(self.row_count, entries) @ self

    def rotate_y(self, radians: float) -> Matrix:
        cos, sin = math.cos(radians), math.sin(radians)
        entries = {(0, 0): cos, (0, 2): sin, (2, 0): -sin, (2, 2): cos}
        return _identity_with(self.row_count, entries) @ self

    def rotate_z(self, radians: float) -> Matrix:
        cos, sin = math.cos(radians), math.sin(radians)
        entries = {(0, 0): cos, (0, 1): -sin, (1, 0): sin, (1, 1): cos}
        return _identity_with(self.row_count, entries) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        entries = {(0, 1): xy, (0, 2): xz, (1, 0): yx, (1, 2): yz, (2, 0): zx, (2, 1): zy}
        return self @ _identity_with(self.row_count, entries)


def _identity_with(size: int, entries: Mapping[tuple[int, int], float]) -> Matrix:
    return Matrix(
        [entries.get((i, j), 1.0 if i == j else 0.0) for j in range(size)]
        for i in range(size)
    )


def identity(size: int) -> Matrix:
    """Return the ``size`` x ``size`` identity matrix."""
    return _identity_with(size, {})


def parse_matrix(text: str) -> Matrix:
    """Build a matrix from a table such as ``| 1 | 2 |\\n| 3 | 4 |``."""
    rows = ([float(value) for value in line.split()] for line in text.replace("|", " ").splitlines())
    return Matrix(row for row in rows if row)