"""Four-component vectors used for positions, directions and texture ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Vector3D:
    """A vector with x, y, z and a homogeneous w component."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self):
        yield from (self.x, self.y, self.z, self.w)

    def transform(self, matrix: Sequence) -> Vector3D:
        """Return this vector multiplied by a 4x4 row-major matrix.

        The matrix may be given as four rows of four numbers or as a flat
        sequence of sixteen numbers.
        """
        if len(matrix) == 16:
            cell = lambda row, col: matrix[row * 4 + col]  # noqa: E731
        elif len(matrix) == 4 and all(len(row) == 4 for row in matrix):
            cell = lambda row, col: matrix[row][col]  # noqa: E731
        else:
            raise ValueError("matrix must be 4x4 or have 16 elements")

        components = tuple(self)
        return Vector3D(
            *(
                sum(components[row] * cell(row, col) for row in range(4))
                for col in range(4)
            )
        )

    def length(self) -> float:
        """Length of the x, y, z part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        """Return the vector scaled to unit length; a zero vector is returned unchanged."""
        size = self.length()
        if size == 0:
            return self
        return Vector3D(self.x / size, self.y / size, self.z / size, self.w)

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product of the x, y, z parts."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3D) -> float:
        """Dot product of the x, y, z parts."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)