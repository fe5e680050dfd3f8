"""3x3 matrix used for orientations and inertia tensors."""

from __future__ import annotations

from typing import Union

from hexium.vector3 import Vector3

_EPSILON = 1e-6


class Matrix3:
    """A row-major 3x3 matrix of floats, stored in ``m[row][col]``."""

    def __init__(self, diag: float = 0.0) -> None:
        self.m: list[list[float]] = [[0.0] * 3 for _ in range(3)]
        for i in range(3):
            self.m[i][i] = float(diag)

    def set_zero(self) -> None:
        """Set every entry to zero."""
        for row in self.m:
            row[:] = [0.0, 0.0, 0.0]

    def set_identity(self) -> None:
        """Make this the identity matrix."""
        self.set_zero()
        for i in range(3):
            self.m[i][i] = 1.0

    def set(
        self,
        m00: float, m01: float, m02: float,
        m10: float, m11: float, m12: float,
        m20: float, m21: float, m22: float,
    ) -> None:
        """Set all nine entries, row by row."""
        self.m = [
            [m00, m01, m02],
            [m10, m11, m12],
            [m20, m21, m22],
        ]

    def __add__(self, other: object) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        result = Matrix3()
        result.m = [
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self.m, other.m)
        ]
        return result

    def __mul__(self, other: object) -> Union[Matrix3, Vector3]:
        if isinstance(other, Matrix3):
            columns = list(zip(*other.m))
            result = Matrix3()
            result.m = [
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self.m
            ]
            return result
        if isinstance(other, Vector3):
            return Vector3(*(row[0] * other.x + row[1] * other.y + row[2] * other.z for row in self.m))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            result = Matrix3()
            result.m = [[value * other for value in row] for row in self.m]
            return result
        return NotImplemented

    def __rmul__(self, scalar: object) -> Matrix3:
        if isinstance(scalar, (int, float)) and not isinstance(scalar, bool):
            return self * scalar
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.m == other.m

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def make_omega_matrix(w: Vector3) -> Matrix3:
        """Return the skew-symmetric matrix ``W`` with ``W * v == w x v``."""
        result = Matrix3()
        result.set(
            0.0, -w.z, w.y,
            w.z, 0.0, -w.x,
            -w.y, w.x, 0.0,
        )
        return result

    def transpose(self) -> Matrix3:
        """Return the transposed matrix."""
        result = Matrix3()
        result.m = [list(col) for col in zip(*self.m)]
        return result

    def get_column(self, col: int) -> Vector3:
        """Return column ``col`` as a vector."""
        self._check_column(col)
        return Vector3(self.m[0][col], self.m[1][col], self.m[2][col])

    def set_column(self, col: int, v: Vector3) -> None:
        """Replace column ``col`` with the components of ``v``."""
        self._check_column(col)
        for row, value in zip(self.m, v):
            row[col] = value

    @staticmethod
    def _check_column(col: int) -> None:
        if not 0 <= col < 3:
            raise IndexError(f"column index out of range: {col}")

    def orthonormalize(self) -> None:
        """Re-orthonormalize the columns with Gram-Schmidt.

        The first column keeps its direction; the third is rebuilt as the
        cross product of the first two. A degenerate first column resets the
        matrix to the identity.
        """
        x = self.get_column(0)
        y = self.get_column(1)

        len_x = x.length()
        if len_x < _EPSILON:
            self.set_identity()
            return
        x = x.multiply(1.0 / len_x)

        y = y.subtract(x.multiply(x.dot(y)))
        len_y = y.length()
        if len_y < _EPSILON:
            y = x.perpendicular()
            y = y.multiply(1.0 / y.length())
        else:
            y = y.multiply(1.0 / len_y)

        z = x.cross(y)
        len_z = z.length()
        if len_z > _EPSILON:
            z = z.multiply(1.0 / len_z)
        else:
            z = Vector3(0.0, 0.0, 1.0)

        self.set_column(0, x)
        self.set_column(1, y)
        self.set_column(2, z)

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{value:g} " for value in row) + "]\n" for row in self.m
        )

    def __repr__(self) -> str:
        return f"Matrix3({self.m!r})"