"""4x4 transformation matrix for rendering and camera maths."""

from __future__ import annotations

import math

from hexium.vector3 import Vector3

_PI = 3.14159265


class Mat4:
    """A 4x4 matrix stored as 16 floats; translation lives in entries 12-14."""

    def __init__(self) -> None:
        self.data: list[float] = [0.0] * 16
        self.data[0] = self.data[5] = self.data[10] = self.data[15] = 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat4({self.data!r})"

    @staticmethod
    def multiply(a: Mat4, b: Mat4) -> Mat4:
        """Return the product of ``a`` and ``b`` in storage order."""
        result = Mat4()
        result.data = [
            sum(a.data[k + row * 4] * b.data[col + k * 4] for k in range(4))
            for row in range(4)
            for col in range(4)
        ]
        return result

    @staticmethod
    def translate(v: Vector3) -> Mat4:
        """Return a translation by ``v``."""
        m = Mat4()
        m.data[12], m.data[13], m.data[14] = v.x, v.y, v.z
        return m

    @staticmethod
    def scale(v: Vector3) -> Mat4:
        """Return a non-uniform scale by the components of ``v``."""
        m = Mat4()
        m.data[0], m.data[5], m.data[10] = v.x, v.y, v.z
        return m

    @staticmethod
    def rotate_x(deg: float) -> Mat4:
        """Return a rotation of ``deg`` degrees about the x axis."""
        rad = Mat4.radians(deg)
        m = Mat4()
        m.data[5] = math.cos(rad)
        m.data[6] = math.sin(rad)
        m.data[9] = -math.sin(rad)
        m.data[10] = math.cos(rad)
        return m

    @staticmethod
    def rotate_y(deg: float) -> Mat4:
        """Return a rotation of ``deg`` degrees about the y axis."""
        rad = Mat4.radians(deg)
        m = Mat4()
        m.data[0] = math.cos(rad)
        m.data[2] = -math.sin(rad)
        m.data[8] = math.sin(rad)
        m.data[10] = math.cos(rad)
        return m

    @staticmethod
    def rotate_z(deg: float) -> Mat4:
        """Return a rotation of ``deg`` degrees about the z axis."""
        rad = Mat4.radians(deg)
        m = Mat4()
        m.data[0] = math.cos(rad)
        m.data[1] = math.sin(rad)
        m.data[4] = -math.sin(rad)
        m.data[5] = math.cos(rad)
        return m

    @staticmethod
    def perspective(fov_deg: float, aspect: float, near: float, far: float) -> Mat4:
        """Return a perspective projection with a vertical field of view."""
        f = 1.0 / math.tan(Mat4.radians(fov_deg) / 2.0)
        m = Mat4()
        m.data[0] = f / aspect
        m.data[5] = f
        m.data[10] = (far + near) / (near - far)
        m.data[11] = -1.0
        m.data[14] = (2.0 * far * near) / (near - far)
        m.data[15] = 0.0
        return m

    @staticmethod
    def ortho(
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> Mat4:
        """Return an orthographic projection of the given box."""
        m = Mat4()
        m.data[0] = 2.0 / (right - left)
        m.data[5] = 2.0 / (top - bottom)
        m.data[10] = -2.0 / (far_plane - near_plane)
        m.data[12] = -(right + left) / (right - left)
        m.data[13] = -(top + bottom) / (top - bottom)
        m.data[14] = -(far_plane + near_plane) / (far_plane - near_plane)
        m.data[15] = 1.0
        return m

    @staticmethod
    def look_at(eye: Vector3, center: Vector3, up: Vector3) -> Mat4:
        """Return a view matrix looking from ``eye`` towards ``center``."""
        f = center.subtract(eye).normalize()
        s = f.cross(up).normalize()
        u = s.cross(f)

        m = Mat4()
        m.data = [
            s.x, u.x, -f.x, 0.0,
            s.y, u.y, -f.y, 0.0,
            s.z, u.z, -f.z, 0.0,
            -s.dot(eye), -u.dot(eye), f.dot(eye), 1.0,
        ]
        return m

    def multiply_vec(self, v: Vector3, w: float = 1.0) -> Vector3:
        """Transform ``v`` with homogeneous weight ``w``.

        The result is divided by the output weight unless that weight is zero.
        """
        d = self.data
        x = d[0] * v.x + d[4] * v.y + d[8] * v.z + d[12] * w
        y = d[1] * v.x + d[5] * v.y + d[9] * v.z + d[13] * w
        z = d[2] * v.x + d[6] * v.y + d[10] * v.z + d[14] * w
        w_out = d[3] * v.x + d[7] * v.y + d[11] * v.z + d[15] * w
        if w_out != 0:
            x, y, z = x / w_out, y / w_out, z / w_out
        return Vector3(x, y, z)

    @staticmethod
    def radians(deg: float) -> float:
        """Convert degrees to radians."""
        return deg * _PI / 180.0