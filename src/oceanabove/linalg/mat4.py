import math

from oceanabove.linalg.vec3 import Vec3


class Mat4:
    """4x4 matrix (row-major).

    Vectors are treated as column vectors:
        p' = M @ (x, y, z, 1)

    so a product ``A @ B @ C`` applies C first. Shaders and the upload sink
    want column-major data; use ``to_column_major()`` at that boundary only.
    """

    def __init__(self, m=None):
        if m is None:
            self.m = _IDENTITY.copy()
        else:
            if len(m) != 16:
                raise ValueError("Mat4 expects 16 elements")
            self.m = [float(x) for x in m]

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_rows(cls, r0, r1, r2, r3):
        return cls([*r0, *r1, *r2, *r3])

    @classmethod
    def translate(cls, tx, ty, tz):
        return cls.from_rows(
            (1.0, 0.0, 0.0, tx),
            (0.0, 1.0, 0.0, ty),
            (0.0, 0.0, 1.0, tz),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def scale(cls, sx, sy=None, sz=None):
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return cls.from_rows(
            (sx, 0.0, 0.0, 0.0),
            (0.0, sy, 0.0, 0.0),
            (0.0, 0.0, sz, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotate_x(cls, angle):
        """Rotate around +X by `angle` radians (+Y toward +Z)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls.from_rows(
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, -s, 0.0),
            (0.0, s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotate_y(cls, angle):
        """Rotate around +Y by `angle` radians (+Z toward +X)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls.from_rows(
            (c, 0.0, s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def perspective(cls, fov_y, aspect, near, far):
        """Right-handed perspective matrix.

        fov_y in radians. near/far > 0.
        Maps to OpenGL-style clip space: z in [-w, +w] after projection.
        """
        n = float(near)
        fa = float(far)
        if aspect == 0:
            raise ValueError("aspect must be non-zero")
        if n <= 0 or fa <= 0 or n == fa:
            raise ValueError("invalid near/far")
        f = 1.0 / math.tan(fov_y * 0.5)
        return cls.from_rows(
            (f / float(aspect), 0.0, 0.0, 0.0),
            (0.0, f, 0.0, 0.0),
            (0.0, 0.0, (fa + n) / (n - fa), (2.0 * fa * n) / (n - fa)),
            (0.0, 0.0, -1.0, 0.0),
        )

    def __repr__(self):
        m = self.m
        return f"Mat4({m[0:4]}, {m[4:8]}, {m[8:12]}, {m[12:16]})"

    def isclose(self, other, tol=1e-6):
        return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(self.m, other.m))

    def transpose(self):
        m = self.m
        return Mat4([m[c * 4 + r] for r in range(4) for c in range(4)])

    def to_column_major(self):
        return self.transpose().m

    def _mul_mat4(self, other):
        a = self.m
        b = other.m
        out = [0.0] * 16
        for r in range(4):
            for c in range(4):
                out[r * 4 + c] = (
                    a[r * 4 + 0] * b[0 * 4 + c]
                    + a[r * 4 + 1] * b[1 * 4 + c]
                    + a[r * 4 + 2] * b[2 * 4 + c]
                    + a[r * 4 + 3] * b[3 * 4 + c]
                )
        return Mat4(out)

    def transform_point(self, v):
        x = float(v.x)
        y = float(v.y)
        z = float(v.z)
        m = self.m
        nx = m[0] * x + m[1] * y + m[2] * z + m[3]
        ny = m[4] * x + m[5] * y + m[6] * z + m[7]
        nz = m[8] * x + m[9] * y + m[10] * z + m[11]
        nw = m[12] * x + m[13] * y + m[14] * z + m[15]
        if nw != 0.0:
            invw = 1.0 / nw
            nx *= invw
            ny *= invw
            nz *= invw
        return Vec3(nx, ny, nz)

    def transform_vector(self, v):
        x = float(v.x)
        y = float(v.y)
        z = float(v.z)
        m = self.m
        return Vec3(
            m[0] * x + m[1] * y + m[2] * z,
            m[4] * x + m[5] * y + m[6] * z,
            m[8] * x + m[9] * y + m[10] * z,
        )

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return self._mul_mat4(other)
        if isinstance(other, Vec3):
            return self.transform_point(other)
        raise TypeError(
            f"unsupported operand type(s) for @: 'Mat4' and '{type(other)}'"
        )


_IDENTITY = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]  # fmt: skip
