import math


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x, self.y, self.z = float(x), float(y), float(z)

    @classmethod
    def of(cls, v):
        """Accept a Vec3 or any 3-sequence."""
        if isinstance(v, Vec3):
            return v.clone()
        x, y, z = v
        return cls(x, y, z)

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def norm(self):
        mag = self.mag()
        if mag > 0:
            return Vec3(
                self.x / mag,
                self.y / mag,
                self.z / mag,
            )
        return self

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def isclose(self, other, tol=1e-6):
        return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(self, other))

    def __repr__(self):
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def clone(self):
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self):
        return (self.x, self.y, self.z)
