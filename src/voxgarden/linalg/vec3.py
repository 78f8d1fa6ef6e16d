import math

from voxgarden.linalg.vec2 import Vec2


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x, self.y, self.z = x, y, z

    @classmethod
    def from_planar(cls, planar, y=0.0):
        """Lift a ground-plane Vec2 (x, z) back into world space at height `y`."""
        return cls(planar.x, y, planar.y)

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

    def dist(self, other):
        return (self - other).mag()

    def planar(self):
        """Drop the vertical component: (x, z) on the ground plane."""
        return Vec2(self.x, self.z)

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def dot(self, vec3):
        return self.x * vec3.x + self.y * vec3.y + self.z * vec3.z

    def cross(self, vec3):
        return Vec3(
            self.y * vec3.z - self.z * vec3.y,
            self.z * vec3.x - self.x * vec3.z,
            self.x * vec3.y - self.y * vec3.x,
        )

    def __repr__(self):
        return (
            self.x,
            self.y,
            self.z,
        ).__repr__()

    def clone(self):
        return Vec3(
            self.x,
            self.y,
            self.z,
        )

    def rotate_y(self, angle):
        """Rotate around +Y by `angle` radians.

        Right-hand rule: with your right thumb pointing +Y, positive angles
        rotate +Z toward +X.
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec3(
            self.x * cos_a + self.z * sin_a,
            self.y,
            -self.x * sin_a + self.z * cos_a,
        )

    def to_tuple(self):
        return (self.x, self.y, self.z)
