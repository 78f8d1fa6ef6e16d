import math


class Vec2:
    """Planar vector. In the garden the two components are world x and z."""

    def __init__(self, x=0.0, y=0.0):
        self.x, self.y = x, y

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2)

    def mag_sq(self):
        return self.x * self.x + self.y * self.y

    def norm(self):
        mag = self.mag()
        if mag > 0:
            return Vec2(
                self.x / mag,
                self.y / mag,
            )
        return self

    def dist(self, other):
        return (self - other).mag()

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return (
            self.x,
            self.y,
        ).__repr__()
