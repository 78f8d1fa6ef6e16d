from .vec2 import Vec2
from .vec3 import Vec3

__all__ = ["Vec2", "Vec3"]
