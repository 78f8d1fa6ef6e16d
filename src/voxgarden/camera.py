from __future__ import annotations

import math

import numpy as np

from . import config
from .linalg import Vec3

_UP = Vec3(0.0, 1.0, 0.0)


class OrbitCamera:
    """Perspective camera circling the garden center at a fixed height.

    `fov` is vertical, in degrees.
    """

    def __init__(self, width: int, height: int, pos=config.CAM_POS, target=config.CAM_TARGET, fov=config.FOV):
        self.width = int(width)
        self.height = int(height)
        self.pos = Vec3(*pos)
        self.target = Vec3(*target)
        self.fov = float(fov)
        self._rebuild()

    def _rebuild(self) -> None:
        self.forward = (self.target - self.pos).norm()
        self.right = self.forward.cross(_UP).norm()
        self.up = self.right.cross(self.forward)
        half_angle = math.radians(self.fov * 0.5)
        self.focal = (self.height * 0.5) / max(1e-6, math.tan(half_angle))

    def resize(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self._rebuild()

    def orbit(self, angle: float) -> None:
        self.pos = self.target + (self.pos - self.target).rotate_y(angle)
        self._rebuild()

    def world_to_camera(self, point: Vec3) -> Vec3:
        d = point - self.pos
        return Vec3(d.dot(self.right), d.dot(self.up), d.dot(self.forward))

    def project(self, point: Vec3):
        c = self.world_to_camera(point)
        if c.z <= config.NEAR:
            return None, None
        factor = self.focal / c.z
        return (self.width * 0.5 + c.x * factor, self.height * 0.5 - c.y * factor), factor

    def project_many(self, points: np.ndarray):
        """Vectorized `project` for an (N, 3) array: returns sx, sy, depth, factor."""
        d = points - np.array(self.pos.to_tuple(), dtype=np.float32)
        cx = d @ np.array(self.right.to_tuple(), dtype=np.float32)
        cy = d @ np.array(self.up.to_tuple(), dtype=np.float32)
        cz = d @ np.array(self.forward.to_tuple(), dtype=np.float32)
        safe = np.maximum(cz, config.NEAR)
        factor = self.focal / safe
        sx = self.width * 0.5 + cx * factor
        sy = self.height * 0.5 - cy * factor
        return sx, sy, cz, factor

    def pick_ground(self, sx: float, sy: float):
        """World point where the pixel ray meets y=0, or None above the horizon."""
        ray = (
            self.forward
            + self.right * ((sx - self.width * 0.5) / self.focal)
            + self.up * (-(sy - self.height * 0.5) / self.focal)
        )
        if ray.y >= 0:
            return None
        t = -self.pos.y / ray.y
        hit = self.pos + ray * t
        return Vec3(hit.x, 0.0, hit.z)
