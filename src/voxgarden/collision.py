"""Circular plant footprints and the single-pass push-out used by the avatar.

Obstacles are resolved greedily in catalog order. A later push-out is not
re-checked against earlier obstacles, so two footprints that overlap can
leave the avatar slightly inside the first one for a tick.
"""

from __future__ import annotations

from collections import namedtuple

from . import config
from .linalg import Vec2, Vec3
from .plants import PlantCategory

GardenObstacle = namedtuple("GardenObstacle", ["center", "radius", "plant_id"])
# center: Vec2 (world x, world z)
# radius: planar exclusion radius of the plant alone, without the avatar


def obstacle_radius(category) -> float:
    cat = PlantCategory.parse(category)
    if cat is None:
        return config.DEFAULT_OBSTACLE_RADIUS
    return config.OBSTACLE_RADII.get(cat.value, config.DEFAULT_OBSTACLE_RADIUS)


def collision_field(catalog) -> list[GardenObstacle]:
    return [
        GardenObstacle(entry.position.planar(), obstacle_radius(entry.category), entry.id)
        for entry in catalog
    ]


def push_out(point: Vec2, center: Vec2, reach: float) -> Vec2:
    """Move `point` to the rim of the circle if it lies strictly inside."""
    offset = point - center
    if offset.mag() >= reach:
        return point
    normal = offset.norm()
    if normal.mag_sq() == 0:
        normal = Vec2(*config.COLLISION_FALLBACK_AXIS)
    return center + normal * reach


def resolve_collisions(proposed: Vec3, obstacles, body_radius: float = config.AVATAR_RADIUS) -> Vec3:
    planar = proposed.planar()
    for obstacle in obstacles:
        planar = push_out(planar, obstacle.center, obstacle.radius + body_radius)
    return Vec3.from_planar(planar, proposed.y)
