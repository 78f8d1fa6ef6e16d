from __future__ import annotations

from . import config
from .catalog import find


def nearest_plant(catalog, position, radius: float = config.INTERACTION_RADIUS):
    """Closest plant strictly within `radius` of `position`, else None."""
    nearest = None
    best = radius
    for entry in catalog:
        d = entry.position.dist(position)
        if d < best:
            best = d
            nearest = entry
    return nearest


def active_plant(catalog, position, hovered_id: int | None = None):
    # A plant under the pointer wins over whatever the avatar stands next to.
    if hovered_id is not None:
        return find(catalog, hovered_id)
    return nearest_plant(catalog, position)


def plant_under(catalog, ground_point, obstacles):
    """Plant whose footprint contains a ground point, used for pointer hover."""
    planar = ground_point.planar()
    for obstacle in obstacles:
        if obstacle.center.dist(planar) < obstacle.radius:
            return find(catalog, obstacle.plant_id)
    return None
