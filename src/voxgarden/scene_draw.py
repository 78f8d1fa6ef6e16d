from __future__ import annotations

from . import config
from .linalg import Vec3


def _draw_ground(prims, camera) -> None:
    proj, factor = camera.project(Vec3(0.0, 0.0, 0.0))
    if proj is None:
        return
    rx = config.GROUND_RADIUS * factor
    prims.ellipse_center(proj[0], proj[1], rx, rx * abs(camera.forward.y), config.GROUND_COLOR)


def draw_scene(prims, camera, draw_list, shadows) -> None:
    prims.clear(config.SKY_COLOR)
    _draw_ground(prims, camera)

    for sx, sy, rx, ry in shadows:
        prims.ellipse_center(sx, sy, rx, ry, config.SHADOW_COLOR)

    for item in draw_list:
        prims.rect_center(
            float(item["sx"]),
            float(item["sy"]),
            float(item["size"]),
            (int(item["r"]), int(item["g"]), int(item["b"])),
        )
