from __future__ import annotations

import math

import numpy as np

from . import config
from .voxels import cell_centers

DRAW_DTYPE = np.dtype(
    [
        ("sx", np.float32),
        ("sy", np.float32),
        ("depth", np.float32),
        ("size", np.float32),
        ("r", np.uint8),
        ("g", np.uint8),
        ("b", np.uint8),
    ]
)

# Packed voxel rows per plant id, plus the avatar under key None.
_packed: dict[object, tuple[object, np.ndarray]] = {}


def _packed_for(key, voxels) -> np.ndarray:
    cached = _packed.get(key)
    if cached is None or cached[0] is not voxels:
        cached = (voxels, voxels.to_array())
        _packed[key] = cached
    return cached[1]


def _rotate_y(points: np.ndarray, angle: float) -> np.ndarray:
    # Same convention as Vec3.rotate_y.
    c = math.cos(angle)
    s = math.sin(angle)
    out = points.copy()
    out[:, 0] = points[:, 0] * c + points[:, 2] * s
    out[:, 2] = -points[:, 0] * s + points[:, 2] * c
    return out


def world_voxels(session):
    """World-space cube centers and colors for every plant and the avatar."""
    chunks_pos: list[np.ndarray] = []
    chunks_rgb: list[np.ndarray] = []

    for entry in session.catalog:
        arr = _packed_for(entry.id, session.plant_voxels.get(entry))
        pts = cell_centers(arr)
        pts += np.array(entry.position.to_tuple(), dtype=np.float32)
        chunks_pos.append(pts)
        chunks_rgb.append(np.stack([arr["r"], arr["g"], arr["b"]], axis=1))

    avatar = session.avatar
    arr = _packed_for(None, session.avatar_voxels)
    pts = _rotate_y(cell_centers(arr), avatar.heading)
    pts += np.array((avatar.position.x, avatar.position.y + avatar.bob, avatar.position.z), dtype=np.float32)
    chunks_pos.append(pts)
    chunks_rgb.append(np.stack([arr["r"], arr["g"], arr["b"]], axis=1))

    return np.concatenate(chunks_pos), np.concatenate(chunks_rgb)


def gather_draw_list(session, camera) -> np.ndarray:
    """Projected voxel squares, sorted far to near for painter ordering."""
    points, colors = world_voxels(session)
    sx, sy, depth, factor = camera.project_many(points)
    visible = depth > config.NEAR
    out = np.zeros((int(np.count_nonzero(visible)),), dtype=DRAW_DTYPE)
    out["sx"] = sx[visible]
    out["sy"] = sy[visible]
    out["depth"] = depth[visible]
    # Slight overdraw hides the seams between neighboring squares.
    out["size"] = factor[visible] * config.VOXEL_SIZE * 1.15

    max_depth = max(1.0, float(np.max(out["depth"]))) if len(out) else 1.0
    brightness = np.clip(1.0 - 0.45 * (out["depth"] / max_depth) ** 2, 0.0, 1.0)
    rgb = colors[visible].astype(np.float32) * brightness[:, None]
    out["r"] = np.clip(rgb[:, 0], 0, 255)
    out["g"] = np.clip(rgb[:, 1], 0, 255)
    out["b"] = np.clip(rgb[:, 2], 0, 255)
    return out[np.argsort(-out["depth"], kind="stable")]


def gather_shadows(session, camera) -> list[tuple[float, float, float, float]]:
    """(sx, sy, rx, ry) screen ellipses for plant and avatar ground shadows."""
    spots = [(entry.position, config.PLANT_SHADOW_RADIUS) for entry in session.catalog]
    spots.append((session.avatar.position, config.AVATAR_SHADOW_RADIUS))
    out = []
    for pos, radius in spots:
        proj, factor = camera.project(pos)
        if proj is None:
            continue
        rx = radius * factor
        # Ground discs foreshorten with the camera pitch.
        ry = rx * abs(camera.forward.y)
        out.append((proj[0], proj[1], rx, ry))
    return out
