from __future__ import annotations

from . import config
from .voxels import VoxelSet

AVATAR_HEIGHT = 10


def synthesize_avatar() -> VoxelSet:
    """Fixed humanoid, feet at y=0 and hair cap at y=9, facing +z.

    The hair goes in before the head so the fringe keeps its color under
    first-writer-wins.
    """
    voxels = VoxelSet()
    skin, hair = config.SKIN, config.HAIR

    for x in range(-1, 2):
        for z in range(-1, 2):
            voxels.add(x, 9, z, hair)
    for pos in ((-2, 8, 0), (2, 8, 0), (0, 8, -2), (-1, 8, -2), (1, 8, -2)):
        voxels.add(*pos, hair)
    for x in range(-1, 2):
        voxels.add(x, 8, 1, hair)

    for x in (-1, 1):
        voxels.add(x, 0, 0, config.SHOES)
        voxels.add(x, 1, 0, skin)
    for x in range(-1, 2):
        voxels.add(x, 2, 0, config.SHORTS)

    for y in range(3, 6):
        for x in range(-1, 2):
            voxels.add(x, y, 0, config.SHIRT)

    for x in (-2, 2):
        voxels.add(x, 5, 0, config.SHIRT)
        voxels.add(x, 4, 0, skin)

    for y in range(6, 9):
        for x in range(-1, 2):
            for z in range(-1, 2):
                voxels.add(x, y, z, skin)

    return voxels
