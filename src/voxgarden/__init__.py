from .avatar import synthesize_avatar
from .catalog import GARDEN, PlantEntry
from .collision import GardenObstacle, collision_field, obstacle_radius, resolve_collisions
from .locomotion import AvatarState, MoveState
from .plants import ColorPalette, PlantCategory, synthesize
from .voxels import Voxel, VoxelSet

__all__ = [
    "AvatarState",
    "ColorPalette",
    "GARDEN",
    "GardenObstacle",
    "MoveState",
    "PlantCategory",
    "PlantEntry",
    "Voxel",
    "VoxelSet",
    "collision_field",
    "obstacle_radius",
    "resolve_collisions",
    "synthesize",
    "synthesize_avatar",
]
