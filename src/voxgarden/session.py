from __future__ import annotations

import logging
import random

from . import locomotion
from .avatar import synthesize_avatar
from .catalog import GARDEN
from .collision import collision_field
from .linalg import Vec3
from .locomotion import AvatarState, MoveState
from .plants import synthesize
from .proximity import active_plant, plant_under
from .voxels import VoxelSet

log = logging.getLogger(__name__)


class PlantVoxelCache:
    """One voxel set per plant, rebuilt only when its category or palette changes."""

    def __init__(self, rng: random.Random):
        self.rng = rng
        self._entries: dict[int, tuple[tuple, VoxelSet]] = {}

    def get(self, entry) -> VoxelSet:
        key = (entry.category, entry.palette)
        cached = self._entries.get(entry.id)
        if cached is not None and cached[0] == key:
            return cached[1]
        voxels = synthesize(entry.category, entry.palette, self.rng)
        self._entries[entry.id] = (key, voxels)
        log.info("built %s (%s): %d voxels", entry.name, entry.category.value, len(voxels))
        return voxels

    def __len__(self) -> int:
        return len(self._entries)


class Session:
    def __init__(self, catalog=GARDEN, seed: int | None = None):
        self.catalog = tuple(catalog)
        self.obstacles = collision_field(self.catalog)
        self.rng = random.Random(seed)
        self.plant_voxels = PlantVoxelCache(self.rng)
        self.avatar = AvatarState(Vec3(0.0, 0.0, 0.0))
        self.hovered_id: int | None = None
        self.time = 0.0
        self._avatar_voxels: VoxelSet | None = None

    def warm(self) -> None:
        # Catalog order, so one seed always yields the same garden.
        for entry in self.catalog:
            self.plant_voxels.get(entry)

    @property
    def avatar_voxels(self) -> VoxelSet:
        if self._avatar_voxels is None:
            self._avatar_voxels = synthesize_avatar()
        return self._avatar_voxels

    def click(self, ground_point: Vec3) -> None:
        locomotion.set_target(self.avatar, Vec3(ground_point.x, 0.0, ground_point.z))
        log.debug(
            "target (%.2f, %.2f) -> %s",
            ground_point.x,
            ground_point.z,
            self.avatar.state.value,
        )

    def hover(self, ground_point: Vec3 | None) -> None:
        if ground_point is None:
            self.hovered_id = None
            return
        entry = plant_under(self.catalog, ground_point, self.obstacles)
        self.hovered_id = entry.id if entry is not None else None

    def tick(self, dt: float) -> None:
        self.time += dt
        before = self.avatar.state
        locomotion.update(self.avatar, dt, self.obstacles, self.time)
        if before is MoveState.SEEKING and self.avatar.state is MoveState.IDLE:
            log.debug("arrived at %r", self.avatar.position)

    def active_plant(self):
        return active_plant(self.catalog, self.avatar.position, self.hovered_id)
