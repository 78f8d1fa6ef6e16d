from __future__ import annotations

from collections import namedtuple

import numpy as np

from . import config

Voxel = namedtuple("Voxel", ["x", "y", "z", "color"])
# x, y, z: int lattice coordinates local to the owning structure.
# color: (r, g, b) with 0..255 components.

# Packed voxel rows handed to the renderer.
VOXEL_DTYPE = np.dtype(
    [
        ("x", np.int16),
        ("y", np.int16),
        ("z", np.int16),
        ("r", np.uint8),
        ("g", np.uint8),
        ("b", np.uint8),
    ]
)


def parse_color(value) -> tuple[int, int, int]:
    """Accept "#rrggbb", "#rgb" or an (r, g, b) triple and return an int triple."""
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"bad color: {value!r}")
        try:
            return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError:
            raise ValueError(f"bad color: {value!r}") from None
    r, g, b = value
    for c in (r, g, b):
        if not 0 <= int(c) <= 255:
            raise ValueError(f"bad color component: {value!r}")
    return (int(r), int(g), int(b))


class VoxelSet:
    """Emission-ordered voxels where the first write to a cell wins.

    Later writes to an occupied (x, y, z) are dropped without error.
    """

    def __init__(self):
        self._voxels: list[Voxel] = []
        self._occupied: dict[tuple[int, int, int], int] = {}

    def add(self, x, y, z, color) -> bool:
        key = (int(x), int(y), int(z))
        if key in self._occupied:
            return False
        self._occupied[key] = len(self._voxels)
        self._voxels.append(Voxel(key[0], key[1], key[2], color))
        return True

    def __len__(self) -> int:
        return len(self._voxels)

    def __iter__(self):
        return iter(self._voxels)

    def __contains__(self, pos) -> bool:
        return tuple(pos) in self._occupied

    def color_at(self, x: int, y: int, z: int):
        idx = self._occupied.get((x, y, z))
        if idx is None:
            return None
        return self._voxels[idx].color

    def coords(self) -> list[tuple[int, int, int]]:
        return [(v.x, v.y, v.z) for v in self._voxels]

    def count_color(self, color) -> int:
        return sum(1 for v in self._voxels if v.color == color)

    def bounds(self):
        """Inclusive ((min_x, min_y, min_z), (max_x, max_y, max_z)), None when empty."""
        if not self._voxels:
            return None
        xs = [v.x for v in self._voxels]
        ys = [v.y for v in self._voxels]
        zs = [v.z for v in self._voxels]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def to_array(self) -> np.ndarray:
        packed = [(v.x, v.y, v.z, *v.color) for v in self._voxels]
        if not packed:
            return np.zeros((0,), dtype=VOXEL_DTYPE)
        return np.array(packed, dtype=VOXEL_DTYPE)


def cell_centers(arr: np.ndarray, cell: float = config.VOXEL_SIZE) -> np.ndarray:
    """(N, 3) float array of cube centers in the owner's frame.

    Cubes sit on the lattice floor, so y is lifted by half a cell.
    """
    out = np.empty((len(arr), 3), dtype=np.float32)
    out[:, 0] = arr["x"] * cell
    out[:, 1] = arr["y"] * cell + cell * 0.5
    out[:, 2] = arr["z"] * cell
    return out
