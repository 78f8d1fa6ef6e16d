"""Procedural voxel shapes for the garden plants.

Every recipe builds its plant in three passes over one ``VoxelSet``:

* structure: stalks, trunks, stems, pots (fixed or drawn once from a
  bounded range),
* mass: the leafy body, either explicit offsets hung on the structure or
  acceptance-sampled volumes with random rejection,
* ornaments: small flower motifs on a subset of attachment points.

Structure is always emitted first, so under first-writer-wins it can never
be displaced by foliage or flowers.
"""

from __future__ import annotations

import math
import random
from collections import namedtuple
from enum import Enum

from . import config
from .voxels import VoxelSet, parse_color


class PlantCategory(Enum):
    TALL_FLOWER = "TALL_FLOWER"  # Bird of paradise, canna, ginger
    BUSH_FLOWER = "BUSH_FLOWER"  # Hibiscus, ixora
    TREE_SMALL = "TREE_SMALL"  # Plumeria, rubber fig
    BROAD_LEAF = "BROAD_LEAF"  # Monstera, alocasia, anthurium
    VINE = "VINE"  # Bougainvillea, passion flower
    ORCHID = "ORCHID"  # Phalaenopsis

    @classmethod
    def parse(cls, name):
        """Return the member called `name`, or None for an unknown category."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).upper())
        except ValueError:
            return None


class ColorPalette(namedtuple("ColorPalette", ["primary", "secondary", "foliage"])):
    """primary: dominant motif color, secondary: optional accent, foliage: leaves."""

    __slots__ = ()

    @classmethod
    def from_hex(cls, primary, foliage, secondary=None) -> ColorPalette:
        return cls(
            parse_color(primary),
            parse_color(secondary) if secondary is not None else None,
            parse_color(foliage),
        )

    def accent(self, default=None):
        return self.secondary if self.secondary is not None else (default or self.primary)


def js_round(v: float) -> int:
    # Halves round toward +inf so symmetric shapes stay symmetric at .5.
    return int(math.floor(v + 0.5))


# --- Shared emit helpers ---


def _column(voxels: VoxelSet, x: int, z: int, y0: int, y1: int, color) -> None:
    for y in range(y0, y1):
        voxels.add(x, y, z, color)


def _motif(voxels: VoxelSet, origin, cells, color) -> None:
    ox, oy, oz = origin
    for dx, dy, dz in cells:
        voxels.add(ox + dx, oy + dy, oz + dz, color)


def _sample_ball(
    voxels: VoxelSet,
    rng: random.Random,
    center,
    radius: float,
    jitter: float,
    reject: float,
    lo,
    hi,
    color,
) -> None:
    """Accept lattice cells inside a noisy sphere, then drop a fraction at random."""
    cx, cy, cz = center
    for x in range(lo[0], hi[0] + 1):
        for z in range(lo[2], hi[2] + 1):
            for y in range(lo[1], hi[1] + 1):
                d = math.sqrt((x - cx) ** 2 + (y - cy) ** 2 + (z - cz) ** 2)
                if d < radius + rng.random() * jitter and rng.random() > reject:
                    voxels.add(x, y, z, color)


def _diamond(voxels: VoxelSet, center, size: int, reach: int, color, holes=(), tilt: float = 0.0) -> None:
    """Manhattan-distance patch in the xz plane, optionally sagging toward its edges."""
    cx, cy, cz = center
    for lx in range(-size, size + 1):
        for lz in range(-size, size + 1):
            if abs(lx) + abs(lz) > reach or (lx, lz) in holes:
                continue
            ly = js_round(-abs(lx) * tilt)
            voxels.add(cx + lx, cy + ly, cz + lz, color)


# --- TALL_FLOWER ---

TALL_STALKS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
TALL_HEIGHT_RANGE = (12, 17)
TALL_FLOWER_HEADS = 3
_BLADE = ((1, 0, 0), (2, 1, 0), (-1, 1, 0))
_BIRD_HEAD = ((0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 1, 0))
_CREST = ((1, 1, 0), (2, 2, 0), (0, 1, 0))
_CREST_PLAIN = ((1, 1, 0), (2, 2, 0))


def _tall_flower(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    heights = [rng.randint(*TALL_HEIGHT_RANGE) for _ in TALL_STALKS]
    stalks = list(zip(TALL_STALKS, heights))

    for (ox, oz), h in stalks:
        _column(voxels, ox, oz, 0, h, palette.foliage)

    for (ox, oz), h in stalks:
        for y in range(2, h - 4, 3):
            _motif(voxels, (ox, y, oz), _BLADE, palette.foliage)

    for (ox, oz), h in stalks[:TALL_FLOWER_HEADS]:
        _motif(voxels, (ox, h, oz), _BIRD_HEAD, palette.primary)
        if palette.secondary is not None:
            _motif(voxels, (ox, h, oz), _CREST, palette.secondary)
        else:
            _motif(voxels, (ox, h, oz), _CREST_PLAIN, palette.primary)


# --- BUSH_FLOWER ---

BUSH_RADIUS = 3.5
BUSH_CENTER_Y = 5
BUSH_JITTER = 0.5
BUSH_REJECT = 0.1
BUSH_BOX = ((-4, 0, -4), (4, 9, 4))
BUSH_BLOOMS = 8
BUSH_MIN_BLOOM_Y = 3
_PETALS = ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0))


def _bush_flower(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    _column(voxels, 0, 0, 0, 3, config.STEM_BROWN)

    lo, hi = BUSH_BOX
    _sample_ball(
        voxels,
        rng,
        (0, BUSH_CENTER_Y, 0),
        BUSH_RADIUS,
        BUSH_JITTER,
        BUSH_REJECT,
        lo,
        hi,
        palette.foliage,
    )

    center_color = palette.accent(config.FLOWER_CENTER)
    for _ in range(BUSH_BLOOMS):
        # Uniform point on the sphere surface.
        theta = 2 * math.pi * rng.random()
        phi = math.acos(2 * rng.random() - 1)
        fx = js_round(BUSH_RADIUS * math.sin(phi) * math.cos(theta))
        fz = js_round(BUSH_RADIUS * math.sin(phi) * math.sin(theta))
        fy = js_round(BUSH_RADIUS * math.cos(phi)) + BUSH_CENTER_Y
        if fy < BUSH_MIN_BLOOM_Y:
            continue
        voxels.add(fx, fy, fz, center_color)
        _motif(voxels, (fx, fy, fz), _PETALS, palette.primary)
        if palette.secondary is not None:
            voxels.add(fx, fy, fz + 1, palette.secondary)


# --- TREE_SMALL ---

TREE_TRUNK_HEIGHT = 8
TREE_BASE_HEIGHT = 4
TREE_BRANCHES = ((2, 0), (-2, 0), (0, 0), (2, 2), (-2, -2))
TREE_BRANCH_ROOT_Y = 7
TREE_BRANCH_STEPS = 4
TREE_CANOPY_Y = 10


def _tree_small(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    bark = config.BARK_BROWN
    for y in range(TREE_TRUNK_HEIGHT):
        voxels.add(0, y, 0, bark)
        if y < TREE_BASE_HEIGHT:
            voxels.add(1, y, 0, bark)
            voxels.add(0, y, 1, bark)

    for bx, bz in TREE_BRANCHES:
        for s in range(TREE_BRANCH_STEPS + 1):
            t = s / TREE_BRANCH_STEPS
            voxels.add(js_round(bx * t), TREE_BRANCH_ROOT_Y + s, js_round(bz * t), bark)

    # Canopy and blossom go in branch by branch. Even tips bloom one cell
    # lower, where the blossom center lands on the bark tip and is dropped.
    for idx, (bx, bz) in enumerate(TREE_BRANCHES):
        _diamond(voxels, (bx, TREE_CANOPY_Y + idx % 2, bz), 2, 2, palette.foliage)
        y = TREE_CANOPY_Y + 1 + idx % 2
        voxels.add(bx, y, bz, palette.primary)
        voxels.add(bx + 1, y, bz, palette.primary)
        if palette.secondary is not None:
            voxels.add(bx, y, bz + 1, palette.secondary)


# --- BROAD_LEAF ---

LEAF_DIRECTIONS = ((2, 2), (-2, 2), (0, 3), (2, -1), (-2, -1))
LEAF_STALK_STEPS = 4
LEAF_STALK_SPREAD = 0.3
LEAF_SIZE = 3
LEAF_HOLES = ((1, 1), (-1, 2))
LEAF_TILT = 0.5
SPATHE_STALK_HEIGHT = 12


def _broad_leaf(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    for y in range(3):
        voxels.add(0, y, 0, palette.foliage)
        voxels.add(1, y, 1, palette.foliage)

    for dx, dz in LEAF_DIRECTIONS:
        cx = cy = cz = 0.0
        for _ in range(LEAF_STALK_STEPS):
            cx += dx * LEAF_STALK_SPREAD
            cy += 1
            cz += dz * LEAF_STALK_SPREAD
            voxels.add(js_round(cx), js_round(cy), js_round(cz), palette.foliage)
        tip = (js_round(cx), js_round(cy), js_round(cz))
        _diamond(voxels, tip, LEAF_SIZE, LEAF_SIZE + 1, palette.foliage, holes=LEAF_HOLES, tilt=LEAF_TILT)

    # Plain green foliage plants (monstera, alocasia) carry no spathe.
    if palette.primary == palette.foliage:
        return
    _column(voxels, 0, 1, 0, SPATHE_STALK_HEIGHT, config.SPATHE_STALK)
    for fx in range(-1, 2):
        for fy in range(11, 14):
            voxels.add(fx, fy, 2, palette.primary)
    if palette.secondary is not None:
        voxels.add(0, 12, 3, palette.secondary)
        voxels.add(0, 13, 3, palette.secondary)


# --- VINE ---

VINE_HEIGHT = 18
VINE_PHASE_STEP = 0.5
VINE_AMPLITUDE = 2
VINE_CLOUD_FILL = 0.7
VINE_CLOUD_EVERY = 2
VINE_BLOOM_EVERY = 3
VINE_BLOOM_SKIP = 3
_HANGING = ((1, 0, 0), (1, -1, 0), (2, 0, 0))


def vine_path(height: int = VINE_HEIGHT) -> list[tuple[int, int, int]]:
    return [
        (
            js_round(math.sin(y * VINE_PHASE_STEP) * VINE_AMPLITUDE),
            y,
            js_round(math.cos(y * VINE_PHASE_STEP) * VINE_AMPLITUDE),
        )
        for y in range(height)
    ]


def _vine(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    path = vine_path()
    for x, y, z in path:
        voxels.add(x, y, z, config.STEM_BROWN)

    for vx, y, vz in path:
        if y % VINE_CLOUD_EVERY == 0:
            for ox in range(-1, 2):
                for oz in range(-1, 2):
                    if rng.random() < VINE_CLOUD_FILL:
                        voxels.add(vx + ox, y, vz + oz, palette.foliage)

        if y % VINE_BLOOM_EVERY == 0 and y > VINE_BLOOM_SKIP:
            _motif(voxels, (vx, y, vz), _HANGING, palette.primary)
            if palette.secondary is not None:
                voxels.add(vx + 1, y, vz + 1, palette.secondary)


# --- ORCHID ---

# Per-step (dx, dy) of the arching stem: rise, arc outwards, droop.
ORCHID_ARCH = ((0, 1),) * 5 + ((1, 1),) * 5 + ((1, -1),) * 5
ORCHID_BLOOM_AFTER = 6
_ORCHID_LEAVES = ((1, 1, 0), (2, 2, 0), (-1, 1, 0), (-2, 2, 0))
_BUTTERFLY = ((0, -1, 1), (1, -1, 1), (-1, -1, 1))


def orchid_stem() -> list[tuple[int, int, int]]:
    sx, sy = 0, 1
    stem = []
    for dx, dy in ORCHID_ARCH:
        sx += dx
        sy += dy
        stem.append((sx, sy, 0))
    return stem


def _orchid(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    for x in range(-1, 2):
        for z in range(-1, 2):
            voxels.add(x, 0, z, config.POT_BROWN)
    stem = orchid_stem()
    for x, y, z in stem:
        voxels.add(x, y, z, config.ORCHID_STEM)

    _motif(voxels, (0, 0, 0), _ORCHID_LEAVES, palette.foliage)

    for i, (fx, fy, _) in enumerate(stem):
        if i <= ORCHID_BLOOM_AFTER or i % 2:
            continue
        _motif(voxels, (fx, fy, 0), _BUTTERFLY, palette.primary)
        if palette.secondary is not None:
            voxels.add(fx, fy - 1, 2, palette.secondary)


def _fallback(voxels: VoxelSet, palette: ColorPalette, rng: random.Random) -> None:
    _column(voxels, 0, 0, 0, 10, palette.foliage)


_RECIPES = {
    PlantCategory.TALL_FLOWER: _tall_flower,
    PlantCategory.BUSH_FLOWER: _bush_flower,
    PlantCategory.TREE_SMALL: _tree_small,
    PlantCategory.BROAD_LEAF: _broad_leaf,
    PlantCategory.VINE: _vine,
    PlantCategory.ORCHID: _orchid,
}


def synthesize(category, palette: ColorPalette, rng: random.Random | None = None) -> VoxelSet:
    """Build the voxel set for one plant.

    `category` may be a PlantCategory or its name; anything unrecognized
    becomes a plain foliage column. `rng` is read, never reseeded; pass a
    seeded ``random.Random`` for reproducible output.
    """
    if rng is None:
        rng = random.Random()
    recipe = _RECIPES.get(PlantCategory.parse(category), _fallback)
    voxels = VoxelSet()
    recipe(voxels, palette, rng)
    return voxels
