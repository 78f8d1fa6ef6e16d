import math

import pytest

from voxgarden import catalog, config
from voxgarden.catalog import GARDEN, build_catalog, find, spiral_position
from voxgarden.plants import ColorPalette, PlantCategory


class TestCatalog:

    def test_twenty_plants_in_order(self):
        assert len(GARDEN) == 20
        assert [e.id for e in GARDEN] == list(range(20))
        assert GARDEN[0].name == "Bird of Paradise"
        assert GARDEN[-1].name == "Golden Pothos"

    def test_every_category_used(self):
        assert {e.category for e in GARDEN} == set(PlantCategory)

    def test_on_ground(self):
        assert all(e.position.y == 0.0 for e in GARDEN)

    def test_palettes_parsed(self):
        assert all(isinstance(e.palette, ColorPalette) for e in GARDEN)
        assert GARDEN[0].palette == ColorPalette((255, 102, 0), (0, 0, 255), (0, 100, 0))

    def test_optional_secondary(self):
        bougainvillea = find(GARDEN, 3)
        assert bougainvillea.name == "Bougainvillea"
        assert bougainvillea.palette.secondary is None

    def test_foliage_colored_broad_leaf(self):
        monstera = next(e for e in GARDEN if e.name == "Monstera")
        assert monstera.category is PlantCategory.BROAD_LEAF
        assert monstera.palette.primary == monstera.palette.foliage

    def test_find_missing(self):
        assert find(GARDEN, 42) is None

    def test_rebuild_is_stable(self):
        assert build_catalog() == GARDEN


class TestSpiral:

    @pytest.mark.parametrize("i", [0, 1, 7, 19])
    def test_radius_grows(self, i):
        p = spiral_position(i)
        assert math.hypot(p.x, p.z) == pytest.approx(catalog.SPIRAL_BASE + i * catalog.SPIRAL_STEP)

    def test_first_on_plus_x(self):
        p = spiral_position(0)
        assert (p.x, p.y, p.z) == (4.0, 0.0, 0.0)

    def test_angle(self):
        p = spiral_position(3)
        assert math.atan2(p.z, p.x) == pytest.approx(math.atan2(math.sin(7.2), math.cos(7.2)))

    def test_walkable_footprints_never_overlap(self):
        widest = max(config.OBSTACLE_RADII.values()) + config.AVATAR_RADIUS
        for i, a in enumerate(GARDEN):
            for b in GARDEN[i + 1:]:
                assert a.position.dist(b.position) > 2 * widest
