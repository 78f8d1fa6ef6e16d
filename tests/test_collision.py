import math

import pytest

from voxgarden import config
from voxgarden.catalog import GARDEN
from voxgarden.collision import (
    GardenObstacle,
    collision_field,
    obstacle_radius,
    push_out,
    resolve_collisions,
)
from voxgarden.linalg import Vec2, Vec3
from voxgarden.plants import PlantCategory


class TestObstacleRadius:

    @pytest.mark.parametrize(
        "category, radius",
        [
            (PlantCategory.BUSH_FLOWER, 1.5),
            (PlantCategory.BROAD_LEAF, 1.2),
            (PlantCategory.TREE_SMALL, 1.0),
            (PlantCategory.VINE, 0.8),
            (PlantCategory.ORCHID, 0.8),
            (PlantCategory.TALL_FLOWER, 0.8),
            ("BUSH_FLOWER", 1.5),
            ("CACTUS", 0.8),
        ],
    )
    def test_lookup(self, category, radius):
        assert obstacle_radius(category) == radius

    def test_field_follows_catalog(self):
        field = collision_field(GARDEN)
        assert len(field) == len(GARDEN) == 20
        for obstacle, entry in zip(field, GARDEN):
            assert obstacle.plant_id == entry.id
            assert obstacle.center == Vec2(entry.position.x, entry.position.z)
            assert obstacle.radius == obstacle_radius(entry.category)


class TestPushOut:

    def test_outside_untouched(self):
        p = Vec2(3.0, 0.0)
        assert push_out(p, Vec2(0.0, 0.0), 2.0) is p

    def test_on_rim_untouched(self):
        p = Vec2(0.0, 2.0)
        assert push_out(p, Vec2(0.0, 0.0), 2.0) is p

    def test_inside_moves_to_rim(self):
        out = push_out(Vec2(0.5, 0.0), Vec2(0.0, 0.0), 2.0)
        assert out.x == pytest.approx(2.0)
        assert out.y == pytest.approx(0.0)

    def test_keeps_direction(self):
        out = push_out(Vec2(1.0, 1.0), Vec2(0.0, 0.0), 2.0)
        assert out.x == pytest.approx(math.sqrt(2.0))
        assert out.y == pytest.approx(math.sqrt(2.0))

    def test_coincident_uses_fallback_axis(self):
        out = push_out(Vec2(1.0, 1.0), Vec2(1.0, 1.0), 1.5)
        assert out.x == pytest.approx(2.5)
        assert out.y == pytest.approx(1.0)


class TestResolve:

    def test_reach_includes_body(self):
        obstacles = [GardenObstacle(Vec2(0.0, 0.0), 1.5, 0)]
        out = resolve_collisions(Vec3(1.0, 0.0, 0.0), obstacles)
        assert out.x == pytest.approx(1.5 + config.AVATAR_RADIUS)
        assert out.z == pytest.approx(0.0)

    def test_height_preserved(self):
        obstacles = [GardenObstacle(Vec2(0.0, 0.0), 1.0, 0)]
        out = resolve_collisions(Vec3(0.0, 0.7, 0.5), obstacles)
        assert out.y == 0.7
        assert out.z == pytest.approx(1.0 + config.AVATAR_RADIUS)

    def test_no_obstacles(self):
        out = resolve_collisions(Vec3(1.0, 0.0, 2.0), [])
        assert out == Vec3(1.0, 0.0, 2.0)

    def test_single_pass_can_end_inside_earlier_obstacle(self):
        a = GardenObstacle(Vec2(0.0, 0.0), 1.0, 0)
        b = GardenObstacle(Vec2(1.5, 0.0), 1.0, 1)
        out = resolve_collisions(Vec3(0.75, 0.0, 0.1), [a, b], body_radius=0.0)
        planar = out.planar()
        # B's push-out is final even though it lands back inside A.
        assert planar.dist(b.center) == pytest.approx(1.0)
        assert planar.dist(a.center) < 1.0
