from voxgarden.catalog import GARDEN
from voxgarden.collision import collision_field
from voxgarden.linalg import Vec3
from voxgarden.proximity import active_plant, nearest_plant, plant_under


class TestNearest:

    def test_next_to_plant(self):
        entry = nearest_plant(GARDEN, Vec3(3.0, 0.0, 0.0))
        assert entry is GARDEN[0]

    def test_radius_is_strict(self):
        # The first plant sits exactly 4 units from the origin.
        assert GARDEN[0].position.dist(Vec3()) == 4.0
        assert nearest_plant(GARDEN, Vec3()) is None

    def test_far_away(self):
        assert nearest_plant(GARDEN, Vec3(200.0, 0.0, 200.0)) is None

    def test_picks_closest(self):
        a, b = GARDEN[0], GARDEN[1]
        mid = a.position + (b.position - a.position) * 0.4
        assert nearest_plant(GARDEN, mid, radius=100.0) is a

    def test_custom_radius(self):
        assert nearest_plant(GARDEN, Vec3(), radius=4.5) is GARDEN[0]


class TestActive:

    def test_hover_wins(self):
        entry = active_plant(GARDEN, Vec3(3.0, 0.0, 0.0), hovered_id=5)
        assert entry is GARDEN[5]

    def test_falls_back_to_nearest(self):
        assert active_plant(GARDEN, Vec3(3.0, 0.0, 0.0)) is GARDEN[0]
        assert active_plant(GARDEN, Vec3()) is None

    def test_unknown_hover_id(self):
        assert active_plant(GARDEN, Vec3(3.0, 0.0, 0.0), hovered_id=99) is None


class TestPlantUnder:

    def test_inside_footprint(self):
        obstacles = collision_field(GARDEN)
        for entry in (GARDEN[0], GARDEN[7], GARDEN[19]):
            assert plant_under(GARDEN, entry.position, obstacles) is entry

    def test_open_ground(self):
        obstacles = collision_field(GARDEN)
        assert plant_under(GARDEN, Vec3(), obstacles) is None
