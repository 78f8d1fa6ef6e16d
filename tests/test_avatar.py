from voxgarden import config
from voxgarden.avatar import AVATAR_HEIGHT, synthesize_avatar


class TestAvatar:

    def test_deterministic(self):
        assert list(synthesize_avatar()) == list(synthesize_avatar())

    def test_cell_count_and_unique(self):
        voxels = synthesize_avatar()
        coords = voxels.coords()
        assert len(coords) == 61
        assert len(set(coords)) == len(coords)

    def test_bounds(self):
        assert synthesize_avatar().bounds() == ((-2, 0, -2), (2, AVATAR_HEIGHT - 1, 1))

    def test_fringe_keeps_hair_color(self):
        voxels = synthesize_avatar()
        for x in range(-1, 2):
            assert voxels.color_at(x, 8, 1) == config.HAIR
        assert voxels.color_at(0, 7, 1) == config.SKIN
        assert voxels.color_at(0, 7, 0) == config.SKIN

    def test_body_parts(self):
        voxels = synthesize_avatar()
        assert voxels.color_at(-1, 0, 0) == config.SHOES
        assert voxels.color_at(1, 0, 0) == config.SHOES
        assert (0, 0, 0) not in voxels
        assert voxels.color_at(0, 2, 0) == config.SHORTS
        assert voxels.color_at(0, 4, 0) == config.SHIRT
        assert voxels.color_at(2, 4, 0) == config.SKIN
        assert voxels.color_at(0, 9, 0) == config.HAIR

    def test_feet_on_ground(self):
        assert min(v.y for v in synthesize_avatar()) == 0
