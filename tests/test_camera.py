import numpy as np
import pytest

from voxgarden import config
from voxgarden.camera import OrbitCamera
from voxgarden.linalg import Vec3

W, H = 320, 200


@pytest.fixture
def camera():
    return OrbitCamera(W, H)


class TestProject:

    def test_target_at_center(self, camera):
        (sx, sy), factor = camera.project(Vec3())
        assert sx == pytest.approx(W / 2)
        assert sy == pytest.approx(H / 2)
        assert factor > 0

    def test_up_is_up(self, camera):
        (_, low), _ = camera.project(Vec3())
        (_, high), _ = camera.project(Vec3(0.0, 1.0, 0.0))
        assert high < low

    def test_behind_camera(self, camera):
        behind = camera.pos + (camera.pos - camera.target)
        assert camera.project(behind) == (None, None)

    def test_vectorized_matches(self, camera):
        points = [Vec3(1.0, 0.0, 2.0), Vec3(-3.0, 1.5, 0.5), Vec3(4.0, 0.0, -4.0)]
        arr = np.array([p.to_tuple() for p in points], dtype=np.float32)
        sx, sy, depth, _ = camera.project_many(arr)
        for i, p in enumerate(points):
            (ex, ey), _ = camera.project(p)
            assert sx[i] == pytest.approx(ex, abs=1e-2)
            assert sy[i] == pytest.approx(ey, abs=1e-2)
            assert depth[i] > config.NEAR


class TestPick:

    def test_center_hits_target(self, camera):
        hit = camera.pick_ground(W / 2, H / 2)
        assert hit.x == pytest.approx(0.0, abs=1e-6)
        assert hit.z == pytest.approx(0.0, abs=1e-6)
        assert hit.y == 0.0

    def test_inverse_of_project(self, camera):
        point = Vec3(3.0, 0.0, -2.0)
        (sx, sy), _ = camera.project(point)
        hit = camera.pick_ground(sx, sy)
        assert hit.x == pytest.approx(3.0, abs=1e-6)
        assert hit.z == pytest.approx(-2.0, abs=1e-6)

    def test_sky_misses(self, camera):
        assert camera.pick_ground(W / 2, -10 * H) is None


class TestOrbit:

    def test_keeps_distance_and_height(self, camera):
        before = camera.pos.dist(camera.target)
        camera.orbit(0.7)
        assert camera.pos.dist(camera.target) == pytest.approx(before)
        assert camera.pos.y == pytest.approx(config.CAM_POS[1])
        (sx, sy), _ = camera.project(Vec3())
        assert sx == pytest.approx(W / 2)
        assert sy == pytest.approx(H / 2)

    def test_resize(self, camera):
        camera.resize(640, 400)
        (sx, sy), _ = camera.project(Vec3())
        assert (sx, sy) == (pytest.approx(320), pytest.approx(200))
