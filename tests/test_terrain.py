import numpy as np
import pytest

from tankwars.terrain import (
    apply_landslide,
    build_height_map,
    projectile_position,
    terrain_height,
    trajectory,
)


def test_terrain_height_is_bounded():
    for x in np.linspace(0.0, 112.0, 500):
        h = terrain_height(float(x))
        assert -0.5 <= h <= 5.5


def test_projectile_position_at_zero_time_is_start():
    p = projectile_position((3.0, 4.0, 0.0), (0.0, 1000.0, 0.0), (10.0, 20.0, 0.0), 0.0)
    assert p == pytest.approx([10.0, 20.0, 0.0])


def test_projectile_returns_to_launch_height():
    v, g = 600.0, 1000.0
    p = projectile_position((0.0, v, 0.0), (0.0, g, 0.0), (5.0, 7.0, 0.0), 2 * v / g)
    assert p == pytest.approx([5.0, 7.0, 0.0])


def test_projectile_moves_linearly_without_gravity():
    p = projectile_position((2.0, 3.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 5.0)
    assert p == pytest.approx([10.0, 15.0, 0.0])


def test_build_height_map_samples():
    hm = build_height_map((1280, 720), 28.0, 12.0, 1.0, 0.5)
    assert len(hm) == 3
    assert hm[0][0] == 0.0
    xs = [x for x, _ in hm]
    assert xs == sorted(xs)
    assert hm[2][0] == pytest.approx(1280 / 28.0)
    assert hm[1][1] == pytest.approx(terrain_height(0.5) * 720 / 12.0)


def test_build_height_map_includes_end():
    hm = build_height_map((1280, 720), 28.0, 12.0, 112.0, 0.1)
    assert hm[-1][0] == pytest.approx(112.0 * 1280 / 28.0)


def test_landslide_moves_earth_downhill():
    hm = [(0.0, 0.0), (1.0, 10.0)]
    apply_landslide(hm, 0, 10, 0, 10, 1.0, 50.0, 0.1)
    assert hm[0][1] == pytest.approx(3.0)
    assert hm[1][1] == pytest.approx(7.0)
    assert hm[0][1] + hm[1][1] == pytest.approx(10.0)


def test_landslide_keeps_total_height():
    hm = [(float(i), float((i * 37) % 11)) for i in range(20)]
    total = sum(y for _, y in hm)
    apply_landslide(hm, 0, 20, 0, 20, 1.0, 50.0, 0.05)
    assert sum(y for _, y in hm) == pytest.approx(total)
    assert [x for x, _ in hm] == [float(i) for i in range(20)]


def test_landslide_ignores_small_differences():
    hm = [(0.0, 5.0), (1.0, 5.5), (2.0, 5.0)]
    apply_landslide(hm, 0, 3, 0, 3, 1.0, 50.0, 0.1)
    assert hm == [(0.0, 5.0), (1.0, 5.5), (2.0, 5.0)]


def test_landslide_respects_range():
    hm = [(0.0, 0.0), (1.0, 10.0), (2.0, 0.0), (3.0, 10.0)]
    apply_landslide(hm, 0, 2, 0, 10, 1.0, 50.0, 0.1)
    assert hm[2] == (2.0, 0.0)
    assert hm[3] == (3.0, 10.0)


def test_trajectory_stops_below_ground():
    hm = [(-1000.0, -1000.0)]
    points, hit = trajectory((0.0, 10.0, 0.0), (100.0, 300.0, 0.0), (0.0, 1000.0, 0.0), hm, 28.0, 0.1)
    assert hit is None
    assert points[0] == pytest.approx([0.0, 10.0, 0.0])
    assert all(p[1] >= 0 for p in points)
    assert len(points) > 1


def test_trajectory_hits_terrain_at_start():
    hm = [(0.0, 10.0)]
    points, hit = trajectory((0.0, 10.0, 0.0), (100.0, 300.0, 0.0), (0.0, 1000.0, 0.0), hm, 28.0, 0.1)
    assert points == []
    assert hit == pytest.approx([0.0, 10.0, 0.0])


def test_trajectory_hit_is_near_terrain_point():
    hm = [(float(x), 0.0) for x in range(0, 2000, 2)]
    points, hit = trajectory((0.0, 50.0, 0.0), (300.0, 300.0, 0.0), (0.0, 1000.0, 0.0), hm, 28.0, 0.1)
    assert hit is not None
    assert abs(hit[1]) < 5.0
    assert all(p[1] >= 5.0 for p in points)