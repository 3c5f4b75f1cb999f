import math

import numpy as np
import pytest

from tankwars import transform3d as t3


def _point(m, p):
    return (m @ np.array([*p, 1.0]))[:3]


def test_translate_moves_point():
    assert np.allclose(_point(t3.translate(1.0, -2.0, 3.0), (4.0, 5.0, 6.0)), (5.0, 3.0, 9.0))


def test_translate_inverse():
    m = t3.translate(2.0, 3.0, 4.0) @ t3.translate(-2.0, -3.0, -4.0)
    assert np.allclose(m, np.eye(4))


def test_scale_multiplies_coordinates():
    assert np.allclose(_point(t3.scale(2.0, 3.0, 4.0), (1.0, 1.0, 1.0)), (2.0, 3.0, 4.0))


@pytest.mark.parametrize("rot", [t3.rotate_ox, t3.rotate_oy, t3.rotate_oz])
def test_rotations_are_orthonormal(rot):
    r = rot(0.83)[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "rot, axis",
    [
        (t3.rotate_ox, (1.0, 0.0, 0.0)),
        (t3.rotate_oy, (0.0, 1.0, 0.0)),
        (t3.rotate_oz, (0.0, 0.0, 1.0)),
    ],
)
def test_axis_rotations_match_general_rotation(rot, axis):
    assert np.allclose(rot(1.3), t3.rotation_about_axis(1.3, axis))


def test_axis_length_does_not_matter():
    assert np.allclose(
        t3.rotation_about_axis(0.6, (0.0, 0.0, 5.0)),
        t3.rotation_about_axis(0.6, (0.0, 0.0, 1.0)),
    )


def test_rotation_keeps_axis_fixed():
    axis = (1.0, 2.0, -1.0)
    assert np.allclose(_point(t3.rotation_about_axis(2.1, axis), axis), axis)


def test_rotation_inverse():
    axis = (0.3, -0.4, 0.9)
    m = t3.rotation_about_axis(0.9, axis) @ t3.rotation_about_axis(-0.9, axis)
    assert np.allclose(m, np.eye(4))


def test_rotate_oz_is_counter_clockwise():
    assert np.allclose(_point(t3.rotate_oz(math.pi / 2), (1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))


def test_look_at_moves_eye_to_origin():
    eye = (1.0, 2.0, 3.0)
    m = t3.look_at(eye, (4.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    assert np.allclose(_point(m, eye), (0.0, 0.0, 0.0))


def test_look_at_puts_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 0.0, -1.0])
    m = t3.look_at(eye, center, (0.0, 1.0, 0.0))
    p = _point(m, center)
    assert p[0] == pytest.approx(0.0, abs=1e-12)
    assert p[1] == pytest.approx(0.0, abs=1e-12)
    assert p[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_look_at_rotation_part_is_orthonormal():
    r = t3.look_at((0.0, 2.0, 5.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0))[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))