import numpy as np
import pytest

from tankwars import transform2d as t2
from tankwars.viewport import (
    LogicSpace,
    ViewportSpace,
    uniform_visualization_transform,
    visualization_transform,
)


def test_default_spaces():
    assert LogicSpace() == LogicSpace(0.0, 0.0, 1.0, 1.0)
    assert ViewportSpace() == ViewportSpace(0, 0, 1, 1)


def test_visualization_maps_corners_to_corners():
    logic = LogicSpace(1.0, 2.0, 4.0, 4.0)
    view = ViewportSpace(100, 50, 640, 360)
    m = visualization_transform(logic, view)
    assert t2.apply(m, logic.x, logic.y) == pytest.approx((view.x, view.y))
    assert t2.apply(m, logic.x + logic.width, logic.y + logic.height) == pytest.approx(
        (view.x + view.width, view.y + view.height)
    )


def test_identity_when_spaces_match():
    m = visualization_transform(LogicSpace(3.0, 4.0, 10.0, 20.0), ViewportSpace(3, 4, 10, 20))
    assert np.allclose(m, np.eye(3))


def test_uniform_uses_equal_scales():
    m = uniform_visualization_transform(LogicSpace(0.0, 0.0, 4.0, 4.0), ViewportSpace(0, 0, 640, 360))
    assert m[0, 0] == pytest.approx(m[1, 1])
    assert m[0, 0] == pytest.approx(min(640 / 4.0, 360 / 4.0))


def test_uniform_centres_logic_space():
    logic = LogicSpace(-1.0, 2.0, 4.0, 4.0)
    view = ViewportSpace(640, 0, 640, 720)
    m = uniform_visualization_transform(logic, view)
    centre = t2.apply(m, logic.x + logic.width / 2, logic.y + logic.height / 2)
    assert centre == pytest.approx((view.x + view.width / 2, view.y + view.height / 2))


def test_uniform_fits_inside_viewport():
    logic = LogicSpace(0.0, 0.0, 4.0, 2.0)
    view = ViewportSpace(10, 20, 300, 400)
    m = uniform_visualization_transform(logic, view)
    x0, y0 = t2.apply(m, logic.x, logic.y)
    x1, y1 = t2.apply(m, logic.x + logic.width, logic.y + logic.height)
    assert view.x <= x0 <= x1 <= view.x + view.width
    assert view.y <= y0 <= y1 <= view.y + view.height


def test_uniform_equals_plain_for_matching_aspect():
    logic = LogicSpace(1.0, 1.0, 2.0, 1.0)
    view = ViewportSpace(0, 0, 800, 400)
    assert np.allclose(
        uniform_visualization_transform(logic, view), visualization_transform(logic, view)
    )


def test_zero_width_logic_space_raises():
    with pytest.raises(ZeroDivisionError):
        visualization_transform(LogicSpace(0.0, 0.0, 0.0, 1.0), ViewportSpace(0, 0, 10, 10))