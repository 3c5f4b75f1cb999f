"""Mapping between a logical 2D window and a screen viewport."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    "LogicSpace",
    "ViewportSpace",
    "visualization_transform",
    "uniform_visualization_transform",
]


@dataclass
class LogicSpace:
    """Rectangle in world (logic) coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0


@dataclass
class ViewportSpace:
    """Rectangle in screen pixels."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1


def _matrix(sx: float, sy: float, tx: float, ty: float) -> np.ndarray:
    return np.array(
        [
            [sx, 0.0, tx],
            [0.0, sy, ty],
            [0.0, 0.0, 1.0],
        ]
    )


def visualization_transform(
    logic_space: LogicSpace, view_space: ViewportSpace
) -> np.ndarray:
    """Return the matrix stretching ``logic_space`` onto ``view_space``."""
    sx = view_space.width / logic_space.width
    sy = view_space.height / logic_space.height
    tx = view_space.x - sx * logic_space.x
    ty = view_space.y - sy * logic_space.y
    return _matrix(sx, sy, tx, ty)


def uniform_visualization_transform(
    logic_space: LogicSpace, view_space: ViewportSpace
) -> np.ndarray:
    """Return the matrix fitting ``logic_space`` into ``view_space``.

    Both axes use the smaller scale factor and the result is centred.
    """
    sx = view_space.width / logic_space.width
    sy = view_space.height / logic_space.height
    smin = min(sx, sy)
    tx = (
        view_space.x
        - smin * logic_space.x
        + (view_space.width - smin * logic_space.width) / 2
    )
    ty = (
        view_space.y
        - smin * logic_space.y
        + (view_space.height - smin * logic_space.height) / 2
    )
    return _matrix(smin, smin, tx, ty)