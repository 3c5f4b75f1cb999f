"""Homogeneous 3x3 matrices for 2D transformations.

Matrices act on column vectors ``(x, y, 1)``, so ``a @ b`` applies ``b``
first and ``a`` second.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = ["identity", "translate", "scale", "rotate", "shear", "apply"]


def identity() -> np.ndarray:
    """Return the 3x3 identity matrix."""
    return np.eye(3)


def translate(tx: float, ty: float) -> np.ndarray:
    """Return a matrix translating by ``(tx, ty)``."""
    return np.array(
        [
            [1.0, 0.0, tx],
            [0.0, 1.0, ty],
            [0.0, 0.0, 1.0],
        ]
    )


def scale(sx: float, sy: float) -> np.ndarray:
    """Return a matrix scaling by ``sx`` along x and ``sy`` along y."""
    return np.array(
        [
            [sx, 0.0, 0.0],
            [0.0, sy, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def rotate(radians: float) -> np.ndarray:
    """Return a counter-clockwise rotation by ``radians`` about the origin."""
    c = math.cos(radians)
    s = math.sin(radians)
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def shear(value: float) -> np.ndarray:
    """Return a vertical shear: ``y`` grows by ``value * x``, ``x`` is kept."""
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [value, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def apply(matrix: np.ndarray, x: float, y: float) -> tuple[float, float]:
    """Transform the point ``(x, y)`` by ``matrix``."""
    px, py, pw = np.asarray(matrix, dtype=float) @ np.array([x, y, 1.0])
    return float(px / pw), float(py / pw)