"""Homogeneous 4x4 matrices for 3D transformations and viewing.

Matrices act on column vectors ``(x, y, z, 1)``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = [
    "translate",
    "scale",
    "rotate_ox",
    "rotate_oy",
    "rotate_oz",
    "rotation_about_axis",
    "look_at",
]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def translate(tx: float, ty: float, tz: float) -> np.ndarray:
    """Return a matrix translating by ``(tx, ty, tz)``."""
    m = np.eye(4)
    m[:3, 3] = (tx, ty, tz)
    return m


def scale(sx: float, sy: float, sz: float) -> np.ndarray:
    """Return a matrix scaling along the three axes."""
    return np.diag([sx, sy, sz, 1.0])


def rotate_ox(radians: float) -> np.ndarray:
    """Return a rotation by ``radians`` about the x axis."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_oy(radians: float) -> np.ndarray:
    """Return a rotation by ``radians`` about the y axis."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_oz(radians: float) -> np.ndarray:
    """Return a rotation by ``radians`` about the z axis."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_about_axis(radians: float, axis: Sequence[float]) -> np.ndarray:
    """Return a rotation by ``radians`` about an arbitrary axis through the origin.

    The axis need not be of unit length; it is normalized first.
    """
    x, y, z = _normalize(np.asarray(axis, dtype=float))
    c, s = math.cos(radians), math.sin(radians)
    t = 1.0 - c
    m = np.eye(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` toward ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m