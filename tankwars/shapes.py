"""Vertex and index data for the flat shapes the game draws."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

__all__ = [
    "DrawMode",
    "Vertex",
    "MeshData",
    "create_square",
    "create_hanging_square",
    "create_tank",
    "create_circle",
    "create_line",
]

_CIRCLE_SEGMENTS = 64

Vec3 = tuple[float, float, float]


class DrawMode(Enum):
    """How the index list of a mesh is assembled into primitives."""

    TRIANGLES = "triangles"
    LINE_LOOP = "line_loop"
    LINES = "lines"


@dataclass(frozen=True)
class Vertex:
    """A coloured point."""

    position: Vec3
    color: Vec3


@dataclass
class MeshData:
    """A named mesh: vertices, indices into them, and a draw mode."""

    name: str
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    draw_mode: DrawMode = DrawMode.TRIANGLES


def _vec(v: Sequence[float]) -> Vec3:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


def _offset(base: Vec3, dx: float, dy: float) -> Vec3:
    return (base[0] + dx, base[1] + dy, base[2])


def create_square(
    name: str,
    corner: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = False,
) -> MeshData:
    """Square extending up and right from its bottom-left ``corner``."""
    c = _vec(corner)
    col = _vec(color)
    vertices = [
        Vertex(c, col),
        Vertex(_offset(c, length, 0.0), col),
        Vertex(_offset(c, length, length), col),
        Vertex(_offset(c, 0.0, length), col),
    ]
    indices = [0, 1, 2, 3]
    if fill:
        indices += [0, 2]
        mode = DrawMode.TRIANGLES
    else:
        mode = DrawMode.LINE_LOOP
    return MeshData(name, vertices, indices, mode)


def create_hanging_square(
    name: str,
    corner: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = False,
) -> MeshData:
    """Square extending down and right from its top-left ``corner``."""
    c = _vec(corner)
    col = _vec(color)
    vertices = [
        Vertex(c, col),
        Vertex(_offset(c, length, 0.0), col),
        Vertex(_offset(c, length, -length), col),
        Vertex(_offset(c, 0.0, -length), col),
    ]
    if fill:
        return MeshData(name, vertices, [0, 1, 2, 0, 2, 3], DrawMode.TRIANGLES)
    return MeshData(name, vertices, [0, 1, 2, 3], DrawMode.LINE_LOOP)


def create_tank(
    name: str,
    center: Sequence[float],
    length: float,
    height: float,
    radius: float,
    bottom_color: Sequence[float],
    top_color: Sequence[float],
    fill: bool = False,
) -> MeshData:
    """Tank body: two trapezoids topped by a half-disc turret.

    ``center`` is the middle of the bottom edge.
    """
    c = _vec(center)
    bottom = _vec(bottom_color)
    top = _vec(top_color)
    half = length / 2.0
    fifth = height / 5.0
    vertices = [
        Vertex(_offset(c, -half, 0.0), bottom),
        Vertex(_offset(c, half, 0.0), bottom),
        Vertex(_offset(c, half + fifth, fifth), bottom),
        Vertex(_offset(c, -half - fifth, fifth), bottom),
        Vertex(_offset(c, -half - 3 * fifth, fifth), top),
        Vertex(_offset(c, half + 3 * fifth, fifth), top),
        Vertex(_offset(c, -half - fifth, 3 * fifth), top),
        Vertex(_offset(c, half + fifth, 3 * fifth), top),
    ]
    if fill:
        indices = [0, 1, 2, 0, 2, 3, 4, 5, 6, 5, 7, 6]
        mode = DrawMode.TRIANGLES
    else:
        indices = list(range(8))
        mode = DrawMode.LINE_LOOP

    turret_y = c[1] + 3.0 * height / 5.0
    vertices.append(Vertex(_offset(c, 0.0, 3.0 * height / 5.0), top))
    step = math.pi / _CIRCLE_SEGMENTS
    for i in range(_CIRCLE_SEGMENTS):
        angle = i * step
        vertices.append(
            Vertex(
                (c[0] + radius * math.cos(angle), turret_y + radius * math.sin(angle), 0.0),
                top,
            )
        )
        if i > 0:
            indices += [0, i - 1, i]
    return MeshData(name, vertices, indices, mode)


def create_circle(
    name: str,
    center: Sequence[float],
    radius: float,
    color: Sequence[float],
    fill: bool = False,
) -> MeshData:
    """Circle of ``radius`` around ``center`` made of 64 points."""
    c = _vec(center)
    col = _vec(color)
    step = 2.0 * math.pi / _CIRCLE_SEGMENTS
    vertices: list[Vertex] = []
    indices: list[int] = []
    for i in range(_CIRCLE_SEGMENTS):
        angle = i * step
        vertices.append(
            Vertex((c[0] + radius * math.cos(angle), c[1] + radius * math.sin(angle), 0.0), col)
        )
        if i > 0:
            indices += [0, i - 1, i]
    mode = DrawMode.TRIANGLES if fill else DrawMode.LINE_LOOP
    return MeshData(name, vertices, indices, mode)


def create_line(name: str, color: Sequence[float]) -> MeshData:
    """Unit segment from the origin along the x axis."""
    col = _vec(color)
    vertices = [Vertex((0.0, 0.0, 0.0), col), Vertex((1.0, 0.0, 0.0), col)]
    return MeshData(name, vertices, [0, 1], DrawMode.LINES)