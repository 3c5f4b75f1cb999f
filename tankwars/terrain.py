"""Terrain generation, landslides and shell trajectory preview."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

import numpy as np

__all__ = [
    "terrain_height",
    "projectile_position",
    "build_height_map",
    "apply_landslide",
    "trajectory",
]

_HIT_DISTANCE_SQUARED = 25.0


def terrain_height(x: float) -> float:
    """Height of the terrain at logical coordinate ``x``."""
    return (
        2.5
        + 1.2 * math.sin(0.2 * math.sqrt(x))
        + 1.0 * math.sin(0.3 * x + 1.5)
        + 0.6 * math.sin(0.8 * x + 0.5)
        + 0.2 * math.sin(2.0 * x)
    )


def projectile_position(
    velocity: Sequence[float],
    gravity: Sequence[float],
    position: Sequence[float],
    t: float,
) -> np.ndarray:
    """Position of a shell at time ``t`` under constant ``gravity``."""
    v = np.asarray(velocity, dtype=float)
    g = np.asarray(gravity, dtype=float)
    return np.asarray(position, dtype=float) + v * t - 0.5 * g * t * t


def build_height_map(
    resolution: Sequence[int],
    max_visible_x: float,
    max_visible_y: float,
    max_map_x: float,
    step: float,
) -> list[tuple[float, float]]:
    """Sample the terrain from 0 to ``max_map_x`` in screen coordinates.

    One visible screen spans ``max_visible_x`` by ``max_visible_y`` logical units.
    """
    scale_x = resolution[0] / max_visible_x
    scale_y = resolution[1] / max_visible_y
    count = int(math.floor(max_map_x / step + 1e-6)) + 1
    return [
        (x * scale_x, terrain_height(x) * scale_y)
        for x in (i * step for i in range(count))
    ]


def apply_landslide(
    height_map: MutableSequence[tuple[float, float]],
    first_chunk: int,
    visible_chunks: int,
    excess_chunks: int,
    last_chunk: int,
    max_height_distance: float,
    transfer_value: float,
    delta_time: float,
) -> None:
    """Move earth between neighbouring points that differ too much in height."""
    start = max(0, first_chunk - excess_chunks)
    stop = min(visible_chunks + first_chunk + excess_chunks, last_chunk) - 1
    for i in range(start, stop):
        ax, ay = height_map[i]
        bx, by = height_map[i + 1]
        difference = abs(ay - by)
        if difference > max_height_distance:
            transfer = min(transfer_value, difference * 3.0) * delta_time
            if ay < by:
                ay, by = ay + transfer, by - transfer
            else:
                ay, by = ay - transfer, by + transfer
            height_map[i] = (ax, ay)
            height_map[i + 1] = (bx, by)


def trajectory(
    start: Sequence[float],
    velocity: Sequence[float],
    gravity: Sequence[float],
    height_map: Sequence[Sequence[float]],
    max_visible_x: float,
    step: float,
) -> tuple[list[np.ndarray], np.ndarray | None]:
    """Predict a shell's path.

    Returns the points of the path and the point where it meets the terrain,
    or None when it leaves the map first.
    """
    terrain = np.asarray(height_map, dtype=float).reshape(-1, 2)
    points: list[np.ndarray] = []
    k = 0
    while k * step < max_visible_x:
        position = projectile_position(velocity, gravity, start, k * step / 10.0)
        k += 1
        offsets = terrain - position[:2]
        if np.any(np.einsum("ij,ij->i", offsets, offsets) < _HIT_DISTANCE_SQUARED):
            return points, position
        if position[1] < 0:
            break
        points.append(position)
    return points, None