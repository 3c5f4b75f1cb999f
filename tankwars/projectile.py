"""Shells fired by tanks: flight, terrain cratering and hits."""

from __future__ import annotations

import math
from typing import Any, MutableSequence, Sequence

import numpy as np

from tankwars.transform2d import scale, translate

__all__ = ["Projectile"]


class Projectile:
    """A shell moving under gravity."""

    SPEED = 600.0
    RADIUS = 3.0
    EXPLOSION_RADIUS = 50.0
    DAMAGE = 10

    def __init__(self, position: Sequence[float], velocity: Sequence[float]) -> None:
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)

    def model_matrix(self) -> np.ndarray:
        """Matrix placing a unit circle at the shell's position and size."""
        return translate(self.position[0], self.position[1]) @ scale(self.RADIUS, self.RADIUS)

    def _ground_height(self, height_map, start: int, stop: int) -> float | None:
        x = self.position[0]
        for (ax, ay), (bx, by) in zip(height_map[start:stop], height_map[start + 1 : stop + 1]):
            if ax <= x <= bx:
                t = (x - ax) / (bx - ax)
                return ay * (1 - t) + by * t
        return None

    def _crater(self, height_map: MutableSequence, start: int, stop: int) -> None:
        px, py = self.position[0], self.position[1]
        r = self.EXPLOSION_RADIUS
        for i in range(start, stop):
            ax, ay = height_map[i]
            if px - r < ax < px + r:
                dx = ax - px
                new_y = py - math.sqrt(r * r - dx * dx)
                if new_y < ay:
                    height_map[i] = (ax, new_y)

    def _hits(self, tank: Any) -> bool:
        dx = self.position[0] - tank.position[0]
        dy = self.position[1] - tank.position[1]
        return not tank.is_dead and math.hypot(dx, dy) < self.RADIUS + tank.COLLIDER_RADIUS

    def update(
        self,
        height_map: MutableSequence,
        visible_chunks: int,
        first_chunk: int,
        last_chunk: int,
        excess_chunks: int,
        tank1: Any,
        tank2: Any,
        enemies: Sequence[Any],
        gravity: Sequence[float],
        resolution: Sequence[int],
        delta_time: float,
    ) -> bool:
        """Advance one step; return True when the shell hit terrain or a tank.

        A shell hitting the terrain digs a crater into ``height_map``; a shell
        hitting a living tank damages it. Leaving the map returns False.
        """
        first_x = height_map[first_chunk][0]
        last_x = first_x + resolution[0]

        self.position = self.position + self.velocity * delta_time
        self.velocity = self.velocity - np.asarray(gravity, dtype=float) * delta_time

        start = max(0, first_chunk - excess_chunks)
        stop = min(visible_chunks + first_chunk + excess_chunks, last_chunk)
        ground = self._ground_height(height_map, start, stop - 1)

        x, y = self.position[0], self.position[1]
        if y < 0 or x < first_x - excess_chunks or x > last_x + excess_chunks:
            return False

        if ground is not None and y - ground < 1.0:
            self._crater(height_map, start, stop)
            return True

        for tank in (tank1, tank2, *enemies):
            if self._hits(tank):
                tank.take_damage(self.DAMAGE)
                return True
        return False