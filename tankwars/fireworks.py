"""Expanding ring of rays shown when the game is won."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from tankwars.transform2d import rotate, scale, translate

__all__ = ["Fireworks"]


class Fireworks:
    """A burst of rays that grows in steps and then vanishes."""

    def __init__(
        self,
        position: Sequence[float],
        propagation_factor: float,
        propagation_number: int,
        propagation_cd: float,
        scale: float,
        rays_number: int,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.propagation_factor = propagation_factor
        self.propagation_number = int(propagation_number)
        self.propagation_cd = propagation_cd
        self.propagation_timer = 0.0
        self.scale = scale
        self.rays_number = rays_number
        self.is_dead = False

    def fire(self, delta_time: float) -> list[np.ndarray]:
        """Advance the burst and return one model matrix per ray.

        An empty list is returned once the burst has died out.
        """
        self.propagation_timer += delta_time
        if self.propagation_timer >= self.propagation_cd:
            self.propagation_timer = 0.0
            self.propagation_number -= 1
            self.propagation_factor *= 2.0
            self.scale *= 1.2

        if self.propagation_number == -1:
            self.is_dead = True
            return []

        x, y = self.position[0], self.position[1]
        rays = []
        for i in range(1, self.rays_number + 1):
            angle = 2.0 * math.pi * i / self.rays_number
            rays.append(
                translate(
                    x + self.propagation_factor * math.cos(angle),
                    y + self.propagation_factor * math.sin(angle),
                )
                @ rotate(angle)
                @ scale(self.scale, 4.0)
            )
        return rays