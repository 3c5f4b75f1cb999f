"""Player-controlled tank: placement on the terrain, aiming and firing."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

import numpy as np

from tankwars.projectile import Projectile
from tankwars.transform2d import rotate, scale, translate

__all__ = ["Tank"]


class Tank:
    """A tank that sits on a chunk of the height map."""

    HEIGHT = 30.0
    WIDTH = 40.0
    RADIUS = 15.0
    CANNON_LENGTH = 30.0
    CANNON_THICKNESS = 4.0
    COLLIDER_RADIUS = 20.0

    def __init__(
        self,
        position: Sequence[float],
        chunk_index: int,
        speed: float,
        cannon_angle_step: float,
        max_health: int,
        shoot_cd: float,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.chunk_index = chunk_index
        self.speed = speed
        self.angle = 0.0
        self.cannon_angle = 90.0
        self.cannon_angle_step = cannon_angle_step
        self.cannon_offset = np.array([0.0, 3.0 * self.HEIGHT / 5.0, 0.0])
        self.max_health = max_health
        self.current_health = max_health
        self.shoot_cd = shoot_cd
        self.shoot_timer = 0.0
        self.is_dead = False
        self.intersection = np.zeros(3)

    def build(self, height_map: Sequence[Sequence[float]]) -> tuple[np.ndarray, np.ndarray]:
        """Settle the tank on the terrain; return the body and cannon matrices."""
        ax, ay = height_map[self.chunk_index]
        bx, by = height_map[self.chunk_index + 1]
        ground_angle = math.atan2(by - ay, bx - ax)
        t = (self.position[0] - ax) / (bx - ax)
        self.position[1] = ay + t * (by - ay)

        if self.position[1] < 0.0:
            self.position[1] = 0.0
            self.angle = 0.0
            ground_angle = 0.0
        else:
            self.angle = math.degrees(ground_angle)

        x, y = self.position[0], self.position[1]
        body = translate(x, y) @ rotate(ground_angle)

        self.cannon_offset[0] = -3.0 * self.HEIGHT / 5.0 * math.sin(ground_angle)
        self.cannon_offset[1] = (
            3.0 * self.HEIGHT / 5.0 * math.cos(ground_angle) + 2.0 * self.HEIGHT / 15.0
        )
        half = self.CANNON_THICKNESS / 2.0
        cannon = (
            translate(x + self.cannon_offset[0], y + self.cannon_offset[1])
            @ translate(0.0, -half)
            @ rotate(math.radians(self.cannon_angle))
            @ translate(0.0, half)
            @ scale(self.CANNON_LENGTH, self.CANNON_THICKNESS)
        )
        return body, cannon

    def muzzle(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the barrel tip and the unit firing direction."""
        tilt = math.radians(self.cannon_angle - 90.0)
        tip = np.array(
            [
                self.position[0] + self.cannon_offset[0] - self.CANNON_LENGTH * math.sin(tilt),
                self.position[1] + self.cannon_offset[1] + self.CANNON_LENGTH * math.cos(tilt),
                0.0,
            ]
        )
        aim = math.radians(self.cannon_angle)
        direction = np.array([math.cos(aim), math.sin(aim), 0.0])
        return tip, direction

    def fire_projectile(
        self,
        projectile_speed: float,
        projectiles: MutableSequence[Projectile],
        pool: MutableSequence[Projectile],
    ) -> Projectile:
        """Launch a shell, reusing one from ``pool`` when available."""
        start, direction = self.muzzle()
        velocity = direction * projectile_speed
        if pool:
            projectile = pool.pop()
            projectile.position = start
            projectile.velocity = velocity
        else:
            projectile = Projectile(start, velocity)
        projectiles.append(projectile)
        return projectile

    def update_cannon_angle(self, left: bool, delta_time: float) -> bool:
        """Turn the cannon; return False when it would leave its 180° arc."""
        if left:
            new_angle = self.cannon_angle - self.cannon_angle_step * delta_time
            if new_angle < self.angle:
                return False
        else:
            new_angle = self.cannon_angle + self.cannon_angle_step * delta_time
            if new_angle > self.angle + 180.0:
                return False
        self.cannon_angle = new_angle
        return True

    def take_damage(self, damage: int) -> None:
        """Lose health; the tank dies at zero or below."""
        self.current_health -= damage
        if self.current_health <= 0:
            self.is_dead = True