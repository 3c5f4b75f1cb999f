"""Computer-controlled tank that roams, chases and shoots at the players."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import MutableSequence, Sequence

import numpy as np

from tankwars.projectile import Projectile
from tankwars.tank import Tank

__all__ = ["Enemy", "IdleAction"]


class IdleAction(IntEnum):
    """What an idle enemy does until its next decision."""

    NOTHING = -1
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    AIM_LEFT = 2
    AIM_RIGHT = 3


class Enemy(Tank):
    """A tank driven by a small state machine: idle, chase or attack."""

    def __init__(
        self,
        position: Sequence[float],
        chunk_index: int,
        speed: float,
        cannon_angle_step: float,
        max_health: int,
        shoot_cd: float,
        attack_range: float,
        detect_range: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(position, chunk_index, speed, cannon_angle_step, max_health, shoot_cd)
        self.active = False
        self.attack_range = attack_range
        self.detect_range = detect_range
        self.aim_left = True
        self.action = IdleAction.NOTHING
        self.action_cd = 0.0
        self.action_timer = 0.0
        self.rng = rng if rng is not None else random.Random()

    def _nearest_target(self, targets: Sequence[Sequence[float]]) -> tuple[np.ndarray, float]:
        x = self.position[0]
        target = np.asarray(targets[0], dtype=float)
        min_distance = self.detect_range
        for candidate in targets:
            distance = abs(candidate[0] - x)
            if distance < min_distance:
                min_distance = distance
                target = np.asarray(candidate, dtype=float)
        return target, min_distance

    def _move_left(self, new_x: float, height_map, first_chunk: int) -> None:
        self.position[0] = new_x
        for i in range(self.chunk_index, first_chunk - 1, -1):
            if height_map[i][0] <= new_x:
                self.chunk_index = i
                break

    def _move_right(self, new_x: float, height_map, first_chunk: int, visible_chunks: int) -> None:
        self.position[0] = new_x
        for i in range(self.chunk_index + 1, visible_chunks + first_chunk):
            if height_map[i][0] > new_x:
                self.chunk_index = i - 1
                break

    def _choose_idle_action(self) -> None:
        if self.action < IdleAction.AIM_LEFT and self.action != IdleAction.NOTHING:
            self.action = IdleAction.NOTHING
        else:
            self.action = IdleAction(self.rng.randrange(4))
        self.action_cd = 1.0 + self.rng.randrange(32) / 10.0
        self.action_timer = 0.0

    def update_ai(
        self,
        targets: Sequence[Sequence[float]],
        height_map: Sequence[Sequence[float]],
        visible_chunks: int,
        first_chunk: int,
        last_chunk: int,
        excess_chunks: int,
        projectiles: MutableSequence[Projectile],
        pool: MutableSequence[Projectile],
        delta_time: float,
    ) -> None:
        """Run one step of the enemy's behaviour.

        Nothing happens while the enemy is inactive, dead, or outside the
        visible part of the map.
        """
        target, distance = self._nearest_target(targets)
        x = self.position[0]

        if (
            not self.active
            or self.is_dead
            or x < height_map[first_chunk][0]
            or x > height_map[first_chunk + visible_chunks][0]
        ):
            return

        self.shoot_timer += delta_time
        self.action_timer += delta_time

        if self.attack_range < distance < self.detect_range:
            step = self.speed * delta_time
            if target[0] < x:
                self._move_left(x - step, height_map, first_chunk)
            else:
                self._move_right(x + step, height_map, first_chunk, visible_chunks)
        elif distance < self.attack_range:
            if np.linalg.norm(target - self.intersection) < self.COLLIDER_RADIUS:
                if self.shoot_timer >= self.shoot_cd:
                    self.fire_projectile(Projectile.SPEED, projectiles, pool)
                    self.shoot_timer = 0.0
            elif not self.update_cannon_angle(self.aim_left, delta_time):
                self.aim_left = not self.aim_left
        else:
            if self.action_timer >= self.action_cd:
                self._choose_idle_action()
            step = self.speed / 2.0 * delta_time
            if self.action == IdleAction.MOVE_LEFT:
                new_x = x - step
                if new_x >= 0:
                    self._move_left(new_x, height_map, first_chunk)
            elif self.action == IdleAction.MOVE_RIGHT:
                new_x = x + step
                if new_x <= height_map[last_chunk][0] - excess_chunks:
                    self._move_right(new_x, height_map, first_chunk, visible_chunks)
            elif self.action == IdleAction.AIM_LEFT:
                self.update_cannon_angle(True, delta_time)
            elif self.action == IdleAction.AIM_RIGHT:
                self.update_cannon_angle(False, delta_time)