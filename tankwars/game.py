"""The artillery game: two players, roaming enemies and a destructible terrain.

Rendering is left to the caller: every frame :meth:`Game.update` returns the
meshes to draw, each with its model matrix.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

from tankwars.enemy import Enemy
from tankwars.fireworks import Fireworks
from tankwars.projectile import Projectile
from tankwars.shapes import (
    MeshData,
    create_circle,
    create_hanging_square,
    create_line,
    create_tank,
)
from tankwars.tank import Tank
from tankwars.terrain import apply_landslide, build_height_map, trajectory
from tankwars.transform2d import rotate, scale, shear, translate

__all__ = ["Key", "DrawCommand", "GameConfig", "Game"]

_FIREWORK_COLORS = ("lineRed", "lineBlue", "lineGreen")
_CAMERA_DAMPING = 0.05
_EPSILON = 1e-6


class Key(Enum):
    """Keys the game reacts to."""

    A = "a"
    D = "d"
    W = "w"
    S = "s"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SPACE = "space"
    ENTER = "enter"
    F = "f"
    P = "p"


@dataclass(frozen=True, eq=False)
class DrawCommand:
    """A mesh to draw with the given 3x3 model matrix."""

    mesh: str
    matrix: np.ndarray


@dataclass
class GameConfig:
    """Tunable parameters of a game."""

    max_visible_x: float = 28.0
    max_visible_y: float = 12.0
    step: float = 0.1
    screens: int = 4
    excess_chunks: int = 40
    gravity: tuple[float, float, float] = (0.0, 1000.0, 0.0)
    max_height_distance: float = 1.0
    transfer_value: float = 50.0
    health_bar_height: float = 20.0
    health_bar_width: float = 60.0
    player_speed: float = 100.0
    enemy_speed: float = 50.0
    player_shoot_cd: float = 0.5
    enemy_shoot_cd: float = 1.0
    player_cannon_angle_step: float = 60.0
    enemy_cannon_angle_step: float = 60.0
    player_max_health: int = 100
    enemy_max_health: int = 100
    enemy_attack_range: float = 300.0
    enemy_detect_range: float = 500.0
    enemies_number: int = 5

    @property
    def max_map_x(self) -> float:
        """Logical width of the whole map."""
        return self.max_visible_x * self.screens


def _build_meshes() -> dict[str, MeshData]:
    corner = (0.0, 0.0, 0.0)
    track = (0.31, 0.188, 0.039)
    meshes = [
        create_hanging_square("terrain", corner, 1.0, (0.059, 0.529, 0.075), True),
        create_hanging_square("cannon", corner, 1.0, (0.11, 0.122, 0.11), True),
        create_tank("tank1", corner, Tank.WIDTH, Tank.HEIGHT, Tank.RADIUS,
                    track, (0.871, 0.208, 0.075), True),
        create_tank("tank2", corner, Tank.WIDTH, Tank.HEIGHT, Tank.RADIUS,
                    track, (0.071, 0.184, 0.922), True),
        create_tank("enemy", corner, Tank.WIDTH, Tank.HEIGHT, Tank.RADIUS,
                    track, (0.553, 0.722, 0.184), True),
        create_circle("circle", corner, 1.0, (0.0, 0.0, 0.0), True),
        create_hanging_square("barBorder", corner, 1.0, (1.0, 1.0, 1.0), False),
        create_hanging_square("barFill", corner, 1.0, (1.0, 1.0, 1.0), True),
        create_line("line", (1.0, 1.0, 1.0)),
        create_line("lineRed", (1.0, 0.0, 0.0)),
        create_line("lineBlue", (0.0, 0.0, 1.0)),
        create_line("lineGreen", (0.0, 1.0, 0.0)),
    ]
    return {mesh.name: mesh for mesh in meshes}


class Game:
    """State of a running game."""

    def __init__(
        self,
        resolution: Sequence[int] = (1280, 720),
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.resolution = (int(resolution[0]), int(resolution[1]))
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random()
        cfg = self.config

        self.visible_chunks = int(round(cfg.max_visible_x / cfg.step))
        self.last_chunk = int(round(cfg.max_map_x / cfg.step)) - 1
        self.first_chunks = [0, 0]
        self.gravity = np.array(cfg.gravity, dtype=float)

        self.height_map = build_height_map(
            self.resolution, cfg.max_visible_x, cfg.max_visible_y, cfg.max_map_x, cfg.step
        )

        self.tank1 = self._player_tank(int(round(1.0 / cfg.step)))
        self.tank2 = self._player_tank(int(round(2.0 / cfg.step)))

        self.enemies: list[Enemy] = []
        for i in range(1, cfg.enemies_number + 1):
            chunk = int(
                (cfg.max_map_x - cfg.excess_chunks * cfg.step) * i
                / (cfg.enemies_number * cfg.step)
                + _EPSILON
            )
            enemy = Enemy(
                (self.height_map[chunk][0], 0.0, 0.0),
                chunk,
                cfg.enemy_speed,
                cfg.enemy_cannon_angle_step,
                cfg.enemy_max_health,
                cfg.enemy_shoot_cd,
                cfg.enemy_attack_range,
                cfg.enemy_detect_range,
                self.rng,
            )
            enemy.active = True
            self.enemies.append(enemy)

        self.projectiles: list[Projectile] = []
        self.pool: list[Projectile] = []
        self.fireworks: list[Fireworks] = []
        self.firework_timer = 0.0
        self.firework_cd = 0.0

        self.camera_position = np.array([0.0, 0.0, 50.0])
        self.camera_focus = 1
        self.game_over = False
        self.meshes = _build_meshes()

    def _player_tank(self, chunk: int) -> Tank:
        cfg = self.config
        return Tank(
            (self.height_map[chunk][0], 0.0, 0.0),
            chunk,
            cfg.player_speed,
            cfg.player_cannon_angle_step,
            cfg.player_max_health,
            cfg.player_shoot_cd,
        )

    def first_chunk_index(self) -> int:
        """Index of the first visible chunk for the player the camera follows."""
        return self.first_chunks[self.camera_focus - 1]

    # Drawing helpers

    def _tank_name(self, tank: Tank) -> str:
        if tank is self.tank1:
            return "tank1"
        if tank is self.tank2:
            return "tank2"
        return "enemy"

    def _draw_tank(self, tank: Tank) -> list[DrawCommand]:
        if tank.is_dead:
            return []
        cfg = self.config
        body, cannon = tank.build(self.height_map)
        commands = [
            DrawCommand(self._tank_name(tank), body),
            DrawCommand("cannon", cannon),
        ]

        x, y = tank.position[0], tank.position[1]
        bar = translate(
            x - cfg.health_bar_width / 2.0, y + 3.0 * Tank.HEIGHT
        ) @ scale(cfg.health_bar_width, cfg.health_bar_height)
        commands.append(DrawCommand("barBorder", bar))
        fill = bar @ scale(tank.current_health / tank.max_health, 1.0)
        commands.append(DrawCommand("barFill", fill))

        start, direction = tank.muzzle()
        points, hit = trajectory(
            start,
            direction * Projectile.SPEED,
            self.gravity,
            self.height_map,
            cfg.max_visible_x,
            cfg.step,
        )
        if hit is not None:
            tank.intersection = hit
        for p1, p2 in zip(points, points[1:]):
            dx, dy = p2[0] - p1[0], p2[1] - p1[1]
            matrix = (
                translate(p1[0], p1[1])
                @ rotate(math.atan2(dy, dx))
                @ scale(math.hypot(dx, dy), 1.0)
            )
            commands.append(DrawCommand("line", matrix))
        return commands

    def _draw_terrain(self) -> list[DrawCommand]:
        commands = []
        for (ax, ay), (bx, by) in zip(
            self.height_map[: self.last_chunk - 1], self.height_map[1 : self.last_chunk]
        ):
            matrix = (
                translate(ax, ay)
                @ shear((by - ay) / (bx - ax))
                @ scale(bx - ax, max(ay, by))
            )
            commands.append(DrawCommand("terrain", matrix))
        return commands

    # Frame update

    def _spawn_firework(self, first_chunk: int) -> None:
        rng = self.rng
        res_x, res_y = self.resolution
        max_x, min_x = res_x * 3 // 4, res_x // 4
        pos_x = self.height_map[first_chunk][0] + min_x + rng.randrange(max_x - min_x + 1)
        min_y, max_y = res_y // 2, res_y * 3 // 4
        pos_y = min_y + rng.randrange(max_y - min_y + 1)
        self.fireworks.append(
            Fireworks(
                (pos_x, pos_y, 0.0),
                1.0 + rng.randrange(40) / 10.0,
                3 + rng.randrange(3),
                0.1 + rng.randrange(2) / 20.0,
                4.0 + rng.randrange(70) / 10.0,
                20 + rng.randrange(30),
            )
        )

    def _update_fireworks(self, first_chunk: int, delta_time: float) -> list[DrawCommand]:
        self.firework_timer += delta_time
        if self.firework_timer >= self.firework_cd:
            self.firework_timer = 0.0
            self.firework_cd = 0.1 + self.rng.randrange(3) / 10.0
            self._spawn_firework(first_chunk)

        commands = []
        alive = []
        for firework in self.fireworks:
            rays = firework.fire(delta_time)
            if firework.is_dead:
                continue
            alive.append(firework)
            commands.extend(
                DrawCommand(_FIREWORK_COLORS[self.rng.randrange(3)], ray) for ray in rays
            )
        self.fireworks = alive
        return commands

    def _update_enemies(self, first_chunk: int, delta_time: float) -> list[DrawCommand]:
        commands = []
        targets = [self.tank1.position.copy(), self.tank2.position.copy()]
        left = self.height_map[first_chunk][0]
        right = self.height_map[first_chunk + self.visible_chunks][0]
        for enemy in self.enemies:
            if left <= enemy.position[0] <= right:
                enemy.update_ai(
                    targets,
                    self.height_map,
                    self.visible_chunks,
                    first_chunk,
                    self.last_chunk,
                    self.config.excess_chunks,
                    self.projectiles,
                    self.pool,
                    delta_time,
                )
                commands.extend(self._draw_tank(enemy))
        if all(enemy.is_dead for enemy in self.enemies):
            self.game_over = True
        return commands

    def _update_projectiles(self, first_chunk: int, delta_time: float) -> list[DrawCommand]:
        commands = []
        flying = []
        for projectile in self.projectiles:
            commands.append(DrawCommand("circle", projectile.model_matrix()))
            landed = projectile.update(
                self.height_map,
                self.visible_chunks,
                first_chunk,
                self.last_chunk,
                self.config.excess_chunks,
                self.tank1,
                self.tank2,
                self.enemies,
                self.gravity,
                self.resolution,
                delta_time,
            )
            if landed:
                self.pool.append(projectile)
            else:
                flying.append(projectile)
        self.projectiles = flying
        return commands

    def update(self, delta_time: float) -> list[DrawCommand]:
        """Advance the game by ``delta_time`` seconds and return what to draw."""
        cfg = self.config
        self.tank1.shoot_timer += delta_time
        self.tank2.shoot_timer += delta_time

        if self.tank1.is_dead:
            self.camera_focus = 2
        elif self.tank2.is_dead:
            self.camera_focus = 1
        first_chunk = self.first_chunk_index()

        commands: list[DrawCommand] = []
        if self.game_over:
            commands += self._update_fireworks(first_chunk, delta_time)

        apply_landslide(
            self.height_map,
            first_chunk,
            self.visible_chunks,
            cfg.excess_chunks,
            self.last_chunk,
            cfg.max_height_distance,
            cfg.transfer_value,
            delta_time,
        )
        commands += self._draw_terrain()
        commands += self._draw_tank(self.tank1)
        commands += self._draw_tank(self.tank2)

        if not self.game_over:
            commands += self._update_enemies(first_chunk, delta_time)

        commands += self._update_projectiles(first_chunk, delta_time)

        target = np.array([self.height_map[first_chunk][0], 0.0, 50.0])
        self.camera_position = self.camera_position + (target - self.camera_position) * _CAMERA_DAMPING
        return commands

    # Input

    def _drive_right(self, tank: Tank, player: int, delta_time: float) -> None:
        hm = self.height_map
        excess = self.config.excess_chunks
        res_x = self.resolution[0]
        current = tank.chunk_index
        first = self.first_chunks[player]
        first_x = hm[first][0]
        last_x = hm[self.last_chunk][0]
        new_x = tank.position[0] + tank.speed * delta_time
        if new_x > last_x - excess:
            return

        tank.position[0] = new_x
        end = self.visible_chunks + first
        found = next(
            (i for i in range(current + 1, end) if hm[i][0] > new_x),
            max(current + 1, end),
        )
        if found < end:
            tank.chunk_index = found - 1

        if res_x / 2.0 + first_x < new_x < last_x - res_x / 2.0 - excess:
            self.first_chunks[player] += found - 1 - current

    def _drive_left(self, tank: Tank, player: int, delta_time: float) -> None:
        hm = self.height_map
        res_x = self.resolution[0]
        current = tank.chunk_index
        first = self.first_chunks[player]
        first_x = hm[first][0]
        new_x = tank.position[0] - tank.speed * delta_time
        if new_x < 0:
            return

        tank.position[0] = new_x
        found = next(
            (i for i in range(current, first - 1, -1) if hm[i][0] <= new_x),
            min(current, first - 1),
        )
        if found >= first:
            tank.chunk_index = found

        if res_x / 2.0 < new_x < res_x / 2.0 + first_x:
            self.first_chunks[player] += found - current

    def handle_input(self, keys: Iterable[Key], delta_time: float) -> None:
        """Apply the keys held during the last ``delta_time`` seconds."""
        held = set(keys)
        controls = (
            (self.tank1, 0, Key.D, Key.A, Key.W, Key.S),
            (self.tank2, 1, Key.RIGHT, Key.LEFT, Key.UP, Key.DOWN),
        )
        for tank, player, right, left, raise_key, lower_key in controls:
            if right in held:
                self._drive_right(tank, player, delta_time)
            if left in held:
                self._drive_left(tank, player, delta_time)
            if raise_key in held:
                tank.update_cannon_angle(False, delta_time)
            if lower_key in held:
                tank.update_cannon_angle(True, delta_time)

    def _try_fire(self, tank: Tank) -> None:
        if not tank.is_dead and tank.shoot_timer >= tank.shoot_cd:
            tank.shoot_timer = 0.0
            tank.fire_projectile(Projectile.SPEED, self.projectiles, self.pool)

    def key_press(self, key: Key) -> None:
        """React to a single key press."""
        if key is Key.SPACE:
            self._try_fire(self.tank1)
        elif key is Key.ENTER:
            self._try_fire(self.tank2)
        elif key is Key.F:
            self.camera_focus = 2 if self.camera_focus == 1 else 1
        elif key is Key.P:
            self.fireworks.append(Fireworks((200.0, 200.0, 0.0), 6.0, 4, 0.1, 10.0, 30))