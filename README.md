# tankwars

This package is the simulation core of a two-player 2D artillery game. Two
player tanks and a squad of enemy tanks fight on terrain that scrolls and can
be destroyed. The package holds only the game logic. Each frame,
`Game.update` returns a list of `DrawCommand` objects. Each one holds a mesh
name and a 3×3 model matrix. `Game.meshes` holds the vertex and index data
for every mesh name, so any renderer can draw them.

## Installation

```
pip install .
```

## Modules

- `tankwars.transform2d` builds 3×3 homogeneous matrices for column vectors.
  It has `identity`, `translate`, `scale`, `rotate` and `shear`. `apply`
  transforms a point `(x, y)`.
- `tankwars.transform3d` builds 4×4 matrices. It has `translate`, `scale`,
  `rotate_ox`, `rotate_oy`, `rotate_oz` and `rotation_about_axis`, which
  rotates about any axis. `look_at` gives a right-handed view matrix.
- `tankwars.camera.Camera` is a camera described by `position`, `forward`,
  `right` and `up`.
  - Translations: `move_forward`, `translate_forward`, `translate_upward` and
    `translate_right`.
  - First-person rotations: `rotate_first_person_ox`, `_oy` and `_oz`.
  - Third-person rotations: `rotate_third_person_ox`, `_oy` and `_oz`. These
    orbit `target_position()`, which lies `distance_to_target` ahead.
  - `view_matrix()` returns the view matrix.
- `tankwars.viewport` has the `LogicSpace` and `ViewportSpace` rectangles. It
  maps one onto the other with two functions.
  - `visualization_transform` stretches the logic window onto the viewport.
  - `uniform_visualization_transform` uses one scale factor for both axes and
    centres the result.
- `tankwars.shapes` has `Vertex`, `MeshData` and `DrawMode`, plus the shape
  builders `create_square`, `create_hanging_square`, `create_tank`,
  `create_circle` and `create_line`.
- `tankwars.terrain` handles the ground.
  - `terrain_height` is the terrain function.
  - `build_height_map` samples the terrain into screen coordinates.
  - `apply_landslide` moves earth between neighbouring points whose heights
    differ too much.
  - `projectile_position` gives a shell's position under constant gravity.
  - `trajectory` predicts a shell's path and the point where it meets the
    terrain.
- `tankwars.tank.Tank` is a tank that sits on the height map.
  - `build` places it on the terrain and returns its body and cannon
    matrices.
  - `muzzle` returns the barrel tip and the firing direction.
  - `fire_projectile` fires a shell and reuses one from a pool when there is
    one.
  - `update_cannon_angle` turns the cannon within a 180° arc.
  - `take_damage` lowers the tank's health.
- `tankwars.enemy.Enemy` is a `Tank` run by a small state machine.
  - When a player is within the detect range, it chases the nearest one.
  - When that player is within the attack range, it aims and shoots.
  - Otherwise it idles. `IdleAction` lists the random idle actions.
- `tankwars.projectile.Projectile` is a shell that moves under gravity. When
  it hits the terrain it digs a crater into the height map. When it hits a
  living tank it does damage.
- `tankwars.fireworks.Fireworks` is a burst of rays. It grows step by step
  and then dies out.
- `tankwars.game` has `Game`, `GameConfig`, `Key` and `DrawCommand`.

## Running a game loop

```python
import random
from tankwars.game import Game, GameConfig, Key

game = Game((1280, 720), GameConfig(), random.Random(1))

for _ in range(60):
    game.handle_input({Key.D, Key.W}, 1 / 60)
    for command in game.update(1 / 60):
        mesh = game.meshes[command.mesh]
        ...  # draw mesh with command.matrix

game.key_press(Key.SPACE)   # player one fires
game.key_press(Key.F)       # switch camera focus between players
```

`Game.handle_input` takes the keys held during the frame. `Game.key_press`
takes a single key press.

- Player one moves with `Key.A`/`Key.D`, aims with `Key.W`/`Key.S` and fires
  with `Key.SPACE`.
- Player two moves with `Key.LEFT`/`Key.RIGHT`, aims with `Key.UP`/`Key.DOWN`
  and fires with `Key.ENTER`.
- `Key.F` switches which player the camera follows. While one player is dead,
  the camera stays on the other.
- `Key.P` adds a firework. Fireworks are only advanced and drawn once the
  game is over.

The game is over once every enemy is destroyed. From then on, random
fireworks are spawned above the battlefield. `Game.camera_position` eases
toward the start of the visible part of the map. `Game.first_chunk_index()`
gives the first visible chunk for the player the camera follows.

## What the package does not do

The package opens no window and draws nothing. It reads no keyboard and has
no command to start a game. You need a renderer and an input loop that call
`Game.handle_input`, `Game.key_press` and `Game.update`, then draw the
returned commands.