# pongphysics

This package provides headless 2D game physics in plain Python. You give it time steps and player input. It advances the simulation, and you can then inspect the resulting state or draw it however you like. It has no dependencies outside the standard library.

## Modules

- `pongphysics.vector`
  - `Vector3` is a mutable 3D vector. It supports `+`, `-`, unary `-`, scalar `*` and `/`, and has `dot`, `cross`, `length`, `length_squared`, `distance`, `distance_squared`, `is_zero`, `normalized` and `copy`.
  - `normalized` raises `ZeroDivisionError` for a zero vector.
  - `rotate_vector(vec, radian)` rotates a vector about the z axis. The result has z set to 0.
- `pongphysics.vertex`
  - Vertex attribute types: `Position`, `Color`, `TexCoord` and `Vertex`.
  - Lighting descriptions: `Light`, `LightType`, `Material` and `Component`, each with default values.
  - `transform_position(matrix, position)` applies a flat, column-major 4×4 matrix of 16 numbers to a point. It raises `ValueError` for any other length.
- `pongphysics.objects`
  - `GameObject` is a simulated body. `ObjectType` lists the kinds of body.
  - `ObjectPool.fetch()` reuses an inactive object. When none is free, the pool grows by `batch_size` objects (10 by default).
  - `release`, `release_all` and `active_objects` manage which objects are active.
  - `active_count` tracks how many objects are in use.
- `pongphysics.sprite_animation`
  - `SpriteAnimation` holds named `Animation`s. You add them with `add_animation(name, start, end)` (the end frame is excluded) or with `add_sequence_animation(name, *frames)`.
  - `play_animation(name, repeat, time)` starts an animation. A `repeat` of `-1` loops forever.
  - `update(dt)` advances `current_frame`. `pause`, `resume` and `reset` control playback.
- `pongphysics.fonts`
  - `parse_font_metrics(lines)` and `load_font_metrics(path)` read a bitmap-font CSV into `FontMetrics`. They use the `Char <n> Base Width,<w>` and `Cell Width,<w>` lines.
  - `FontMetrics.text_offsets(text)` returns the x position of each character, in cell units.
  - `frames_per_second(dt)` returns `1 / dt`, or infinity when `dt` is 0.
- `pongphysics.asteroid`
  - `AsteroidGame` is a ship flying through an asteroid field. It supports thrust, torque-driven rotation, bullets and black holes that pull objects in and absorb them. `wrap` keeps positions on screen.
  - Each frame's input is an `AsteroidControls`, passed to `update(dt, controls)`.
  - The game tracks `lives` and `score`.
- `pongphysics.collision_scene`
  - `CollisionScene` is an octagon of walls around a thick block.
  - `press(button, pos)` starts aiming a ball and `release(button, pos)` launches it, away from the release point. Button 0 launches a small ball. Button 1 launches a ball scaled by the drag distance.
  - `update(dt)` moves the objects, bounces them off the screen edges and resolves collisions.
- `pongphysics.pong_physics`
  - `check_collision` detects ball-to-ball, ball-to-wall and ball-to-pillar contact.
  - `collision_response` resolves a contact with restitution, normal force, kinetic friction, spin and rolling resistance.
  - `make_thin_wall` builds a `Paddle`. `make_half_thin_wall` and `make_thick_wall` build the other walls.
- `pongphysics.pong`
  - `PongGame` is a two-player match with jumping paddles, a middle wall and alternating serves. A match is won at ten points. At nine all it goes to sudden death, which drops ten balls at a time under lower gravity.
  - `GameState` tracks the current screen: the main menu, play, or one of the three end results.
  - Menu buttons respond to `press(pos)` and `release(pos)`.
  - Each frame's keys are a `PongControls`, passed to `update(dt, controls)`.

## Example

A match starts when the play button is pressed and released. The button is centred at `(world_width / 2, world_height / 2 - 20)`.

```python
import random
from pongphysics.pong import GameState, PongControls, PongGame

game = PongGame(133.3, 100.0, random.Random(1))
play_button = (game.world_width / 2, game.world_height / 2 - 20)
game.press(play_button)
game.release(play_button)
assert game.state is GameState.PLAYING

controls = PongControls(p1_right=True)
for _ in range(600):
    game.update(1 / 60, controls)
print(game.player1_score, game.player2_score, game.state)
```

## What the package does not do

- It draws nothing and opens no window. It does not read the keyboard or mouse.
- Rendering, on-screen text and input polling are left to the caller. The caller reads object positions, colours and angles from the pools, and passes input in through the controls objects and the `press`/`release` methods.
- There is no command-line program and no main loop.

## Running the tests

```
pip install -e .[test]
pytest
```