# mothership

A top-down space arcade game. A mothership boss fences you inside a moving
arena of barriers and keeps sending escorts until you bring it down:

- **Boomers** chase you and try to ram you. A planet's orbit can bend their path.
- **Dreadnoughts** circle on an ellipse and send out damaging pulse waves.
- **Fighters** wander until you come close. Then they pursue you and open fire.

A planet inside the arena pulls on you. Fly close and fast enough and it curves
you into orbit. Touch it and your ship is destroyed.

Shield, health and fuel pickups appear now and then inside the arena. Five
shields make you invincible for ten seconds. Health restores two hitpoints.
Fuel feeds the booster.

## Installation

```
pip install .
```

This needs Python 3.10 or later and installs `numpy` and `pygame`.

## Playing

```
mothership
```

Options:

| Option           | Meaning                                   |
|------------------|-------------------------------------------|
| `--seed N`       | Seed the random number generator          |
| `--frames N`     | Stop after this many frames               |
| `--width W`      | Window width in pixels (default 800)      |
| `--height H`     | Window height in pixels (default 600)     |

Keys:

| Key          | Action                                   |
|--------------|------------------------------------------|
| W / S        | Thrust forward / backward                |
| Q / E        | Strafe left / right                      |
| A / D        | Rotate left / right                      |
| F            | Fire a projectile (at most 3 in flight)  |
| Left Shift   | Fire a pulse wave                        |
| Space        | Boost (uses fuel)                        |
| Escape       | Quit                                     |

The game prints "Victory!! Well done." when the mothership is destroyed and
"Game Over!" when your ship is.

## Using it as a library

The simulation does not depend on the display, so you can drive it
headlessly:

- `mothership.world.World` holds the game state. Call `setup()` to populate
  it and `update(delta_time)` to advance it by one frame. `update` raises
  `mothership.world.GameOver`, whose `outcome` is an `Outcome`, once the
  player or the mothership is removed.
- `mothership.timer.ManualClock` lets you control time: pass it as `clock=`
  to `World` and call `advance(seconds)` between frames.
- `mothership.controls.handle_controls(world, pressed, delta_time)` applies a
  set of held `Key` values to the player and returns True when Escape is held.
- `mothership.world.ray_circle_collision` is the projectile hit test.
- `mothership.app.camera_zoom` and `mothership.app.view_transform` compute the
  camera used for drawing.

## What it does not do

There are no image textures and no sound. Every object is drawn as a flat
coloured shape and texts are rendered with pygame's default font; the
`Textures` values only pick colours and say which objects stay hidden.

## Running the tests

```
pip install .[test]
pytest
```