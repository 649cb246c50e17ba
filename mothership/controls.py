"""Keyboard handling for the player's ship."""

from __future__ import annotations

import math
from collections.abc import Collection
from enum import Enum

from .world import Textures, World

ACCELERATION_FACTOR = 1.6
CRUISE_MAX_VELOCITY = 8.0
BOOST_MAX_VELOCITY = 16.0


class Key(Enum):
    """The keys the game reacts to."""

    W = "w"
    S = "s"
    Q = "q"
    E = "e"
    A = "a"
    D = "d"
    F = "f"
    LEFT_SHIFT = "left shift"
    SPACE = "space"
    ESCAPE = "escape"


def handle_controls(world: World, pressed: Collection[Key], delta_time: float) -> bool:
    """Apply the held keys to the player for one frame.

    Returns True when the player asked to close the game.
    """
    player = world.game_objects[0]
    angle = player.rotation
    bearing = player.bearing
    angle_increment = (math.pi / 1800.0) * delta_time * 1000.0 * 2.0

    velocity = player.velocity
    acceleration = player.acceleration * ACCELERATION_FACTOR

    # Every thrust key starts from the same velocity, so opposing keys do not add up.
    if Key.W in pressed:
        player.set_velocity(velocity + acceleration * bearing)
    if Key.S in pressed:
        player.set_velocity(velocity - acceleration * bearing)
    if Key.Q in pressed:
        player.set_velocity(velocity - acceleration * player.right)
    if Key.E in pressed:
        player.set_velocity(velocity + acceleration * player.right)

    if Key.D in pressed:
        player.rotation = angle - angle_increment
    if Key.A in pressed:
        player.rotation = angle + angle_increment

    if Key.F in pressed:
        projectile = player.fire_projectile(world.textures[Textures.PROJECTILE_PLAYER])
        if projectile is not None:
            world.add_before_background(projectile)

    if Key.LEFT_SHIFT in pressed:
        pulse = player.fire_pulse(world.textures[Textures.PULSE])
        if pulse is not None:
            world.add_before_background(pulse)

    if Key.SPACE in pressed:
        if player.fuel > 0:
            player.use_boost = True
            player.max_velocity = BOOST_MAX_VELOCITY
    else:
        player.use_boost = False
        player.max_velocity = CRUISE_MAX_VELOCITY

    return Key.ESCAPE in pressed