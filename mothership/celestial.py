"""Planets that pull on ships and swallow whatever crashes into them."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .game_object import DEFAULT_CLOCK, GameObject, ObjectType, vec3
from .timer import Clock

GRAVITATIONAL_CONSTANT = 6.67
ORBIT_RANGE_FACTOR = 3.0
PLAYER_ORBIT_TURN_RATE = 0.5
BOOMER_ORBIT_TURN_RATE = 1.0
MIN_ORBIT_SPEED = 0.1
ORBIT_HEIGHT_STEP = 0.0001


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    return vector / length if length > 0.0 else np.zeros(3)


def _steer_into_orbit(
    offset: np.ndarray, velocity: np.ndarray, turn_rate: float, delta_time: float
) -> np.ndarray:
    """Rotate ``velocity`` part of the way towards the orbital tangent at ``offset``."""
    vel_dir = _unit(velocity)
    left = np.array([-offset[1], offset[0], 0.0])
    right = np.array([offset[1], -offset[0], 0.0])
    counter_clockwise = float(np.dot(vel_dir, _unit(left))) > 0.0
    tangent = _unit(left if counter_clockwise else right)

    cos_theta = float(np.dot(vel_dir, tangent))
    sin_theta = float(vel_dir[0] * tangent[1] - vel_dir[1] * tangent[0])
    target_angle = math.atan2(sin_theta, cos_theta)

    increment = target_angle * turn_rate * delta_time
    if increment > 0:
        increment = min(increment, target_angle)
    else:
        increment = max(increment, target_angle)

    cos_a, sin_a = math.cos(increment), math.sin(increment)
    return np.array(
        [
            velocity[0] * cos_a - velocity[1] * sin_a,
            velocity[0] * sin_a + velocity[1] * cos_a,
            0.0,
        ]
    )


class CelestialBody(GameObject):
    """A planet with gravity proportional to its radius over distance."""

    def __init__(
        self,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        mothership: Any = None,
        radius: float = 0.4,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        super().__init__(position, geometry, texture, clock=clock)
        self.gravitational_constant = GRAVITATIONAL_CONSTANT
        self.radius = radius
        self.mothership = mothership
        self.object_type = ObjectType.CELESTIAL_BODY

    def _pull(self, obj: GameObject, delta_time: float) -> None:
        """Accelerate ``obj`` towards the planet's centre."""
        towards = self.position - obj.position
        distance = float(np.linalg.norm(towards))
        if distance == 0.0:
            return
        strength = self.gravitational_constant * self.radius / distance
        obj.set_velocity(obj.velocity + towards / distance * delta_time * strength)

    def gravitational_acceleration(self, player: GameObject, delta_time: float) -> None:
        """Bend a fast nearby player into orbit, then pull it inwards."""
        offset = player.position - self.position
        distance = float(np.linalg.norm(offset))
        if distance < 0.001:
            return

        speed = float(np.linalg.norm(player.velocity))
        if speed >= MIN_ORBIT_SPEED and distance < self.radius * ORBIT_RANGE_FACTOR:
            player.set_velocity(
                _steer_into_orbit(offset, player.velocity, PLAYER_ORBIT_TURN_RATE, delta_time)
            )

        self._pull(player, delta_time)

    def collide(self, other: GameObject) -> None:
        """Destroy any player or enemy that crashes into the planet."""
        if other.object_type not in (ObjectType.ENEMY, ObjectType.PLAYER) or other.is_destroyed:
            return
        other.timer.start(5.0)
        other.hitpoints = 0
        other.is_destroyed = True

    def boomer_chase_player(
        self, boomer: GameObject, player: GameObject, delta_time: float
    ) -> None:
        """Orbit a nearby boomer at the player's height, or pull it in from afar."""
        offset = boomer.position - self.position
        distance = float(np.linalg.norm(offset))

        if 0.001 < distance < self.radius * ORBIT_RANGE_FACTOR:
            boomer.in_orbit = True
            if float(np.linalg.norm(boomer.velocity)) > 0.0:
                boomer.set_velocity(
                    _steer_into_orbit(offset, boomer.velocity, BOOMER_ORBIT_TURN_RATE, delta_time)
                )
            boomer.position = boomer.position + boomer.velocity * delta_time

            player_distance = float(np.linalg.norm(player.position - self.position))
            outward = offset / distance * ORBIT_HEIGHT_STEP
            if distance > player_distance:
                boomer.position = boomer.position - outward
            elif distance < player_distance:
                boomer.position = boomer.position + outward
        else:
            boomer.in_orbit = False
            self._pull(boomer, delta_time)

    def update(self, delta_time: float) -> None:
        """Drift along with a living mothership."""
        boss = self.mothership
        if boss is None or boss.is_destroyed:
            return
        heading = vec3(boss.direction) * boss.speed
        length = float(np.linalg.norm(heading))
        if length > 0.0:
            self.position = self.position + heading / length * delta_time