"""A melee enemy that rams the player."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .enemy import EnemyGameObject
from .game_object import GameObject, vec3
from .timer import Clock

MAX_BOOMER_SPEED = 6.0
TURN_RATE = 1.5


class BoomerEnemy(EnemyGameObject):
    """Chases its target, accelerating towards it every frame."""

    def __init__(
        self,
        position: Any,
        target: GameObject,
        geometry: Any = None,
        texture: Any = None,
        mothership: Any = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(
            position,
            geometry,
            texture,
            mothership,
            clock=clock if clock is not None else target.clock,
        )
        self.target = target
        self.direction = target.position - self.position
        self.speed = 0.01
        self.in_orbit = False
        self.velocity = self.direction * self.speed

    def set_velocity(self, velocity: Any) -> None:
        """Replace the boomer's velocity."""
        self.velocity = vec3(velocity)

    def update(self, delta_time: float) -> None:
        """Steer towards the target unless destroyed, orbiting, or the target is gone."""
        if self.is_destroyed or self.in_orbit or self.target.is_destroyed:
            return

        to_target = self.target.position - self.position
        distance = float(np.linalg.norm(to_target))
        if distance > 0.0:
            self.direction = to_target / distance

        speed = float(np.linalg.norm(self.velocity))
        if speed > MAX_BOOMER_SPEED:
            self.velocity = self.velocity / speed * MAX_BOOMER_SPEED
        self.velocity = self.velocity + self.direction * self.speed
        self.position = self.position + self.velocity * delta_time

        target_angle = math.atan2(self.direction[1], self.direction[0])
        angle_diff = target_angle - self._angle
        if angle_diff > math.pi:
            angle_diff -= 2.0 * math.pi
        elif angle_diff < math.pi:
            angle_diff += 2.0 * math.pi
        step = TURN_RATE * delta_time
        self._angle += min(max(angle_diff, -step), step)

        self.follow_mothership(delta_time)