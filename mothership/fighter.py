"""A ranged enemy that wanders, then pursues and shoots at the player."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Any

import numpy as np

from .enemy import EnemyGameObject
from .game_object import GameObject, vec3
from .projectile import Projectile
from .timer import Clock, Timer

PURSUIT_RANGE = 8.0
CHASE_RANGE = 2.0
WANDER_RADIUS = 0.3
WANDER_OPENING = math.radians(45.0)
STEERING_BLEND = 0.05
TURN_RATE = 2.0


class FighterState(str, Enum):
    """Behaviour stages of a fighter."""

    WANDERING = "wandering"
    IN_PURSUIT = "in pursuit"
    CHASE = "chase"


_STATE_SPEED = {
    FighterState.WANDERING: 1.5,
    FighterState.IN_PURSUIT: 2.5,
    FighterState.CHASE: 3.0,
}


class FighterEnemy(EnemyGameObject):
    """Wanders until the target comes near, then pursues it and fires projectiles."""

    def __init__(
        self,
        position: Any,
        target: GameObject,
        geometry: Any = None,
        texture: Any = None,
        bullet_texture: Any = None,
        mothership: Any = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            position,
            geometry,
            texture,
            mothership,
            clock=clock if clock is not None else target.clock,
        )
        self.state = FighterState.WANDERING
        self.target = target
        self.direction = target.position - self.position
        self.wandering_update = Timer(self.clock)
        self.speed = _STATE_SPEED[FighterState.WANDERING]
        self.velocity = np.zeros(3)
        self.bullet_texture = bullet_texture
        self.shooting_cooldown = Timer(self.clock)
        self.rng = rng if rng is not None else random.Random()

    def fire(self) -> Projectile | None:
        """Shoot along the bearing, or return None while cooling down."""
        if not self.shooting_cooldown.finished:
            return None
        projectile = Projectile(
            self.position,
            self.bearing,
            self,
            self.geometry,
            self.bullet_texture,
            clock=self.clock,
        )
        projectile.rotation = self.rotation
        self.shooting_cooldown.start(2.4)
        self._spawn(projectile)
        return projectile

    def set_velocity(self, velocity: Any) -> None:
        """Replace the fighter's velocity."""
        self.velocity = vec3(velocity)

    def _advance_state(self, distance: float) -> None:
        if self.state is FighterState.WANDERING and distance <= PURSUIT_RANGE:
            self.state = FighterState.IN_PURSUIT
        elif self.state is FighterState.IN_PURSUIT and distance <= CHASE_RANGE:
            self.state = FighterState.CHASE
        else:
            return
        self.speed = _STATE_SPEED[self.state]

    def _target_position(self) -> np.ndarray:
        if self.state is FighterState.WANDERING:
            if self.wandering_update.finished:
                angle = self.rng.random() * 2.0 * WANDER_OPENING + self._angle - WANDER_OPENING
                self.direction = np.array(
                    [WANDER_RADIUS * math.cos(angle), WANDER_RADIUS * math.sin(angle), 0.0]
                )
                self.wandering_update.start(1.0)
            return self.position + self.direction
        if self.state is FighterState.IN_PURSUIT:
            return self.target.position + self.target.velocity
        return self.target.position.copy()

    def update(self, delta_time: float) -> None:
        """Run the state machine, steer, turn, shoot and move."""
        if self.is_destroyed or self.target.is_destroyed:
            return

        self._advance_state(float(np.linalg.norm(self.position - self.target.position)))

        desired = self._target_position() - self.position
        length = float(np.linalg.norm(desired))
        if length > 0.0:
            desired = desired / length * self.speed
            self.velocity = self.velocity + (desired - self.velocity) * STEERING_BLEND

        if float(np.linalg.norm(self.velocity)) > 0.01:
            target_angle = math.atan2(self.velocity[1], self.velocity[0])
            delta = (target_angle - self._angle + math.pi) % (2.0 * math.pi) - math.pi
            step = TURN_RATE * delta_time
            self._angle += min(max(delta, -step), step)

        if self.state is not FighterState.WANDERING:
            self.fire()

        self.position = self.position + self.velocity * delta_time
        self.follow_mothership(delta_time)