"""Walls enclosing the boss area."""

from __future__ import annotations

from typing import Any

import numpy as np

from .game_object import DEFAULT_CLOCK, GameObject, ObjectType, vec3
from .timer import Clock

WALL_HALF_THICKNESS = 0.4
PUSH_STRENGTH = 4.0


class BossBarrier(GameObject):
    """A wall segment that hurts and repels what touches it, drifting with its boss."""

    def __init__(
        self,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        mothership: Any = None,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        super().__init__(position, geometry, texture, clock=clock)
        self.object_type = ObjectType.BARRIER
        self.mothership = mothership

    def collide(self, other: GameObject) -> None:
        """Damage (on a cooldown) and push back players and enemies touching the wall."""
        if other.object_type not in (ObjectType.ENEMY, ObjectType.PLAYER) or other.is_destroyed:
            return

        direction = self.bearing
        wall_to_obj = other.position - self.position
        closest = self.position + direction * float(np.dot(wall_to_obj, direction))
        offset = other.position - closest
        distance = float(np.linalg.norm(offset))
        if distance > other.radius + WALL_HALF_THICKNESS:
            return

        if self.dmg_cooldown.finished and not other.is_invincible:
            other.hitpoints = other.hitpoints - 1
            self.dmg_cooldown.start(1.2)

        if distance > 0.0:
            other.set_velocity(offset / distance * PUSH_STRENGTH)

    def update(self, delta_time: float) -> None:
        """Drift along with a living mothership."""
        boss = self.mothership
        if boss is None or boss.is_destroyed:
            return
        heading = vec3(boss.direction) * boss.speed
        length = float(np.linalg.norm(heading))
        if length > 0.0:
            self.position = self.position + heading / length * delta_time