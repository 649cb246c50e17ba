"""Expanding shockwaves that damage and push back whatever they touch."""

from __future__ import annotations

import numpy as np

from .game_object import GameObject, ObjectType
from .projectile import _Owned


class Pulse(_Owned):
    """A wave that grows around its owner for a short time."""

    kind = ObjectType.PULSE
    max_scale = 2.0
    lifetime = max_scale

    def update(self, delta_time: float) -> None:
        """Grow and follow the owner; vanish when time is up or the owner dies."""
        if (self.lifespan.finished and not self.is_destroyed) or self.owner.is_destroyed:
            self._hitpoints = 0
            self.is_destroyed = True

        if not self.is_destroyed:
            self.set_scale(1.0 + self.max_scale - self.lifespan.time_left)
            self.radius = 0.4 + 0.4 * float(self.scale[0])
            self.position = self.owner.position

    def collide(self, other: GameObject) -> None:
        """Hurt and knock back players and enemies; a player's pulse hurts the boss."""
        if other is self.owner or other.is_destroyed:
            return

        if other.object_type in (ObjectType.ENEMY, ObjectType.PLAYER):
            if not other.is_invincible and other.dmg_cooldown.finished:
                other.hitpoints = other.hitpoints - 1
                away = other.position - self.position
                length = float(np.linalg.norm(away))
                if length > 0.0:
                    other.set_velocity(away / length * 4.0)
                other.dmg_cooldown.start(0.6)
        elif (
            other.object_type is ObjectType.MOTHERSHIP
            and self.owner.object_type is ObjectType.PLAYER
            and other.dmg_cooldown.finished
        ):
            other.hitpoints = other.hitpoints - 1
            other.dmg_cooldown.start(0.6)