"""Straight-flying projectiles fired by the player and by fighters."""

from __future__ import annotations

from typing import Any

from .game_object import GameObject, ObjectType, vec3
from .timer import Clock, Timer


class _Owned(GameObject):
    """An object launched by another one, living for a fixed time."""

    kind = ObjectType.DEFAULT if hasattr(ObjectType, "DEFAULT") else None
    lifetime = 0.0

    def __init__(
        self, position: Any, owner: GameObject, geometry: Any = None, texture: Any = None,
        *, clock: Clock | None = None,
    ) -> None:
        super().__init__(position, geometry, texture, clock=owner.clock if clock is None else clock)
        if self.kind is not None:
            self.object_type = self.kind
        self.owner = owner
        self.lifespan = Timer(self.clock)
        self.lifespan.start(self.lifetime)


class Projectile(_Owned):
    """A bullet that flies along a fixed direction until it hits or expires."""

    kind = ObjectType.PROJECTILE
    lifetime = 3.0

    def __init__(
        self, position: Any, direction: Any, owner: GameObject, geometry: Any = None,
        texture: Any = None, *, clock: Clock | None = None,
    ) -> None:
        super().__init__(position, owner, geometry, texture, clock=clock)
        self.direction = vec3(direction)
        self.speed = 14.0

    def _release_owner_slot(self) -> None:
        """Tell a firing player that one of its projectiles is gone."""
        if self.owner.object_type is ObjectType.PLAYER:
            self.owner.projectile_destroyed()

    def _spend_hitpoint(self) -> None:
        self._hitpoints -= 1
        if self._hitpoints <= 0 and not self.is_destroyed:
            self.is_destroyed = True
            self._release_owner_slot()

    def update(self, delta_time: float) -> None:
        """Expire once the lifespan ends, otherwise keep flying."""
        if self.lifespan.finished and not self.is_destroyed:
            self._hitpoints = 0
            self.is_destroyed = True
            self._release_owner_slot()

        if not self.is_destroyed:
            self.position = self.position + delta_time * self.speed * self.direction

    def collide(self, other: GameObject) -> None:
        """Damage players, enemies and the mothership; never the shooter."""
        if other is self.owner or other.is_destroyed:
            return

        if other.object_type in (ObjectType.ENEMY, ObjectType.PLAYER):
            if not other.is_invincible:
                other.hitpoints = other.hitpoints - 1
            self._spend_hitpoint()
        elif other.object_type is ObjectType.MOTHERSHIP:
            other.hitpoints = other.hitpoints - 1
            self._spend_hitpoint()