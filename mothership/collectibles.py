"""Power-ups the player can pick up inside the boss area."""

from __future__ import annotations

from typing import Any

from .game_object import GameObject, ObjectType


class CollectibleGameObject(GameObject):
    """A pickup that disappears when collected or after ten seconds."""

    sub_type = "Empty"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.object_type = ObjectType.COLLECTIBLE
        self.timer.start(10.0)

    def _vanish(self) -> None:
        self._hitpoints = 0
        self.is_destroyed = True
        self.ghost = True

    def collide(self, other: GameObject) -> None:
        """Only the player can pick the collectible up."""
        if other.object_type is not ObjectType.PLAYER:
            return
        self._hitpoints = 0
        if not self.is_destroyed:
            self._vanish()
            self.timer.start(2.0)

    def update(self, delta_time: float) -> None:
        """Disappear once the lifespan runs out."""
        if self.timer.finished and not self.is_destroyed:
            self._vanish()


class FuelCollectible(CollectibleGameObject):
    """Refills part of the player's boost fuel."""

    sub_type = "Fuel"


class HealthCollectible(CollectibleGameObject):
    """Restores some of the player's hitpoints."""

    sub_type = "Health"


class ShieldCollectible(CollectibleGameObject):
    """Counts towards a period of invincibility."""

    sub_type = "Shield"