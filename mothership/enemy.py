"""Common base of the enemies the mothership spawns."""

from __future__ import annotations

from typing import Any

import numpy as np

from .game_object import GameObject, ObjectType, vec3


class EnemyGameObject(GameObject):
    """An enemy that can drift along with its mothership and add objects to the world."""

    def __init__(
        self, position: Any, geometry: Any = None, texture: Any = None,
        mothership: Any = None, **kwargs: Any,
    ) -> None:
        super().__init__(position, geometry, texture, **kwargs)
        self.object_type = ObjectType.ENEMY
        self.mothership = mothership
        self.game_objects: list[GameObject] | None = None

    def _mothership_drift(self, delta_time: float) -> np.ndarray:
        """Displacement the living mothership imposes over ``delta_time``."""
        boss = self.mothership
        if boss is None or boss.is_destroyed:
            return np.zeros(3)
        heading = vec3(boss.direction) * boss.speed
        length = float(np.linalg.norm(heading))
        if length == 0.0:
            return np.zeros(3)
        return heading / length * delta_time

    def follow_mothership(self, delta_time: float) -> None:
        """Move along with the mothership to stay inside the boss area."""
        self.position = self.position + self._mothership_drift(delta_time)

    def _spawn(self, obj: GameObject) -> None:
        """Add ``obj`` to the world just before its final (background) object."""
        if self.game_objects is None:
            raise RuntimeError("enemy has no game object list to add to")
        self.game_objects.insert(len(self.game_objects) - 1, obj)