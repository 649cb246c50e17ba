"""Particle effects attached to a parent object."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .game_object import GameObject, ObjectType
from .timer import Clock

BOOSTER = "Booster"
EXPLOSION = "Explosion"


def _translation(vector: np.ndarray) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = vector
    return matrix


def _rotation_z(angle: float) -> np.ndarray:
    matrix = np.eye(4)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    matrix[0, 0], matrix[0, 1] = cos_a, -sin_a
    matrix[1, 0], matrix[1, 1] = sin_a, cos_a
    return matrix


def _scaling(scale_x: float, scale_y: float) -> np.ndarray:
    return np.diag([scale_x, scale_y, 1.0, 1.0])


class ParticleSystem(GameObject):
    """A particle effect placed relative to its parent.

    ``effect`` selects when it shows: a booster shows only while its
    player boosts with fuel left, an explosion only once its mothership
    is destroyed; any other effect always shows.
    """

    def __init__(
        self,
        position: Any,
        parent: GameObject,
        geometry: Any = None,
        texture: Any = None,
        effect: str | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(
            position, geometry, texture, clock=clock if clock is not None else parent.clock
        )
        self.parent = parent
        self.effect = effect
        self.object_type = ObjectType.PARTICLE_SYSTEM
        self.is_invincible = True

    def collide(self, other: GameObject) -> None:
        """Particle effects never collide."""

    def update(self, delta_time: float) -> None:
        """Advance like a plain game object."""
        super().update(delta_time)

    @property
    def is_visible(self) -> bool:
        """Whether the effect should be drawn right now."""
        parent = self.parent
        if parent.object_type is ObjectType.PLAYER and self.effect == BOOSTER:
            if not parent.use_boost or parent.fuel <= 0:
                return False
        if parent.object_type is ObjectType.MOTHERSHIP and self.effect == EXPLOSION:
            if not parent.is_destroyed:
                return False
        return True

    @property
    def transformation(self) -> np.ndarray:
        """World matrix: the parent's placement followed by the local one."""
        parent_matrix = _translation(self.parent.position) @ _rotation_z(self.parent.rotation)
        local = (
            _translation(self.position)
            @ _rotation_z(self.rotation)
            @ _scaling(float(self.scale[0]), float(self.scale[1]))
        )
        return parent_matrix @ local