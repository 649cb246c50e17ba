"""The base object of the game world."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

import numpy as np

from .timer import DEFAULT_CLOCK, Clock, Timer

TWO_PI = 2.0 * math.pi


class ObjectType(str, Enum):
    """What kind of thing a game object is; drives collision rules."""

    DEFAULT = "Default"
    PLAYER = "Player"
    COLLECTIBLE = "Collectible"
    ENEMY = "Enemy"
    MOTHERSHIP = "Mothership"
    PROJECTILE = "Projectile"
    PULSE = "Pulse"
    BARRIER = "Barrier"
    UI = "UI"
    HIERARCHY = "Hierarchy"
    CELESTIAL_BODY = "CelestialBody"
    PARTICLE_SYSTEM = "Particle System"


# Types whose collisions are handled on their own side.
_SPECIAL_COLLIDERS = frozenset(
    {
        ObjectType.COLLECTIBLE,
        ObjectType.PULSE,
        ObjectType.PROJECTILE,
        ObjectType.BARRIER,
        ObjectType.UI,
    }
)


def vec3(value: Any) -> np.ndarray:
    """Return ``value`` as a fresh float vector of length three."""
    array = np.array(value, dtype=float).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"expected three coordinates, got {array.shape[0]}")
    return array


class GameObject:
    """One object in the world: transform, hitpoints and a destruction timer."""

    def __init__(
        self,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        scale: tuple[float, float] = (1.0, 1.0),
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        self._position = vec3(position)
        self.scale = np.array(scale, dtype=float)
        self._angle = 0.0
        self.radius = 0.4
        self.max_hitpoints = 1
        self._hitpoints = 1
        self.is_destroyed = False
        self.is_invincible = False
        self.ghost = False
        self.clock = clock
        self.dmg_cooldown = Timer(clock)
        self.timer = Timer(clock)
        self.geometry = geometry
        self.texture = texture
        self.object_type = ObjectType.DEFAULT

    @property
    def position(self) -> np.ndarray:
        """World position as a three-component vector."""
        return self._position

    @position.setter
    def position(self, value: Any) -> None:
        self._position = vec3(value)

    @property
    def rotation(self) -> float:
        """Heading in radians, kept within [0, 2*pi)."""
        return self._angle

    @rotation.setter
    def rotation(self, angle: float) -> None:
        angle = math.fmod(angle, TWO_PI)
        if angle < 0.0:
            angle += TWO_PI
        self._angle = angle

    @property
    def bearing(self) -> np.ndarray:
        """Unit vector in the direction the object faces."""
        return np.array([math.cos(self._angle), math.sin(self._angle), 0.0])

    @property
    def right(self) -> np.ndarray:
        """Unit vector pointing to the object's right side."""
        angle = self._angle - math.pi / 2.0
        return np.array([math.cos(angle), math.sin(angle), 0.0])

    @property
    def hitpoints(self) -> int:
        """Current hitpoints; lowering them is refused while invincible."""
        return self._hitpoints

    @hitpoints.setter
    def hitpoints(self, health: int) -> None:
        health = int(health)
        if (health < self._hitpoints and not self.is_invincible) or health >= self._hitpoints:
            self._hitpoints = health
            self._destroy_if_dead(3.0)

    def _destroy_if_dead(self, removal_delay: float) -> None:
        """Mark the object destroyed once out of hitpoints and schedule removal."""
        if self._hitpoints <= 0 and not self.is_destroyed:
            self.is_destroyed = True
            self.timer.start(removal_delay)

    def set_scale(self, scale: Any) -> None:
        """Set the scale from one number or an (x, y) pair."""
        if np.ndim(scale) == 0:
            self.scale = np.array([float(scale), float(scale)])
        else:
            self.scale = np.array(scale, dtype=float).reshape(2)

    def set_velocity(self, velocity: Any) -> None:
        """Objects without velocity ignore pushes."""

    def collide(self, other: GameObject) -> None:
        """Lose a hitpoint on a plain collision unless invincible."""
        if other.object_type in _SPECIAL_COLLIDERS or self.is_invincible:
            return
        self._hitpoints -= 1
        self._destroy_if_dead(3.0)

    def update(self, delta_time: float) -> None:
        """Advance the object's state; the base object does nothing."""