"""The player's ship."""

from __future__ import annotations

from typing import Any

import numpy as np

from .collectibles import FuelCollectible, HealthCollectible, ShieldCollectible
from .game_object import DEFAULT_CLOCK, GameObject, ObjectType, vec3
from .projectile import Projectile
from .pulse import Pulse
from .timer import Clock, Timer

MAX_PLAYER_HITPOINTS = 14
MAX_FUEL = 100.0
MAX_PROJECTILES = 3
SHIELDS_FOR_INVINCIBILITY = 5


class PlayerGameObject(GameObject):
    """A physics-driven ship with weapons, fuel boost and shield pickups."""

    def __init__(
        self,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        super().__init__(position, geometry, texture, clock=clock)
        self.max_hitpoints = MAX_PLAYER_HITPOINTS
        self._hitpoints = MAX_PLAYER_HITPOINTS
        self.object_type = ObjectType.PLAYER

        self.invincibility_duration = Timer(clock)
        self.shield_collectible_count = 0
        self.fuel = MAX_FUEL

        self.use_boost = False
        self.fuel_consumption = Timer(clock)

        self.projectile_cooldown = Timer(clock)
        self.pulse_cooldown = Timer(clock)
        self.projectile_count = 0

        self.velocity = np.array([0.005, 0.005, 0.0])
        self.acceleration = 0.003
        self.max_velocity = 8.0

    def set_velocity(self, velocity: Any) -> None:
        """Replace the ship's velocity."""
        self.velocity = vec3(velocity)

    def projectile_destroyed(self) -> None:
        """Free a slot once one of the player's projectiles is gone."""
        self.projectile_count -= 1

    def fire_projectile(self, texture: Any) -> Projectile | None:
        """Fire along the bearing, or return None while on cooldown or at the limit."""
        if not self.projectile_cooldown.finished or self.projectile_count >= MAX_PROJECTILES:
            return None
        projectile = Projectile(
            self.position, self.bearing, self, self.geometry, texture, clock=self.clock
        )
        projectile.rotation = self.rotation
        self.projectile_cooldown.start(0.15)
        self.projectile_count += 1
        return projectile

    def fire_pulse(self, texture: Any) -> Pulse | None:
        """Emit a pulse, or return None while the previous one is cooling down."""
        if not self.pulse_cooldown.finished:
            return None
        pulse = Pulse(self.position, self, self.geometry, texture, clock=self.clock)
        self.pulse_cooldown.start(2.1)
        return pulse

    def collide(self, other: GameObject) -> None:
        """Apply pickups, or take ramming damage from enemies and the boss."""
        if other.object_type is ObjectType.COLLECTIBLE:
            kind = getattr(other, "sub_type", None)
            if kind == ShieldCollectible.sub_type:
                self.shield_collectible_count += 1
            elif kind == HealthCollectible.sub_type:
                self._hitpoints = min(self._hitpoints + 2, MAX_PLAYER_HITPOINTS)
            elif kind == FuelCollectible.sub_type:
                self.fuel = min(self.fuel + 25, MAX_FUEL)
        elif (
            other.object_type in (ObjectType.ENEMY, ObjectType.MOTHERSHIP)
            and not self.is_invincible
        ):
            if self.dmg_cooldown.finished:
                self._hitpoints -= 1
                self._destroy_if_dead(3.0)
                self.dmg_cooldown.start(0.8)

    def update(self, delta_time: float) -> None:
        """Handle boost, shields and speed limit, then move."""
        if not self.use_boost or self.fuel <= 0:
            self.acceleration = 0.003
        else:
            self.acceleration = 0.012
            if self.fuel_consumption.finished:
                self.fuel -= 1.0
                self.fuel_consumption.start(0.2)

        if self.shield_collectible_count >= SHIELDS_FOR_INVINCIBILITY and not self.is_invincible:
            self.shield_collectible_count -= SHIELDS_FOR_INVINCIBILITY
            self.is_invincible = True
            self.invincibility_duration.start(10.0)

        if self.invincibility_duration.finished:
            self.is_invincible = False

        speed = float(np.linalg.norm(self.velocity))
        if speed >= self.max_velocity and speed > 0.0:
            self.velocity = self.velocity / speed * self.max_velocity

        if self.is_destroyed:
            self.velocity = np.zeros(3)
            self.acceleration = 0.0

        self.position = self.position + self.velocity * delta_time