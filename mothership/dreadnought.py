"""A ranged enemy circling on an ellipse and emitting pulses."""

from __future__ import annotations

import math
from typing import Any

from .enemy import EnemyGameObject
from .pulse import Pulse
from .timer import DEFAULT_CLOCK, Clock, Timer


class DreadnoughtEnemy(EnemyGameObject):
    """Moves along an ellipse around its centre and fires pulses on a cooldown."""

    def __init__(
        self,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        pulse_texture: Any = None,
        mothership: Any = None,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        super().__init__(position, geometry, texture, mothership, clock=clock)
        self.width = 4.0
        self.height = 1.8
        self.center = self.position.copy()
        self.angular_movement = 0.0
        self.pulse_texture = pulse_texture
        self.shooting_cooldown = Timer(self.clock)

    def fire(self) -> Pulse | None:
        """Emit a pulse into the world, or return None while cooling down or destroyed."""
        if not self.shooting_cooldown.finished or self.is_destroyed:
            return None
        pulse = Pulse(self.position, self, self.geometry, self.pulse_texture, clock=self.clock)
        self.shooting_cooldown.start(2.1)
        self._spawn(pulse)
        return pulse

    def update(self, delta_time: float) -> None:
        """Advance along the ellipse, drift with the mothership and try to fire."""
        if self.is_destroyed:
            return

        self.center = self.center + self._mothership_drift(delta_time)
        self.angular_movement += 2.5 * delta_time

        x = (self.width / 2.0) * math.cos(self.angular_movement) + self.center[0]
        y = (self.height / 2.0) * math.sin(self.angular_movement) + self.center[1]
        self.position = (x, y, 0.0)

        self.fire()