"""A chain of linked objects swinging below the mothership."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from .game_object import DEFAULT_CLOCK, GameObject, ObjectType
from .timer import Clock


class HierarchicalTransformation(GameObject):
    """Places each link at the end of the previous one, each spinning faster.

    The first link hangs below the boss; link ``k`` (counting from one)
    turns to ``k`` times its predecessor's heading plus a steady spin.
    """

    def __init__(
        self,
        links: Sequence[GameObject],
        boss: Any,
        position: Any,
        geometry: Any = None,
        texture: Any = None,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        super().__init__(position, geometry, texture, clock=clock)
        if not links:
            raise ValueError("a hierarchy needs at least one link")
        self.links = list(links)
        self.boss = boss
        self.offset = 1.5
        self.angular_speed = math.radians(50.0)
        self.object_type = ObjectType.HIERARCHY

        self.links[0].position = self.position
        for link in self.links:
            link.object_type = ObjectType.HIERARCHY
            link.radius = 1.0
            link.is_invincible = True

    def set_transform(self, position: Any, rotation: float) -> None:
        """Place and turn the root link."""
        root = self.links[0]
        root.position = position
        root.rotation = rotation

    def update(self, delta_time: float) -> None:
        """Turn every link and hang it from its predecessor."""
        spin = self.angular_speed * delta_time
        previous = None
        for multiplier, link in enumerate(self.links, start=1):
            reference = link if previous is None else previous
            heading = reference.bearing
            link.rotation = multiplier * math.atan2(heading[1], heading[0]) + spin
            if previous is None:
                link.position = self.boss.position - (0.0, 2.0, 0.0)
            else:
                link.position = previous.position + previous.bearing * self.offset
            previous = link

    def collide(self, other: GameObject) -> None:
        """The chain never collides."""